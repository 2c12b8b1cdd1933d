"""
Publishing pipeline.

- locator: Latest dated post in a year directory
- index / archive / homepage: Index documents on disk
- mirror: rsync transfers and ssh existence checks
- editor: Editor launcher and today's post
- publish: The publish workflow
- cli: Command line interface
"""
