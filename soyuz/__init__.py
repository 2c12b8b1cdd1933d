"""
Soyuz
=====

A command line program for publishing Gemini posts.

Posts live in a local capsule directory bucketed by year
(``<local_dir>/<year>/YYYY-MM-DD.gmi``). Publishing keeps two index
documents in step with the posts on disk and mirrors the whole tree to
a remote server with rsync.

Main Components:
    - core: Configuration, logging, exceptions, paths
    - dataclasses: Post and IndexDocument structures
    - pipeline: Post location, archive/homepage indexes, mirroring, publish
    - pipeline.cli: Click command line interface
    - utils: Filename/date helpers

Primary Interfaces:
    - soyuz.pipeline.cli: Command line entry point
    - soyuz.pipeline.publish.PublishOrchestrator: Publish workflow

Example Usage:
    >>> from soyuz.core.config import load_config
    >>> from soyuz.pipeline.publish import PublishOrchestrator
    >>> config = load_config()
    >>> stats = PublishOrchestrator(config).run()
"""

__version__ = "0.3.0"
__author__ = "Soyuz Project"

__all__ = ["__version__"]
