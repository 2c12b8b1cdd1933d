#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Soyuz project.

This module defines the exceptions raised by the publishing workflow so
the CLI can report each failure with a specific, human-readable message.

Exception Hierarchy:
    Exception (built-in)
    ├── ConfigUnavailableError - Settings file missing or invalid
    ├── DirectoryUnavailableError - Year directory cannot be listed/created
    ├── MalformedPostError - Post lacks its title heading line
    ├── SyncError - rsync/ssh failures
    │   ├── SyncTimeoutError - rsync/ssh exceeded the configured timeout
    │   └── UnexpectedRemoteResponseError - Remote check output not understood
    └── EditorError - Editor could not be launched

Usage:
    from soyuz.core.exceptions import SyncError, MalformedPostError

    try:
        orchestrator.run()
    except MalformedPostError as e:
        logger.log_error(e)
    except SyncError as e:
        logger.log_error(e, {"stage": "sync"})
"""


class ConfigUnavailableError(Exception):
    """
    Exception for configuration loading failures.

    Raised when the settings file cannot be used:
    - File does not exist (run ``soyuz settings`` first)
    - YAML syntax errors
    - Document is not a mapping
    - Required keys (``local_dir``, ``remote_dir``) missing or empty
    - Numeric settings out of range

    Examples:
        >>> raise ConfigUnavailableError("Config file not found: ~/.config/soyuz/config.yaml")
        >>> raise ConfigUnavailableError("Required setting 'remote_dir' missing or empty")
    """

    pass


class DirectoryUnavailableError(Exception):
    """
    Exception for year directories that cannot be listed.

    The publish workflow recovers from the first occurrence by creating
    the directory; it becomes fatal when creation fails or the directory
    still cannot be listed afterwards.

    Attributes:
        directory: Path that could not be listed or created

    Examples:
        >>> raise DirectoryUnavailableError("Cannot list directory", directory=path)
    """

    def __init__(self, message: str, directory=None) -> None:
        super().__init__(message)
        self.directory = directory


class MalformedPostError(Exception):
    """
    Exception for posts that do not start with a title heading.

    Every post must begin with ``# <title>``; the title is what appears
    in the archive and homepage entries. No index is touched when this
    is raised.

    Examples:
        >>> raise MalformedPostError("2024-06-01.gmi: first line must start with '# '")
    """

    pass


class SyncError(Exception):
    """
    Base exception for mirroring and remote check failures.

    Raised when rsync or ssh cannot be run, exits with a non-zero status,
    or the remote cannot be reached. The underlying command's diagnostic
    output is kept on the exception.

    Attributes:
        command: Command line that failed (list of arguments)
        stderr: Diagnostic output from the command, if any

    Examples:
        >>> raise SyncError("rsync exited with status 23", command=cmd, stderr=err)

    See Also:
        SyncTimeoutError, UnexpectedRemoteResponseError
    """

    def __init__(self, message: str, command=None, stderr: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.stderr = stderr


class SyncTimeoutError(SyncError):
    """
    Exception for rsync/ssh calls that did not finish in time.

    Examples:
        >>> raise SyncTimeoutError("rsync did not finish within 300s", command=cmd)
    """

    pass


class UnexpectedRemoteResponseError(SyncError):
    """
    Exception for a remote existence check that returned neither token.

    The raw response is kept verbatim for diagnosis.

    Attributes:
        response: Raw (stripped) output of the remote command

    Examples:
        >>> raise UnexpectedRemoteResponseError("Unexpected response", response="bash: [[: not found")
    """

    def __init__(self, message: str, response: str = "", command=None) -> None:
        super().__init__(message, command=command)
        self.response = response


class EditorError(Exception):
    """
    Exception for editor launch failures.

    Examples:
        >>> raise EditorError("Failed to run editor 'vim': not found")
    """

    pass
