#!/usr/bin/env python3
"""
mirror.py
---------
rsync and ssh wrappers for moving the capsule between machines.

Mirror runs one-way rsync transfers with one of three policies:

    UPDATE     -rtOq --update   skip files that are newer at the destination
    OVERWRITE  -rtO --quiet     replace everything regardless of edit date
    DELETE     -rtOq --delete   also remove destination files missing at the source

RemoteChecker asks the server over ssh whether a file exists.

Both block until the command finishes and abandon it after ``timeout``
seconds.

Usage:
    from soyuz.pipeline.mirror import Mirror, SyncPolicy

    mirror = Mirror(timeout=config.sync_timeout, logger=logger)
    mirror.sync(config.remote_root, config.local_root)                 # down
    mirror.sync(config.local_root, config.remote_root, SyncPolicy.DELETE)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shlex
import subprocess
from enum import Enum
from typing import Dict, List, Optional

# --- Local imports ---
from soyuz.core.config import DEFAULT_SYNC_TIMEOUT
from soyuz.core.exceptions import (
    SyncError,
    SyncTimeoutError,
    UnexpectedRemoteResponseError,
)
from soyuz.core.logging_manager import SoyuzLogger, safe_logger


class SyncPolicy(Enum):
    """How rsync treats files already at the destination."""

    UPDATE = "update-only"
    OVERWRITE = "overwrite"
    DELETE = "delete-extraneous"


RSYNC_FLAGS: Dict[SyncPolicy, List[str]] = {
    SyncPolicy.UPDATE: ["-rtOq", "--update"],
    SyncPolicy.OVERWRITE: ["-rtO", "--quiet"],
    SyncPolicy.DELETE: ["-rtOq", "--delete"],
}


def _with_separator(path: str) -> str:
    """Exactly one trailing ``/`` so rsync copies directory contents."""
    return f"{path.rstrip('/')}/"


def _as_text(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def run_command(
    command: List[str],
    timeout: float,
    logger: Optional[SoyuzLogger] = None,
) -> subprocess.CompletedProcess:
    """
    Run an external command, translating failures into SyncError.

    Args:
        command: Program and arguments
        timeout: Seconds to wait before giving up
        logger: Optional logger

    Returns:
        CompletedProcess with captured text output

    Raises:
        SyncTimeoutError: If the command did not finish in time
        SyncError: If the program is missing or exits non-zero
    """
    log = safe_logger(logger)
    log.log_debug("Running command", {"command": shlex.join(command)})
    try:
        return subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise SyncTimeoutError(
            f"{command[0]} did not finish within {timeout:g}s",
            command=command,
            stderr=_as_text(e.stderr),
        ) from e
    except subprocess.CalledProcessError as e:
        raise SyncError(
            f"{command[0]} exited with status {e.returncode}",
            command=command,
            stderr=_as_text(e.stderr),
        ) from e
    except OSError as e:
        raise SyncError(
            f"Failed to run {command[0]}: {e.strerror or e}",
            command=command,
        ) from e


class Mirror:
    """
    One-way directory synchronization through rsync.

    Attributes:
        timeout: Seconds allowed per transfer
        rsync: rsync executable
        logger: Logger (NullLogger if none given)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_SYNC_TIMEOUT,
        rsync: str = "rsync",
        logger: Optional[SoyuzLogger] = None,
    ) -> None:
        self.timeout = timeout
        self.rsync = rsync
        self.logger = safe_logger(logger)

    def command(
        self, source: str, destination: str, policy: SyncPolicy = SyncPolicy.UPDATE
    ) -> List[str]:
        """rsync command line for a transfer."""
        return [
            self.rsync,
            *RSYNC_FLAGS[policy],
            _with_separator(source),
            _with_separator(destination),
        ]

    def sync(
        self, source: str, destination: str, policy: SyncPolicy = SyncPolicy.UPDATE
    ) -> None:
        """
        Mirror ``source`` into ``destination``.

        Args:
            source: Source directory (local path or host:path)
            destination: Destination directory (local path or host:path)
            policy: Transfer policy (default: update-only)

        Raises:
            SyncTimeoutError: If rsync did not finish in time
            SyncError: If rsync is missing or fails
        """
        run_command(self.command(source, destination, policy), self.timeout, self.logger)
        self.logger.log_operation(
            "sync",
            {"source": source, "destination": destination, "policy": policy.value},
        )


class RemoteChecker:
    """
    File existence check on the server over ssh.

    Attributes:
        timeout: Seconds allowed for the ssh call
        ssh: ssh executable
    """

    TRUE = "true"
    FALSE = "false"

    def __init__(
        self,
        timeout: float = DEFAULT_SYNC_TIMEOUT,
        ssh: str = "ssh",
        logger: Optional[SoyuzLogger] = None,
    ) -> None:
        self.timeout = timeout
        self.ssh = ssh
        self.logger = safe_logger(logger)

    def command(self, host: str, path: str) -> List[str]:
        """
        ssh command line testing for ``path`` on ``host``.

        A leading ``~/`` stays unquoted so the remote shell expands it.
        """
        if path.startswith("~/"):
            quoted = "~/" + shlex.quote(path[2:])
        else:
            quoted = shlex.quote(path)
        test = (
            f"[[ -f {quoted} ]] "
            f"&& echo '{self.TRUE}' || echo '{self.FALSE}';"
        )
        return [self.ssh, "-q", host, test]

    def exists(self, host: str, path: str) -> bool:
        """
        Whether ``path`` is a regular file on ``host``.

        Raises:
            SyncTimeoutError: If ssh did not finish in time
            SyncError: If ssh is missing or the host is unreachable
            UnexpectedRemoteResponseError: If the output is neither token
        """
        command = self.command(host, path)
        result = run_command(command, self.timeout, self.logger)
        response = result.stdout.strip()

        if response == self.TRUE:
            return True
        if response == self.FALSE:
            return False

        raise UnexpectedRemoteResponseError(
            f"Something went wrong checking {host}: {response!r}",
            response=response,
            command=command,
        )
