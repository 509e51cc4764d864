"""
Shell command runner — execute lifecycle script commands.

Runs a command through the shell in the installation root and captures
its output.  Never raises on a non-zero exit; the caller decides what
a failure means.
"""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 300


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one shell command."""

    command: str
    returncode: int
    output: str = ""
    stderr: str = ""
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(command: str, cwd: Path, timeout: int = DEFAULT_TIMEOUT) -> CommandResult:
    """Run ``command`` through the shell with ``cwd`` as working directory.

    A timeout is reported as returncode -1 with the reason in ``stderr``.
    """
    logger.debug("Executing: %s (cwd=%s)", command, cwd)
    start = time.monotonic()

    try:
        result = subprocess.run(
            command,
            shell=True,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.warning("Command timed out after %ds: %s", timeout, command)
        return CommandResult(
            command=command,
            returncode=-1,
            stderr=f"Timed out after {timeout}s",
            duration_ms=elapsed_ms,
        )

    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.debug("Exit %d in %dms: %s", result.returncode, elapsed_ms, command)
    return CommandResult(
        command=command,
        returncode=result.returncode,
        output=result.stdout.strip(),
        stderr=result.stderr.strip(),
        duration_ms=elapsed_ms,
    )
