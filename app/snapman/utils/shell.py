"""Subprocess helpers for talking to the snap CLI and sudo."""

import os
import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a finished command.

    Attributes:
        stdout: Captured standard output.
        stderr: Captured standard error.
        returncode: Exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the command exited with status 0."""
        return self.returncode == 0


def run_command(args: list[str], *, timeout: float | None = 60.0) -> CommandResult:
    """Run a command and capture its output as text.

    A nonzero exit status is returned, not raised.

    Args:
        args: Argument vector, no shell involved.
        timeout: Seconds to wait before giving up.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If the command exceeds the timeout.
        FileNotFoundError: If the executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if an executable is on PATH."""
    return shutil.which(name) is not None


def run_interactive(args: list[str]) -> int:
    """Run a command attached to the user's terminal.

    Output is not captured, so ``sudo -v`` can ask for a password.

    Args:
        args: Argument vector.

    Returns:
        Exit status of the command.

    Raises:
        OSError: If the command cannot be started.
    """
    return subprocess.run(args, check=False).returncode


def is_root() -> bool:
    """Check whether the current process runs with effective UID 0."""
    return os.geteuid() == 0
