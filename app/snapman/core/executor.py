"""Execution of state-changing snap commands.

A :class:`CommandExecutor` runs one command at a time, wrapped in a
progress callback, and turns the exit status into an
:class:`~snapman.models.action.ActionResult`. Privilege escalation is
held in an explicit :class:`SudoSession` so a multi-command action
authenticates once and then issues all of its commands.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from typing import Protocol

from snapman.core.config import DEFAULT_COMMAND_TIMEOUT
from snapman.core.errors import AuthenticationError
from snapman.models.action import ActionResult
from snapman.utils.shell import CommandResult, is_root, run_command, run_interactive

logger = logging.getLogger(__name__)


class Progress(Protocol):
    """Progress feedback around a blocking command."""

    def on_start(self, title: str) -> None:
        """Called right before the command starts."""

    def on_finish(self, title: str, success: bool) -> None:
        """Called after the command has finished."""


class NullProgress:
    """Progress callback that does nothing."""

    def on_start(self, title: str) -> None:
        pass

    def on_finish(self, title: str, success: bool) -> None:
        pass


class SudoSession:
    """Sudo credential state shared by the commands of one action.

    Attributes:
        enabled: Whether sudo should be used at all.
    """

    def __init__(
        self,
        enabled: bool = True,
        runner: Callable[[list[str]], int] = run_interactive,
    ) -> None:
        """Initialize the session.

        Args:
            enabled: If False, commands run without sudo.
            runner: Interactive command runner used for ``sudo -v``.
        """
        self.enabled = enabled
        self._runner = runner

    @property
    def active(self) -> bool:
        """Check if commands need a sudo prefix."""
        return self.enabled and not is_root()

    def ensure_authenticated(self) -> None:
        """Validate sudo credentials, prompting for a password if needed.

        Called once at the start of every state-changing action.

        Raises:
            AuthenticationError: If ``sudo -v`` fails.
        """
        if not self.active:
            return

        logger.debug("Validating sudo credentials")
        returncode = self._runner(["sudo", "-v"])
        if returncode != 0:
            msg = f"sudo authentication failed (exit code {returncode})"
            raise AuthenticationError(msg)

    def wrap(self, args: list[str]) -> list[str]:
        """Prefix a command with sudo when the session is active."""
        if self.active:
            return ["sudo", *args]
        return list(args)


class CommandExecutor:
    """Runs state-changing commands with progress feedback.

    Attributes:
        dry_run: If True, only log commands without executing them.
    """

    def __init__(
        self,
        session: SudoSession,
        progress: Progress | None = None,
        *,
        timeout: float = DEFAULT_COMMAND_TIMEOUT,
        dry_run: bool = False,
    ) -> None:
        """Initialize the executor.

        Args:
            session: Sudo session used for privileged commands.
            progress: Progress callback. Defaults to no feedback.
            timeout: Timeout in seconds for every command.
            dry_run: If True, only simulate commands.
        """
        self.session = session
        self.progress: Progress = progress or NullProgress()
        self.timeout = timeout
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if executor is in dry-run mode."""
        return self._dry_run

    def authenticate(self) -> None:
        """Authenticate once before issuing an action's commands.

        Raises:
            AuthenticationError: If sudo rejects the credentials.
        """
        if self.dry_run:
            logger.info("Dry-run: skipping sudo authentication")
            return
        self.session.ensure_authenticated()

    def run(
        self,
        args: list[str],
        *,
        title: str,
        description: str | None = None,
        privileged: bool = True,
    ) -> ActionResult:
        """Run one command and report its outcome.

        There is no retry. Timeouts and missing executables are reported
        as failures instead of being raised.

        Args:
            args: Command without the sudo prefix.
            title: Progress title shown while the command runs.
            description: Text for the result. Defaults to the title.
            privileged: Whether to run through the sudo session.

        Returns:
            ActionResult for the command.
        """
        full_args = self.session.wrap(args) if privileged else list(args)
        description = description or title

        if self.dry_run:
            logger.info("Dry-run: would run %s", " ".join(full_args))
            return ActionResult(
                description=description,
                args=tuple(full_args),
                success=True,
                message=f"Dry-run: would run {shlex.join(full_args)}",
            )

        logger.info("Running: %s", " ".join(full_args))
        self.progress.on_start(title)
        try:
            result = run_command(full_args, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            self.progress.on_finish(title, False)
            logger.warning("Command timed out after %ss: %s", self.timeout, full_args)
            return ActionResult(
                description=description,
                args=tuple(full_args),
                success=False,
                error=f"Timed out after {self.timeout:g}s",
            )
        except OSError as e:
            self.progress.on_finish(title, False)
            logger.warning("Command could not be started: %s", e)
            return ActionResult(
                description=description,
                args=tuple(full_args),
                success=False,
                error=str(e),
            )

        self.progress.on_finish(title, result.success)
        return self._create_result(description, full_args, result)

    @staticmethod
    def _create_result(description: str, args: list[str], result: CommandResult) -> ActionResult:
        """Create an ActionResult from a CommandResult.

        Args:
            description: Description of the command.
            args: Executed argument vector.
            result: The command execution result.

        Returns:
            ActionResult with appropriate success/error info.
        """
        if result.success:
            return ActionResult(
                description=description,
                args=tuple(args),
                success=True,
                message=result.stdout.strip() or None,
            )

        error_msg = result.stderr.strip() or result.stdout.strip() or "snap command failed"
        logger.debug("Command failed (%d): %s", result.returncode, error_msg)
        return ActionResult(
            description=description,
            args=tuple(args),
            success=False,
            error=error_msg,
        )
