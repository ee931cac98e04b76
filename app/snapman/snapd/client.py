"""Read-only queries against the snap CLI.

Each query runs ``snap`` once and feeds the output to a parser. Failed
queries yield empty output, so the menus see "nothing to show" rather
than an error.
"""

import logging
import subprocess

from snapman.core.config import DEFAULT_QUERY_TIMEOUT
from snapman.core.errors import SnapNotAvailableError
from snapman.models.snap import Channel, Connection, InstalledSnap, PendingChange, Revision
from snapman.parsers import (
    parse_changes,
    parse_channels,
    parse_connections,
    parse_revisions,
    parse_snap_list,
)
from snapman.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class SnapClient:
    """Queries snapd state through the snap CLI.

    Nothing is cached: every call reflects the live state of snapd.
    """

    def __init__(self, timeout: float = DEFAULT_QUERY_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            timeout: Timeout in seconds for each query.
        """
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return command_exists("snap")

    def ensure_available(self) -> None:
        """Raise unless the snap CLI can be used.

        Raises:
            SnapNotAvailableError: If ``snap`` is not on PATH.
        """
        if not self.is_available():
            msg = "Snap is not installed on this system"
            raise SnapNotAvailableError(msg)

    def _query(self, args: list[str]) -> str:
        """Run a read-only snap command and return its stdout.

        Args:
            args: Command and arguments.

        Returns:
            Stdout on success, an empty string otherwise.
        """
        try:
            result = run_command(args, timeout=self.timeout)
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.warning("Query %s failed: %s", " ".join(args), e)
            return ""

        if not result.success:
            logger.debug(
                "Query %s exited %d: %s",
                " ".join(args),
                result.returncode,
                result.stderr.strip(),
            )
            return ""
        return result.stdout

    def list_installed(self) -> list[InstalledSnap]:
        """Return installed snaps."""
        return parse_snap_list(self._query(["snap", "list", "--unicode=never"]))

    def installed_names(self) -> list[str]:
        """Return the names of installed snaps."""
        return [snap.name for snap in self.list_installed()]

    def info(self, name: str) -> str:
        """Return the raw ``snap info`` report for a snap."""
        return self._query(["snap", "info", name])

    def channels(self, name: str) -> list[Channel]:
        """Return the channels a snap is published in."""
        return parse_channels(self.info(name))

    def revisions(self, name: str) -> list[Revision]:
        """Return the retained revisions of a snap."""
        return parse_revisions(self._query(["snap", "list", "--all", name, "--unicode=never"]))

    def pending_changes(self) -> list[PendingChange]:
        """Return changes that are not Done or Error."""
        return parse_changes(self._query(["snap", "changes"]))

    def connections(self, name: str) -> list[Connection]:
        """Return the interface connections of a snap."""
        return parse_connections(self._query(["snap", "connections", name]))

    def get_config(self, name: str) -> str:
        """Return the raw ``snap get`` output for a snap."""
        return self._query(["snap", "get", name])

    def get_system_option(self, key: str) -> str | None:
        """Return a system option such as ``refresh.retain``.

        Args:
            key: Option key.

        Returns:
            The value, or None if it is unset.
        """
        value = self._query(["snap", "get", "system", key]).strip()
        return value or None
