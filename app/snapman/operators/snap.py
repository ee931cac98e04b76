"""Snap operator.

Builds the argument vector of every state-changing ``snap`` command the
menu can issue and hands it to a :class:`CommandExecutor`.
"""

import logging
from pathlib import Path

from snapman.core.executor import CommandExecutor
from snapman.models.action import ActionResult
from snapman.utils.shell import command_exists

logger = logging.getLogger(__name__)

# Bounds for "snap set system refresh.retain"
RETAIN_MIN = 2
RETAIN_MAX = 20


class SnapOperator:
    """Operator for state-changing snap commands.

    Every method issues exactly one command and returns its result.
    Callers authenticate once per action through :meth:`authenticate`.

    Example:
        >>> operator = SnapOperator(executor)
        >>> operator.authenticate()
        >>> operator.revert("firefox").success
        True
    """

    def __init__(self, executor: CommandExecutor) -> None:
        """Initialize the operator.

        Args:
            executor: Executor that runs the commands.
        """
        self.executor = executor

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self.executor.dry_run

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return command_exists("snap")

    def authenticate(self) -> None:
        """Authenticate once for the commands of one action."""
        self.executor.authenticate()

    def revert(self, name: str) -> ActionResult:
        """Revert a snap to its previous revision."""
        return self.executor.run(
            ["snap", "revert", name],
            title=f"Reverting {name}...",
            description=f"revert {name}",
        )

    def revert_to(self, name: str, revision: int) -> ActionResult:
        """Revert a snap to a specific retained revision."""
        return self.executor.run(
            ["snap", "revert", name, f"--revision={revision}"],
            title=f"Reverting {name} to revision {revision}...",
            description=f"revert {name} to revision {revision}",
        )

    def abort(self, change_id: str) -> ActionResult:
        """Abort a running change."""
        return self.executor.run(
            ["snap", "abort", change_id],
            title=f"Aborting process {change_id}...",
            description=f"abort change {change_id}",
        )

    def switch_channel(self, name: str, channel: str) -> ActionResult:
        """Refresh a snap onto another channel."""
        return self.executor.run(
            ["snap", "refresh", name, f"--channel={channel}"],
            title=f"Switching {name} to {channel}...",
            description=f"switch {name} to {channel}",
        )

    def hold(self, name: str) -> ActionResult:
        """Hold automatic refreshes of a snap."""
        return self.executor.run(
            ["snap", "refresh", "--hold", name],
            title=f"Holding {name}...",
            description=f"hold {name}",
        )

    def unhold(self, name: str) -> ActionResult:
        """Remove the refresh hold of a snap."""
        return self.executor.run(
            ["snap", "refresh", "--unhold", name],
            title=f"Unholding {name}...",
            description=f"unhold {name}",
        )

    def set_metered_hold(self, hold: bool) -> ActionResult:
        """Hold or allow refreshes on metered connections.

        Args:
            hold: True sets ``refresh.metered=hold``, False resets it.
        """
        value = "hold" if hold else "null"
        title = (
            "Setting metered connection hold..."
            if hold
            else "Allowing metered connection updates..."
        )
        return self.executor.run(
            ["snap", "set", "system", f"refresh.metered={value}"],
            title=title,
            description=f"set refresh.metered={value}",
        )

    def set_retain(self, value: int) -> ActionResult:
        """Set how many revisions snapd keeps per snap.

        Args:
            value: Retention limit, between RETAIN_MIN and RETAIN_MAX.

        Raises:
            ValueError: If the value is out of range.
        """
        if not RETAIN_MIN <= value <= RETAIN_MAX:
            msg = f"Retention limit must be between {RETAIN_MIN} and {RETAIN_MAX}, got {value}"
            raise ValueError(msg)
        return self.executor.run(
            ["snap", "set", "system", f"refresh.retain={value}"],
            title="Setting revision retention limit...",
            description=f"set refresh.retain={value}",
        )

    def connect(self, plug: str) -> ActionResult:
        """Connect a plug to its default slot."""
        return self.executor.run(
            ["snap", "connect", plug],
            title=f"Connecting {plug}...",
            description=f"connect {plug}",
        )

    def disconnect(self, plug: str) -> ActionResult:
        """Disconnect a plug."""
        return self.executor.run(
            ["snap", "disconnect", plug],
            title=f"Disconnecting {plug}...",
            description=f"disconnect {plug}",
        )

    def download(self, name: str, target_dir: Path) -> ActionResult:
        """Download a snap and its assertion into a directory.

        Runs unprivileged; the target directory belongs to the user.
        """
        return self.executor.run(
            ["snap", "download", name, f"--target-directory={target_dir}"],
            title=f"Downloading {name} to {target_dir}...",
            description=f"download {name}",
            privileged=False,
        )

    def ack(self, assert_file: Path) -> ActionResult:
        """Acknowledge an assertion file."""
        return self.executor.run(
            ["snap", "ack", str(assert_file)],
            title=f"Acknowledging {assert_file}...",
            description=f"ack {assert_file.name}",
        )

    def install_file(self, snap_file: Path) -> ActionResult:
        """Install a snap from a local ``.snap`` file."""
        return self.executor.run(
            ["snap", "install", str(snap_file)],
            title=f"Installing {snap_file.name}...",
            description=f"install {snap_file.name}",
        )
