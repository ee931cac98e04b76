"""Snap models parsed from the snap CLI.

These records are transient views: they are rebuilt from fresh
``snap`` output every time a menu screen needs them.
"""

from dataclasses import dataclass, field
from enum import Enum

# Change states that mean the change has finished
TERMINAL_CHANGE_STATES: frozenset[str] = frozenset({"Done", "Error"})

# Placeholder used when a change row has no recoverable summary
NO_SUMMARY = "(no summary)"


class RevisionStatus(Enum):
    """Standing of an installed revision.

    Attributes:
        CURRENT: Any revision not flagged as disabled.
        DISABLED: A retained, inactive revision.
    """

    CURRENT = "current"
    DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class InstalledSnap:
    """A row of ``snap list``.

    Attributes:
        name: Snap name, unique within an installation.
        version: Installed version string.
        revision: Installed revision as printed (may be ``x1`` for sideloads).
        tracking: Tracked channel, ``-`` when not tracking.
        publisher: Publisher name.
        notes: Notes column (``-``, ``base``, ``disabled``, ...).
    """

    name: str
    version: str = field(default="")
    revision: str = field(default="")
    tracking: str = field(default="")
    publisher: str = field(default="")
    notes: str = field(default="")

    def __post_init__(self) -> None:
        """Validate snap data after initialization."""
        if not self.name:
            msg = "Snap name cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Channel:
    """A channel listed in the ``channels:`` section of ``snap info``.

    A channel with neither version nor revision is valid and means no
    information is available, including the ``^`` "same as above" marker.

    Attributes:
        name: Channel name (e.g. ``stable``, ``1.2/edge``).
        version: Version published in the channel, if shown.
        revision: Revision published in the channel, if shown.
    """

    name: str
    version: str | None = None
    revision: int | None = None


@dataclass(frozen=True, slots=True)
class Revision:
    """A retained revision from ``snap list --all <name>``.

    Attributes:
        version: Version string of the revision.
        revision: Numeric revision identifier.
        status: Whether the revision is current or disabled.
    """

    version: str
    revision: int
    status: RevisionStatus = RevisionStatus.CURRENT


@dataclass(frozen=True, slots=True)
class PendingChange:
    """A non-terminal row of ``snap changes``.

    Attributes:
        id: Change ID as printed by snapd.
        status: Change status (``Doing``, ``Undoing``, ``Wait``, ...).
        summary: Free-text summary, or ``(no summary)``.
    """

    id: str
    status: str
    summary: str = NO_SUMMARY

    @property
    def is_active(self) -> bool:
        """Check if the change can still be aborted."""
        return self.status not in TERMINAL_CHANGE_STATES


@dataclass(frozen=True, slots=True)
class Connection:
    """A row of ``snap connections <name>``.

    Attributes:
        interface: Interface name.
        plug: Plug reference (``snap:plug``).
        slot: Slot reference, ``-`` when unconnected.
        note: Notes column, ``manual`` for user-made connections.
    """

    interface: str
    plug: str
    slot: str
    note: str = "-"

    @property
    def is_connectable(self) -> bool:
        """Check if the plug has no slot and can be connected."""
        return self.slot == "-"

    @property
    def is_revocable(self) -> bool:
        """Check if the connection was made manually and can be revoked."""
        return self.note == "manual"
