"""Labels for selection lists.

Renders parsed records as single-line labels and recovers identifiers
from labels. The menus pass ``Choice`` pairs around and never need the
``extract_*`` helpers; those keep the label format stable and testable.
"""

import re

from snapman.models.choice import Choice
from snapman.models.snap import Channel, Connection, PendingChange, Revision

LABEL_SEPARATOR = " - "

_REVISION_LABEL_RE = re.compile(r"Rev: ([0-9]+)\)")


def format_channel(channel: Channel) -> str:
    """Render a channel as ``name - version (revision)``.

    Args:
        channel: Parsed channel.

    Returns:
        ``"<name> - <version> (<revision>)"``, ``"<name> - <version>"`` or
        ``"<name>"`` depending on what is known.
    """
    if channel.version is not None and channel.revision is not None:
        return f"{channel.name}{LABEL_SEPARATOR}{channel.version} ({channel.revision})"
    if channel.version is not None:
        return f"{channel.name}{LABEL_SEPARATOR}{channel.version}"
    return channel.name


def extract_channel_name(label: str) -> str:
    """Return the channel name from a channel label."""
    return label.split(LABEL_SEPARATOR, 1)[0]


def format_revision(revision: Revision) -> str:
    """Render a revision as ``version (Rev: N) - status``."""
    return f"{revision.version} (Rev: {revision.revision}){LABEL_SEPARATOR}{revision.status.value}"


def extract_revision(label: str) -> int | None:
    """Return the revision number from a revision label.

    Args:
        label: Label produced by :func:`format_revision`.

    Returns:
        The revision, or None if the label carries none.
    """
    match = _REVISION_LABEL_RE.search(label)
    if match is None:
        return None
    return int(match.group(1))


def format_change(change: PendingChange) -> str:
    """Render a change as ``id - status - summary``."""
    return LABEL_SEPARATOR.join((change.id, change.status, change.summary))


def extract_change_id(label: str) -> str:
    """Return the change ID from a change label."""
    return label.split(LABEL_SEPARATOR, 1)[0]


def format_connection(connection: Connection) -> str:
    """Render a connection as its plug name."""
    return connection.plug


def channel_choices(channels: list[Channel]) -> list[Choice[str]]:
    """Build channel choices whose value is the channel name."""
    return [Choice(label=format_channel(c), value=c.name) for c in channels]


def revision_choices(revisions: list[Revision]) -> list[Choice[Revision]]:
    """Build revision choices whose value is the revision record."""
    return [Choice(label=format_revision(r), value=r) for r in revisions]


def change_choices(changes: list[PendingChange]) -> list[Choice[str]]:
    """Build change choices whose value is the change ID."""
    return [Choice(label=format_change(c), value=c.id) for c in changes]


def connection_choices(connections: list[Connection]) -> list[Choice[str]]:
    """Build connection choices whose value is the plug name."""
    return [Choice(label=format_connection(c), value=c.plug) for c in connections]


def name_choices(names: list[str]) -> list[Choice[str]]:
    """Build choices where label and value are the same string."""
    return [Choice(label=name, value=name) for name in names]
