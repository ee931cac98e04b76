"""Parser for ``snap connections <name>`` output."""

from snapman.models.snap import Connection


def parse_connections(output: str | None) -> list[Connection]:
    """Parse the interface connections of a snap.

    Columns are interface, plug, slot and notes. Rows without a notes
    column get ``-``.

    Args:
        output: Raw stdout of ``snap connections <name>``.

    Returns:
        Connections in source order. Empty when output is empty.
    """
    if not output:
        return []

    connections: list[Connection] = []
    for line in output.strip().split("\n")[1:]:
        parts = line.split()
        if len(parts) < 3:
            continue
        connections.append(
            Connection(
                interface=parts[0],
                plug=parts[1],
                slot=parts[2],
                note=parts[3] if len(parts) > 3 else "-",
            )
        )
    return connections


def connect_candidates(connections: list[Connection]) -> list[Connection]:
    """Return connections whose plug has no slot.

    Args:
        connections: Parsed connections.

    Returns:
        Connections whose slot column is ``-``, in source order.
    """
    return [c for c in connections if c.is_connectable]


def revoke_candidates(connections: list[Connection]) -> list[Connection]:
    """Return connections that were made manually.

    Args:
        connections: Parsed connections.

    Returns:
        Connections whose note column is ``manual``, in source order.
    """
    return [c for c in connections if c.is_revocable]
