"""Parser for ``snap list`` output."""

import logging

from snapman.models.snap import InstalledSnap

logger = logging.getLogger(__name__)


def parse_snap_list(output: str | None) -> list[InstalledSnap]:
    """Parse ``snap list --unicode=never`` output.

    The header row ("Name  Version  Rev  Tracking  Publisher  Notes") is
    discarded. Only the name column is required; missing trailing columns
    are left empty.

    Args:
        output: Raw stdout of ``snap list``.

    Returns:
        Installed snaps in source order. Empty when output is empty.
    """
    if not output:
        return []

    snaps: list[InstalledSnap] = []
    for line in output.strip().split("\n")[1:]:
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 6:
            logger.debug("Short snap list line (parts=%d): %r", len(parts), line[:100])
        padded = parts + [""] * (6 - len(parts))
        snaps.append(
            InstalledSnap(
                name=padded[0],
                version=padded[1],
                revision=padded[2],
                tracking=padded[3],
                publisher=padded[4],
                notes=padded[5],
            )
        )
    return snaps
