"""Parser for ``snap list --all <name>`` output."""

import logging

from snapman.models.snap import Revision, RevisionStatus

logger = logging.getLogger(__name__)


def parse_revisions(output: str | None) -> list[Revision]:
    """Parse the retained revisions of a snap.

    Columns are name, version, revision, ..., notes (last column). A row
    is disabled only when its notes column is exactly ``disabled``.

    Args:
        output: Raw stdout of ``snap list --all <name> --unicode=never``.

    Returns:
        Revisions in source order. Empty when output is empty.
    """
    if not output:
        return []

    revisions: list[Revision] = []
    for line in output.strip().split("\n")[1:]:
        parts = line.split()
        if len(parts) < 3:
            continue

        try:
            number = int(parts[2])
        except ValueError:
            logger.debug("Skipping revision row with non-numeric revision: %r", line[:100])
            continue

        status = RevisionStatus.DISABLED if parts[-1] == "disabled" else RevisionStatus.CURRENT
        revisions.append(Revision(version=parts[1], revision=number, status=status))
    return revisions
