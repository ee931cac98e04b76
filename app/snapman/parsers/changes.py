"""Parser for ``snap changes`` output.

Example input::

    ID   Status  Spawn               Ready               Summary
    41   Done    yesterday at 09:12 UTC  yesterday at 09:13 UTC  Refresh "firefox" snap
    42   Doing   today at 10:01 UTC  -                   Install "vlc" snap

The summary has no fixed column. It is recovered by finding the last
timestamp-like or ``-`` token and taking everything after it.
"""

import re

from snapman.models.snap import NO_SUMMARY, PendingChange

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}")
_RELATIVE_DAY_RE = re.compile(r"^(today|yesterday)")

# Tokens that still belong to a timestamp: "at", clock times, zone names/offsets
_TIMESTAMP_TAIL_RE = re.compile(r"^(at|[0-9]{1,2}:[0-9]{2}(:[0-9]{2})?|[A-Z]{2,5}|[+-][0-9]{4})$")


def _summary_start(parts: list[str]) -> int | None:
    """Find the index of the first summary column.

    Args:
        parts: Whitespace-split row.

    Returns:
        Index after the last delimiter token, or None if no delimiter.
    """
    start: int | None = None
    for i in range(2, len(parts)):
        token = parts[i]
        if token == "-":
            start = i + 1
        elif _DATE_RE.match(token) or _RELATIVE_DAY_RE.match(token):
            j = i + 1
            while j < len(parts) and _TIMESTAMP_TAIL_RE.match(parts[j]):
                j += 1
            start = j
    return start


def parse_change_line(line: str) -> PendingChange | None:
    """Parse one row of ``snap changes``.

    Args:
        line: A data row (not the header).

    Returns:
        PendingChange for an active change, None for terminal or
        ID-less rows.
    """
    parts = line.split()
    if len(parts) < 2:
        return None

    change_id, status = parts[0], parts[1]
    if change_id in ("", "-"):
        return None

    start = _summary_start(parts)
    if start is None or start >= len(parts):
        change = PendingChange(id=change_id, status=status, summary=NO_SUMMARY)
    else:
        change = PendingChange(id=change_id, status=status, summary=" ".join(parts[start:]))
    return change if change.is_active else None


def parse_changes(output: str | None) -> list[PendingChange]:
    """Parse pending (non-terminal) changes.

    Args:
        output: Raw stdout of ``snap changes``.

    Returns:
        Active changes in source order. Empty when output is empty.
    """
    if not output:
        return []

    changes: list[PendingChange] = []
    for line in output.strip().split("\n")[1:]:
        change = parse_change_line(line)
        if change is not None:
            changes.append(change)
    return changes
