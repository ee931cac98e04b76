"""Validation of free-text menu input."""

import re

from snapman.operators.snap import RETAIN_MAX, RETAIN_MIN

_DECIMAL_RE = re.compile(r"^[0-9]+$")


def parse_retain_limit(text: str | None) -> int | None:
    """Validate a revision retention limit typed by the user.

    Only a plain decimal integer between RETAIN_MIN and RETAIN_MAX
    (inclusive) is accepted. Surrounding whitespace is not stripped.

    Args:
        text: Raw input.

    Returns:
        The limit, or None when the input is rejected.
    """
    if not text or not _DECIMAL_RE.match(text):
        return None
    value = int(text)
    if RETAIN_MIN <= value <= RETAIN_MAX:
        return value
    return None
