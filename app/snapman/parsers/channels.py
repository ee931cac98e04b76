"""Parser for the ``channels:`` section of ``snap info``.

Example input::

    name:      firefox
    channels:
      latest/stable:    128.0 2024-07-09 (4336) 264MB -
      latest/candidate: ^
      esr/stable:       115.13 2024-07-09 (4340) 254MB -
    installed:          128.0            (4336) 264MB -

Only the indented lines between ``channels:`` and the next unindented
line are considered.
"""

import re

from snapman.models.snap import Channel

# Indented "<channel>: <rest>" line inside the channels section
_CHANNEL_LINE_RE = re.compile(r"^\s+([A-Za-z0-9./_-]+):\s*(.*)$")

# "<version> <date> (<revision>) ..."
_VERSION_REVISION_RE = re.compile(r"^(\S+)\s+[0-9-]+\s+\(([0-9]+)\)")

# "<version> ..."
_VERSION_ONLY_RE = re.compile(r"^(\S+)")

# "Same as above" marker
_SAME_AS_ABOVE = "^"


def iter_channel_section(output: str) -> list[str]:
    """Return the raw lines belonging to the ``channels:`` section.

    The section starts after a line beginning with ``channels:`` and ends
    at the next line that starts with a non-space character. Blank lines
    do not end the section.

    Args:
        output: Raw stdout of ``snap info <name>``.

    Returns:
        Lines of the section, in source order.
    """
    lines: list[str] = []
    in_channels = False
    for line in output.splitlines():
        if line.startswith("channels:"):
            in_channels = True
            continue
        if in_channels and line and not line.startswith(" "):
            in_channels = False
        if in_channels:
            lines.append(line)
    return lines


def parse_channel_line(line: str) -> Channel | None:
    """Parse one line of the channels section.

    Args:
        line: An indented ``<channel>: <rest>`` line.

    Returns:
        Channel record, or None if the line is not a channel entry.
    """
    match = _CHANNEL_LINE_RE.match(line)
    if match is None:
        return None

    name, rest = match.group(1), match.group(2).strip()

    # "^" is not resolved to the channel above it
    if not rest or rest == _SAME_AS_ABOVE:
        return Channel(name=name)

    full = _VERSION_REVISION_RE.match(rest)
    if full is not None:
        return Channel(name=name, version=full.group(1), revision=int(full.group(2)))

    version_only = _VERSION_ONLY_RE.match(rest)
    if version_only is not None:
        return Channel(name=name, version=version_only.group(1))

    return Channel(name=name)


def parse_channels(output: str | None) -> list[Channel]:
    """Parse the channels a snap is published in.

    Args:
        output: Raw stdout of ``snap info <name>``.

    Returns:
        Channels in the order they appear. Empty when output is empty or
        has no channels section.
    """
    if not output:
        return []

    channels: list[Channel] = []
    for line in iter_channel_section(output):
        channel = parse_channel_line(line)
        if channel is not None:
            channels.append(channel)
    return channels
