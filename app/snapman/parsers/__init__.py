"""Parsers for the tabular text reports printed by the snap CLI.

Every parser accepts raw stdout and returns a list of records. Empty or
missing input always yields an empty list.
"""

from snapman.parsers.changes import parse_changes
from snapman.parsers.channels import parse_channels
from snapman.parsers.connections import connect_candidates, parse_connections, revoke_candidates
from snapman.parsers.revisions import parse_revisions
from snapman.parsers.snaps import parse_snap_list

__all__ = [
    "connect_candidates",
    "parse_changes",
    "parse_channels",
    "parse_connections",
    "parse_revisions",
    "parse_snap_list",
    "revoke_candidates",
]
