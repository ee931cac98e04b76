"""Data models for snapman.

This module exports the core data structures used throughout the application.
"""

from snapman.models.action import ActionResult, all_succeeded
from snapman.models.choice import Choice
from snapman.models.snap import (
    NO_SUMMARY,
    TERMINAL_CHANGE_STATES,
    Channel,
    Connection,
    InstalledSnap,
    PendingChange,
    Revision,
    RevisionStatus,
)

__all__ = [
    "NO_SUMMARY",
    "TERMINAL_CHANGE_STATES",
    "ActionResult",
    "Channel",
    "Choice",
    "Connection",
    "InstalledSnap",
    "PendingChange",
    "Revision",
    "RevisionStatus",
    "all_succeeded",
]
