"""Read-only access to snapd through the snap CLI."""

from snapman.snapd.client import SnapClient

__all__ = ["SnapClient"]
