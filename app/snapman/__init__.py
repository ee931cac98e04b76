"""snapman - Interactive menu for managing Snap packages."""

__version__ = "0.1.0"
