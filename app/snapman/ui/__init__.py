"""Terminal UI widgets for snapman."""

from snapman.ui.prompts import BACK_LABEL, SpinnerProgress, TerminalUI, select_indices

__all__ = ["BACK_LABEL", "SpinnerProgress", "TerminalUI", "select_indices"]
