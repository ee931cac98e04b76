"""Interactive menu tree.

Every action follows the same path: pick a target, optionally pick an
option, confirm, execute, report. Going back or declining at any step
before execution returns to the menu without side effects.
"""

from snapman.menus.context import MenuContext, run_action
from snapman.menus.main import MAIN_MENU, main_menu

__all__ = ["MAIN_MENU", "MenuContext", "main_menu", "run_action"]
