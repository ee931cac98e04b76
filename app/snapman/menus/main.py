"""Top-level menu loop.

Each entry runs one action. Whatever happens inside an action, control
comes back to this loop: expected failures are reported by
``run_action`` and the menu is drawn again.
"""

from snapman.menus.changes import kill_running_process
from snapman.menus.channels import switch_channel
from snapman.menus.configuration import view_configuration
from snapman.menus.context import Action, MenuContext, run_action
from snapman.menus.offline import manage_offline
from snapman.menus.permissions import manage_permissions
from snapman.menus.revert import revert_snap, revert_snap_to_version
from snapman.menus.updates import manage_auto_updates
from snapman.models.choice import Choice

QUIT_LABEL = "Quit"

MAIN_MENU: list[Choice[Action | None]] = [
    Choice("Revert snap", revert_snap),
    Choice("Revert snap to specific version", revert_snap_to_version),
    Choice("Kill running process", kill_running_process),
    Choice("Manage auto updates", manage_auto_updates),
    Choice("Switch channels", switch_channel),
    Choice("Manage offline snaps", manage_offline),
    Choice("View configuration", view_configuration),
    Choice("Manage permissions", manage_permissions),
    Choice(QUIT_LABEL, None),
]


def main_menu(ctx: MenuContext) -> None:
    """Show the main menu until the user quits.

    Args:
        ctx: Menu context.
    """
    while True:
        ctx.ui.clear()
        ctx.ui.title("Snap Manager")
        if ctx.operator.dry_run:
            ctx.ui.console.print("[warning]Dry-run: no changes will be made[/]")

        action = ctx.ui.choose("Select an option:", MAIN_MENU, back=False)
        if action is None:
            ctx.ui.style("Goodbye!")
            return

        run_action(ctx, action)
