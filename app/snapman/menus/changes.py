"""Abort a running snapd change."""

from snapman.core.formatter import change_choices
from snapman.menus.context import MenuContext, report


def kill_running_process(ctx: MenuContext) -> None:
    """Abort one of the changes snapd is still working on."""
    ctx.ui.title("Kill Running Snap Process")

    changes = ctx.client.pending_changes()
    if not changes:
        ctx.ui.style("No running snap processes found.")
        ctx.ui.wait_for_input()
        return

    change_id = ctx.ui.choose("Select process to kill:", change_choices(changes))
    if change_id is None:
        return

    if not ctx.ui.confirm(f"Are you sure you want to abort process {change_id}?"):
        return

    ctx.operator.authenticate()
    result = ctx.operator.abort(change_id)
    report(
        ctx,
        result,
        f"Successfully aborted process {change_id}",
        f"Failed to abort process {change_id}",
    )
