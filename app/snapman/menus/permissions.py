"""Connect missing and revoke manual interface connections."""

from snapman.core.formatter import connection_choices
from snapman.menus.context import MenuContext, choose_snap, report_batch, run_submenu
from snapman.models.action import ActionResult
from snapman.models.choice import Choice
from snapman.parsers.connections import connect_candidates, revoke_candidates


def connect_permissions(ctx: MenuContext) -> None:
    """Connect selected plugs that have no slot."""
    ctx.ui.title("Manage Snap Permissions")

    name = choose_snap(ctx, "Select snap to manage permissions:")
    if name is None:
        return

    candidates = connect_candidates(ctx.client.connections(name))
    if not candidates:
        ctx.ui.style(f"All permissions are already connected for {name}")
        ctx.ui.wait_for_input()
        return

    selected = ctx.ui.filter_many("Select permissions to connect:", connection_choices(candidates))
    if not selected:
        return

    ctx.operator.authenticate()
    results: list[ActionResult] = [ctx.operator.connect(plug) for plug in selected]
    report_batch(ctx, results, "Selected permissions connected.")


def revoke_permissions(ctx: MenuContext) -> None:
    """Disconnect selected manually connected plugs."""
    ctx.ui.title("Revoke Snap Permissions")

    name = choose_snap(ctx, "Select snap to revoke permissions:")
    if name is None:
        return

    candidates = revoke_candidates(ctx.client.connections(name))
    if not candidates:
        ctx.ui.style(f"No manually connected permissions found for {name}")
        ctx.ui.wait_for_input()
        return

    selected = ctx.ui.filter_many("Select permissions to revoke:", connection_choices(candidates))
    if not selected:
        return

    ctx.operator.authenticate()
    results: list[ActionResult] = [ctx.operator.disconnect(plug) for plug in selected]
    report_batch(ctx, results, "Selected permissions revoked.")


def manage_permissions(ctx: MenuContext) -> None:
    """Permissions sub-menu."""
    run_submenu(
        ctx,
        "Manage Permissions",
        "Permission options:",
        [
            Choice("Connect missing permissions", connect_permissions),
            Choice("Revoke manual permissions", revoke_permissions),
        ],
    )
