"""Auto-update management: holds, metered connections, retention."""

from snapman.core.validation import parse_retain_limit
from snapman.menus.context import MenuContext, choose_snap, report, report_batch, run_submenu
from snapman.models.action import ActionResult
from snapman.models.choice import Choice
from snapman.operators.snap import RETAIN_MAX, RETAIN_MIN


def hold_all(ctx: MenuContext) -> None:
    """Hold refreshes for every installed snap."""
    if not ctx.ui.confirm("Hold updates for all snaps?"):
        return

    names = ctx.client.installed_names()
    if not names:
        ctx.ui.style("No snaps installed on this system.")
        ctx.ui.wait_for_input()
        return

    ctx.operator.authenticate()
    results: list[ActionResult] = [ctx.operator.hold(name) for name in names]
    report_batch(ctx, results, "All snaps are now held from updates")


def hold_one(ctx: MenuContext) -> None:
    """Hold refreshes for one snap."""
    name = choose_snap(ctx, "Select snap to hold:")
    if name is None:
        return

    ctx.operator.authenticate()
    result = ctx.operator.hold(name)
    report(ctx, result, f"Successfully held {name}", f"Failed to hold {name}")


def unhold_all(ctx: MenuContext) -> None:
    """Remove refresh holds from every installed snap."""
    if not ctx.ui.confirm("Unhold updates for all snaps?"):
        return

    names = ctx.client.installed_names()
    if not names:
        ctx.ui.style("No snaps installed on this system.")
        ctx.ui.wait_for_input()
        return

    ctx.operator.authenticate()
    results: list[ActionResult] = [ctx.operator.unhold(name) for name in names]
    report_batch(ctx, results, "All snaps are now unheld from updates")


def unhold_one(ctx: MenuContext) -> None:
    """Remove the refresh hold from one snap."""
    name = choose_snap(ctx, "Select snap to unhold:")
    if name is None:
        return

    ctx.operator.authenticate()
    result = ctx.operator.unhold(name)
    report(ctx, result, f"Successfully unheld {name}", f"Failed to unhold {name}")


def hold_on_metered(ctx: MenuContext) -> None:
    """Hold refreshes while on a metered connection."""
    if not ctx.ui.confirm("Hold snap updates when on metered connections?"):
        return

    ctx.operator.authenticate()
    result = ctx.operator.set_metered_hold(True)
    report(
        ctx,
        result,
        "Snap updates will be held on metered connections",
        "Failed to set metered connection hold",
    )


def allow_on_metered(ctx: MenuContext) -> None:
    """Allow refreshes on metered connections."""
    if not ctx.ui.confirm("Allow snap updates on metered connections?"):
        return

    ctx.operator.authenticate()
    result = ctx.operator.set_metered_hold(False)
    report(
        ctx,
        result,
        "Snap updates are now allowed on metered connections",
        "Failed to allow metered connection updates",
    )


def manage_metered(ctx: MenuContext) -> None:
    """Metered connection sub-menu."""
    run_submenu(
        ctx,
        "Manage Metered Connection Updates",
        "Metered connection options:",
        [
            Choice("Hold updates on metered connections", hold_on_metered),
            Choice("Allow updates on metered connections", allow_on_metered),
        ],
    )


def set_retention_limit(ctx: MenuContext) -> None:
    """Set how many revisions snapd keeps per snap.

    Invalid input is reported and the action ends; the user has to pick
    the menu entry again to retry.
    """
    current = ctx.client.get_system_option("refresh.retain") or "default"
    ctx.ui.style(f"Current revision retention: {current}")
    ctx.ui.console.print()

    raw = ctx.ui.text_input(
        "Set maximum number of snap revisions to retain:",
        f"Enter number of revisions to retain ({RETAIN_MIN}-{RETAIN_MAX})",
    )
    value = parse_retain_limit(raw)
    if value is None:
        msg = f"Invalid input. Please enter a number between {RETAIN_MIN} and {RETAIN_MAX}."
        ctx.ui.console.print(f"[error]✗ {msg}[/]")
        ctx.ui.wait_for_input()
        return

    if not ctx.ui.confirm(f"Set revision retention limit to {value}?"):
        return

    ctx.operator.authenticate()
    result = ctx.operator.set_retain(value)
    report(
        ctx,
        result,
        f"Revision retention limit set to {value}",
        "Failed to set revision retention limit",
    )


def manage_auto_updates(ctx: MenuContext) -> None:
    """Auto-update sub-menu."""
    run_submenu(
        ctx,
        "Manage Auto Updates",
        "Auto-update options:",
        [
            Choice("Hold all snaps", hold_all),
            Choice("Hold specific snap", hold_one),
            Choice("Unhold all snaps", unhold_all),
            Choice("Unhold specific snap", unhold_one),
            Choice("Manage metered connection updates", manage_metered),
            Choice("Set revision retention limit", set_retention_limit),
        ],
    )
