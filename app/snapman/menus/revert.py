"""Revert a snap to its previous or a specific revision."""

from snapman.core.formatter import revision_choices
from snapman.menus.context import MenuContext, choose_snap, report


def revert_snap(ctx: MenuContext) -> None:
    """Revert a snap to its previous revision."""
    ctx.ui.title("Revert Snap Package")

    name = choose_snap(ctx, "Select snap to revert:")
    if name is None:
        return

    if not ctx.ui.confirm(f"Are you sure you want to revert {name} to its previous version?"):
        return

    ctx.operator.authenticate()
    result = ctx.operator.revert(name)
    report(ctx, result, f"Successfully reverted {name}", f"Failed to revert {name}")


def revert_snap_to_version(ctx: MenuContext) -> None:
    """Revert a snap to one of its retained revisions.

    Needs at least two retained revisions; with only one there is
    nothing to revert to.
    """
    ctx.ui.title("Revert Snap to Specific Version")

    name = choose_snap(ctx, "Select snap to revert to specific version:")
    if name is None:
        return

    revisions = ctx.client.revisions(name)
    if not revisions:
        ctx.ui.style(f"No versions found for {name} or snap not installed.")
        ctx.ui.wait_for_input()
        return

    if len(revisions) == 1:
        ctx.ui.style(f"Only one version available for {name}. No other versions to revert to.")
        ctx.ui.wait_for_input()
        return

    revision = ctx.ui.choose(f"Select version to revert {name} to:", revision_choices(revisions))
    if revision is None:
        return

    if not ctx.ui.confirm(
        f"Revert {name} to version {revision.version} (revision {revision.revision})?"
    ):
        return

    ctx.operator.authenticate()
    result = ctx.operator.revert_to(name, revision.revision)
    report(
        ctx,
        result,
        f"Successfully reverted {name} to version {revision.version}",
        f"Failed to revert {name} to version {revision.version}",
    )
