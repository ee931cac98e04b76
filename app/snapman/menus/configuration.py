"""Browse ``snap info`` and ``snap get`` output in a pager."""

from snapman.menus.context import MenuContext, choose_snap


def view_configuration(ctx: MenuContext) -> None:
    """Show info and configuration of snaps until the user goes back."""
    while True:
        ctx.ui.clear()
        ctx.ui.title("View Snap Configuration")

        name = choose_snap(ctx, "Select snap to view configuration:")
        if name is None:
            break

        ctx.ui.pager(ctx.client.info(name))

        options = ctx.client.get_config(name)
        if options.strip():
            ctx.ui.style(f"Configuration Options for {name}:")
            ctx.ui.pager(options)
