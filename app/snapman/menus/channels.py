"""Switch the channel a snap tracks."""

from snapman.core.formatter import channel_choices
from snapman.menus.context import MenuContext, choose_snap, report


def switch_channel(ctx: MenuContext) -> None:
    """Refresh a snap onto a channel picked from ``snap info``."""
    ctx.ui.title("Switch Snap Channel")

    name = choose_snap(ctx, "Select snap to switch channel:")
    if name is None:
        return

    channels = ctx.client.channels(name)
    if not channels:
        ctx.ui.style(f"No channels available for {name}")
        ctx.ui.wait_for_input()
        return

    channel = ctx.ui.choose(f"Select channel for {name}:", channel_choices(channels))
    if channel is None:
        return

    if not ctx.ui.confirm(f"Switch {name} to channel {channel}?"):
        return

    ctx.operator.authenticate()
    result = ctx.operator.switch_channel(name, channel)
    report(
        ctx,
        result,
        f"Successfully switched {name} to {channel}",
        f"Failed to switch {name} to {channel}",
    )
