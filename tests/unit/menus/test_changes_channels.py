"""Unit tests for the abort and channel switch actions."""

from collections.abc import Callable
from unittest.mock import MagicMock

from snapman.menus.changes import kill_running_process
from snapman.menus.channels import switch_channel
from snapman.menus.context import MenuContext
from snapman.models.snap import Channel, PendingChange


class TestKillRunningProcess:
    """Tests for kill_running_process."""

    def test_aborts_chosen_change(
        self, ctx: MenuContext, client: MagicMock, ui: MagicMock, operator: MagicMock
    ) -> None:
        """The chosen change ID is aborted after confirmation."""
        client.pending_changes.return_value = [PendingChange("42", "Doing", 'Install "vlc" snap')]
        ui.choose.return_value = "42"

        kill_running_process(ctx)

        choices = ui.choose.call_args.args[1]
        assert choices[0].label == '42 - Doing - Install "vlc" snap'
        ui.confirm.assert_called_once_with("Are you sure you want to abort process 42?")
        operator.abort.assert_called_once_with("42")

    def test_nothing_running(
        self,
        ctx: MenuContext,
        client: MagicMock,
        operator: MagicMock,
        printed: Callable[[], str],
    ) -> None:
        """No pending changes shows a message."""
        client.pending_changes.return_value = []

        kill_running_process(ctx)

        assert "No running snap processes found." in printed()
        operator.abort.assert_not_called()


class TestSwitchChannel:
    """Tests for switch_channel."""

    def test_switches_to_bare_channel_name(
        self, ctx: MenuContext, client: MagicMock, ui: MagicMock, operator: MagicMock
    ) -> None:
        """The refresh uses the channel name, not the label."""
        client.channels.return_value = [
            Channel("latest/stable", "128.0", 4336),
            Channel("esr/stable", "115.13", 4340),
        ]
        ui.choose.side_effect = ["firefox", "esr/stable"]

        switch_channel(ctx)

        labels = [c.label for c in ui.choose.call_args.args[1]]
        assert labels == ["latest/stable - 128.0 (4336)", "esr/stable - 115.13 (4340)"]
        ui.confirm.assert_called_once_with("Switch firefox to channel esr/stable?")
        operator.switch_channel.assert_called_once_with("firefox", "esr/stable")

    def test_no_channels(
        self,
        ctx: MenuContext,
        client: MagicMock,
        ui: MagicMock,
        operator: MagicMock,
        printed: Callable[[], str],
    ) -> None:
        """A snap without channels shows a message."""
        client.channels.return_value = []
        ui.choose.return_value = "vlc"

        switch_channel(ctx)

        assert "No channels available for vlc" in printed()
        operator.switch_channel.assert_not_called()

    def test_declined(
        self, ctx: MenuContext, client: MagicMock, ui: MagicMock, operator: MagicMock
    ) -> None:
        """Declining the confirm issues nothing."""
        client.channels.return_value = [Channel("edge")]
        ui.choose.side_effect = ["vlc", "edge"]
        ui.confirm.return_value = False

        switch_channel(ctx)

        operator.switch_channel.assert_not_called()
