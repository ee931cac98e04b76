"""Unit tests for the permission actions."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from snapman.menus.context import MenuContext
from snapman.menus.permissions import connect_permissions, revoke_permissions
from snapman.models.snap import Connection


@pytest.fixture
def connections() -> list[Connection]:
    """Connections of vlc with one missing and one manual plug."""
    return [
        Connection("audio-playback", "vlc:audio-playback", ":audio-playback"),
        Connection("camera", "vlc:camera", "-"),
        Connection("home", "vlc:home", ":home", "manual"),
    ]


class TestConnectPermissions:
    """Tests for connect_permissions."""

    def test_connects_selected(
        self,
        ctx: MenuContext,
        client: MagicMock,
        ui: MagicMock,
        operator: MagicMock,
        connections: list[Connection],
    ) -> None:
        """Only unconnected plugs are offered and connected."""
        client.connections.return_value = connections
        ui.choose.return_value = "vlc"
        ui.filter_many.return_value = ["vlc:camera"]

        connect_permissions(ctx)

        offered = [c.value for c in ui.filter_many.call_args.args[1]]
        assert offered == ["vlc:camera"]
        operator.connect.assert_called_once_with("vlc:camera")

    def test_all_connected(
        self,
        ctx: MenuContext,
        client: MagicMock,
        ui: MagicMock,
        printed: Callable[[], str],
    ) -> None:
        """Nothing to connect shows a message."""
        client.connections.return_value = [Connection("home", "vlc:home", ":home")]
        ui.choose.return_value = "vlc"

        connect_permissions(ctx)

        assert "All permissions are already connected for vlc" in printed()
        ui.filter_many.assert_not_called()

    def test_nothing_selected(
        self,
        ctx: MenuContext,
        client: MagicMock,
        ui: MagicMock,
        operator: MagicMock,
        connections: list[Connection],
        printed: Callable[[], str],
    ) -> None:
        """An empty selection silently issues nothing."""
        client.connections.return_value = connections
        ui.choose.return_value = "vlc"
        ui.filter_many.return_value = []

        connect_permissions(ctx)

        assert printed() == ""
        operator.authenticate.assert_not_called()
        operator.connect.assert_not_called()


class TestRevokePermissions:
    """Tests for revoke_permissions."""

    def test_revokes_manual(
        self,
        ctx: MenuContext,
        client: MagicMock,
        ui: MagicMock,
        operator: MagicMock,
        connections: list[Connection],
    ) -> None:
        """Only manual connections are offered and disconnected."""
        client.connections.return_value = connections
        ui.choose.return_value = "vlc"
        ui.filter_many.return_value = ["vlc:home"]

        revoke_permissions(ctx)

        offered = [c.value for c in ui.filter_many.call_args.args[1]]
        assert offered == ["vlc:home"]
        operator.disconnect.assert_called_once_with("vlc:home")

    def test_none_manual(
        self,
        ctx: MenuContext,
        client: MagicMock,
        ui: MagicMock,
        printed: Callable[[], str],
    ) -> None:
        """Nothing to revoke shows a message."""
        client.connections.return_value = [Connection("camera", "vlc:camera", "-")]
        ui.choose.return_value = "vlc"

        revoke_permissions(ctx)

        assert "No manually connected permissions found for vlc" in printed()
