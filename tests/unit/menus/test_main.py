"""Unit tests for the main menu and configuration viewer."""

import logging
import subprocess
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from snapman.core.errors import AuthenticationError
from snapman.menus.configuration import view_configuration
from snapman.menus.context import MenuContext, report, report_batch, run_action
from snapman.menus.main import MAIN_MENU, QUIT_LABEL, main_menu
from snapman.menus.offline import download_snaps, manage_offline
from snapman.menus.updates import hold_one, manage_auto_updates
from snapman.models.action import ActionResult


class TestMainMenu:
    """Tests for main_menu."""

    def test_entries(self) -> None:
        """The main menu lists eight actions and Quit."""
        assert len(MAIN_MENU) == 9
        assert MAIN_MENU[-1].label == QUIT_LABEL
        assert MAIN_MENU[-1].value is None
        assert all(callable(entry.value) for entry in MAIN_MENU[:-1])

    def test_quit(self, ctx: MenuContext, ui: MagicMock, printed: Callable[[], str]) -> None:
        """Choosing Quit ends the loop."""
        ui.choose.return_value = None

        main_menu(ctx)

        assert ui.choose.call_args.kwargs["back"] is False
        assert "Goodbye!" in printed()

    def test_runs_action_then_redraws(self, ctx: MenuContext, ui: MagicMock) -> None:
        """An action returns to the menu."""
        action = MagicMock()
        ui.choose.side_effect = [action, None]

        main_menu(ctx)

        action.assert_called_once_with(ctx)
        assert ui.clear.call_count == 2

    def test_empty_install_list(
        self, ctx: MenuContext, client: MagicMock, ui: MagicMock, printed: Callable[[], str]
    ) -> None:
        """An entry with nothing installed shows a message and returns to the menu."""
        client.installed_names.return_value = []
        ui.choose.side_effect = [MAIN_MENU[0].value, None]

        main_menu(ctx)

        assert "No snaps installed on this system." in printed()
        assert ui.choose.call_count == 2

    def test_dry_run_banner(
        self, ctx: MenuContext, ui: MagicMock, operator: MagicMock, printed: Callable[[], str]
    ) -> None:
        """Dry-run mode is announced."""
        operator.dry_run = True
        ui.choose.return_value = None

        main_menu(ctx)

        assert "Dry-run" in printed()


class TestRunAction:
    """Tests for run_action."""

    def test_authentication_error(
        self, ctx: MenuContext, ui: MagicMock, printed: Callable[[], str]
    ) -> None:
        """A failed sudo prompt is reported instead of crashing."""
        action = MagicMock(side_effect=AuthenticationError("sudo authentication failed"))

        run_action(ctx, action)

        assert "sudo authentication failed" in printed()
        ui.wait_for_input.assert_called_once()

    def test_unexpected_failure(
        self, ctx: MenuContext, ui: MagicMock, printed: Callable[[], str]
    ) -> None:
        """Timeouts and OS errors are reported."""
        action = MagicMock(side_effect=subprocess.TimeoutExpired(cmd="snap", timeout=1))
        action.__name__ = "action"

        run_action(ctx, action)

        assert "timed out" in printed()
        ui.wait_for_input.assert_called_once()

    def test_failure_logged_as_warning(
        self, ctx: MenuContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A caught failure is a one-line warning; the traceback is debug only."""
        action = MagicMock(side_effect=OSError("disk full"))
        action.__name__ = "download_snaps"

        with caplog.at_level(logging.DEBUG, logger="snapman.menus.context"):
            run_action(ctx, action)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert [r.getMessage() for r in warnings] == ["Action download_snaps failed: disk full"]
        assert all(r.exc_info is None for r in warnings)
        assert all(r.levelno < logging.ERROR for r in caplog.records)
        assert any(r.levelno == logging.DEBUG and r.exc_info for r in caplog.records)


class TestSubmenuRecovery:
    """Failures inside a sub-menu action return to that sub-menu."""

    def test_auth_failure_returns_to_auto_update_menu(
        self,
        ctx: MenuContext,
        ui: MagicMock,
        operator: MagicMock,
        printed: Callable[[], str],
    ) -> None:
        """A failed sudo prompt while holding a snap redraws the auto-update menu."""
        operator.authenticate.side_effect = AuthenticationError("sudo authentication failed")
        ui.choose.side_effect = [manage_auto_updates, hold_one, "firefox", None, None]

        main_menu(ctx)

        headers = [c.args[0] for c in ui.choose.call_args_list]
        assert headers == [
            "Select an option:",
            "Auto-update options:",
            "Select snap to hold:",
            "Auto-update options:",
            "Select an option:",
        ]
        assert "sudo authentication failed" in printed()
        operator.hold.assert_not_called()

    def test_download_dir_failure_returns_to_offline_menu(
        self,
        ctx: MenuContext,
        ui: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        printed: Callable[[], str],
    ) -> None:
        """An uncreatable download directory is reported inside the offline menu."""
        monkeypatch.setattr(
            "snapman.menus.offline.ensure_download_dir",
            MagicMock(side_effect=RuntimeError("Cannot create directory")),
        )
        ui.filter_many.return_value = ["vlc"]
        ui.choose.side_effect = [manage_offline, download_snaps, None, None]

        main_menu(ctx)

        headers = [c.args[0] for c in ui.choose.call_args_list]
        assert headers == [
            "Select an option:",
            "Offline snap options:",
            "Offline snap options:",
            "Select an option:",
        ]
        assert "Cannot create directory" in printed()


class TestReport:
    """Tests for report and report_batch."""

    def test_dry_run_notice_shown(
        self, ctx: MenuContext, ui: MagicMock, printed: Callable[[], str]
    ) -> None:
        """The dry-run notice of a result appears under the success line."""
        result = ActionResult(
            description="revert",
            args=("sudo", "snap", "revert", "vlc"),
            message="Dry-run: would run sudo snap revert vlc",
        )

        report(ctx, result, "Successfully reverted vlc", "Failed to revert vlc")

        assert printed().splitlines() == [
            "[success]✓ Successfully reverted vlc[/]",
            "  [muted]Dry-run: would run sudo snap revert vlc[/]",
        ]
        ui.wait_for_input.assert_called_once()

    def test_failure_hides_message(
        self, ctx: MenuContext, printed: Callable[[], str]
    ) -> None:
        """A failed result shows its error, not its message."""
        result = ActionResult(description="hold", success=False, message="ignored", error="boom")

        report(ctx, result, "Held", "Failed to hold")

        assert "boom" in printed()
        assert "ignored" not in printed()

    def test_batch_lists_messages(
        self, ctx: MenuContext, printed: Callable[[], str]
    ) -> None:
        """Each command's output is listed after a successful batch."""
        results = [
            ActionResult(description="hold firefox", message='General refreshes of "firefox" held'),
            ActionResult(description="hold vlc"),
        ]

        report_batch(ctx, results, "All snaps are now held from updates")

        lines = printed().splitlines()
        assert lines[0] == "[success]✓ All snaps are now held from updates[/]"
        assert lines[1:] == ['  [muted]General refreshes of "firefox" held[/]']


class TestViewConfiguration:
    """Tests for view_configuration."""

    def test_pages_info_and_options(
        self, ctx: MenuContext, client: MagicMock, ui: MagicMock, printed: Callable[[], str]
    ) -> None:
        """Info and options are paged until the user goes back."""
        client.info.return_value = "name: vlc\n"
        client.get_config.return_value = "Key  Value\nfoo  bar\n"
        ui.choose.side_effect = ["vlc", None]

        view_configuration(ctx)

        assert [c.args[0] for c in ui.pager.call_args_list] == [
            "name: vlc\n",
            "Key  Value\nfoo  bar\n",
        ]
        assert "Configuration Options for vlc:" in printed()

    def test_no_options(self, ctx: MenuContext, client: MagicMock, ui: MagicMock) -> None:
        """Empty snap get output is not paged."""
        client.info.return_value = "name: vlc\n"
        client.get_config.return_value = ""
        ui.choose.side_effect = ["vlc", None]

        view_configuration(ctx)

        assert ui.pager.call_count == 1
