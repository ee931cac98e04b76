"""Fixtures for menu action tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from snapman.core.config import SnapmanConfig
from snapman.menus.context import MenuContext
from snapman.models.action import ActionResult
from snapman.operators.snap import SnapOperator
from snapman.snapd.client import SnapClient
from snapman.ui.prompts import TerminalUI

OPERATOR_COMMANDS = (
    "revert",
    "revert_to",
    "abort",
    "switch_channel",
    "hold",
    "unhold",
    "set_metered_hold",
    "set_retain",
    "connect",
    "disconnect",
    "download",
    "ack",
    "install_file",
)


@pytest.fixture
def client() -> MagicMock:
    """Snap client mock with two installed snaps."""
    mock = MagicMock(spec=SnapClient)
    mock.installed_names.return_value = ["firefox", "vlc"]
    return mock


@pytest.fixture
def operator() -> MagicMock:
    """Operator mock whose commands all succeed."""
    mock = MagicMock(spec=SnapOperator)
    mock.dry_run = False
    for method in OPERATOR_COMMANDS:
        getattr(mock, method).return_value = ActionResult(description=method)
    return mock


@pytest.fixture
def ui() -> MagicMock:
    """UI mock that confirms every question."""
    mock = MagicMock(spec=TerminalUI)
    mock.console = MagicMock()
    mock.confirm.return_value = True
    return mock


@pytest.fixture
def download_dir(tmp_path: Path) -> Path:
    """Offline download directory (not created)."""
    return tmp_path / "snaps"


@pytest.fixture
def ctx(client: MagicMock, operator: MagicMock, ui: MagicMock, download_dir: Path) -> MenuContext:
    """Menu context wired to the mocks."""
    return MenuContext(
        client=client,
        operator=operator,
        ui=ui,
        config=SnapmanConfig(download_dir=download_dir),
    )


@pytest.fixture
def printed(ui: MagicMock) -> Callable[[], str]:
    """Return a reader for everything the action printed or styled."""

    def read() -> str:
        lines = [str(c.args[0]) for c in ui.style.call_args_list if c.args]
        lines += [str(c.args[0]) for c in ui.console.print.call_args_list if c.args]
        return "\n".join(lines)

    return read
