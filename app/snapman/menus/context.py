"""Shared state and helpers for menu actions."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass

from rich.markup import escape

from snapman.core.config import SnapmanConfig
from snapman.core.errors import AuthenticationError
from snapman.core.formatter import name_choices
from snapman.models.action import ActionResult, all_succeeded
from snapman.models.choice import Choice
from snapman.operators.snap import SnapOperator
from snapman.snapd.client import SnapClient
from snapman.ui.prompts import TerminalUI

logger = logging.getLogger(__name__)


@dataclass
class MenuContext:
    """Everything a menu action needs.

    Attributes:
        client: Read-only snap queries.
        operator: State-changing snap commands.
        ui: Terminal widgets.
        config: Effective configuration.
    """

    client: SnapClient
    operator: SnapOperator
    ui: TerminalUI
    config: SnapmanConfig


# A menu entry's handler
Action = Callable[[MenuContext], None]


def choose_snap(ctx: MenuContext, header: str) -> str | None:
    """Let the user pick one installed snap.

    Prints a message and pauses when nothing is installed.

    Args:
        ctx: Menu context.
        header: Question shown above the list.

    Returns:
        The snap name, or None when there is nothing to pick or the user
        went back.
    """
    names = ctx.client.installed_names()
    if not names:
        ctx.ui.style("No snaps installed on this system.")
        ctx.ui.wait_for_input()
        return None
    return ctx.ui.choose(header, name_choices(names))


def report(ctx: MenuContext, result: ActionResult, success: str, failure: str) -> None:
    """Report the outcome of a single command and pause.

    The result's ``message`` (command output or the dry-run notice) is
    shown under the success line.

    Args:
        ctx: Menu context.
        result: Command result.
        success: Message shown on success.
        failure: Message shown on failure.
    """
    if result.success:
        ctx.ui.console.print(f"[success]✓ {success}[/]")
        if result.message:
            ctx.ui.console.print(f"  [muted]{escape(result.message)}[/]")
    else:
        ctx.ui.console.print(f"[error]✗ {failure}[/]")
        if result.error:
            ctx.ui.console.print(f"  [muted]{escape(result.error)}[/]")
    ctx.ui.wait_for_input()


def report_batch(ctx: MenuContext, results: list[ActionResult], success: str) -> None:
    """Report the outcome of a multi-command action and pause.

    Lists each failed command under a failure summary.

    Args:
        ctx: Menu context.
        results: Results of every command of the action.
        success: Message shown when everything succeeded.
    """
    if all_succeeded(results):
        ctx.ui.console.print(f"[success]✓ {success}[/]")
        for result in results:
            if result.message:
                ctx.ui.console.print(f"  [muted]{escape(result.message)}[/]")
    else:
        failed = [r for r in results if r.failed]
        ctx.ui.console.print(f"[error]✗ {len(failed)} of {len(results)} operation(s) failed:[/]")
        for result in failed:
            error_msg = result.error or "Unknown error"
            ctx.ui.console.print(f"  - {result.description}: [muted]{escape(error_msg)}[/]")
    ctx.ui.wait_for_input()


def run_action(ctx: MenuContext, action: Action) -> None:
    """Run one menu action and report anything it could not handle.

    Args:
        ctx: Menu context.
        action: Handler of the chosen entry.
    """
    try:
        action(ctx)
    except AuthenticationError as e:
        logger.warning("Authentication failed: %s", e)
        ctx.ui.console.print(f"[error]✗ {escape(str(e))}[/]")
        ctx.ui.wait_for_input()
    except (subprocess.TimeoutExpired, OSError, RuntimeError, ValueError) as e:
        name = getattr(action, "__name__", action)
        logger.warning("Action %s failed: %s", name, e)
        logger.debug("Traceback for %s", name, exc_info=True)
        ctx.ui.console.print(f"[error]✗ {escape(str(e))}[/]")
        ctx.ui.wait_for_input()


def run_submenu(ctx: MenuContext, title: str, header: str, entries: list[Choice[Action]]) -> None:
    """Loop over a sub-menu until the user goes back.

    A failing handler is reported and the sub-menu is drawn again.

    Args:
        ctx: Menu context.
        title: Screen title.
        header: Question shown above the entries.
        entries: Labeled handlers.
    """
    while True:
        ctx.ui.clear()
        ctx.ui.title(title)
        handler = ctx.ui.choose(header, entries)
        if handler is None:
            break
        run_action(ctx, handler)
