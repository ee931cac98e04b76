"""Interactive terminal widgets built on Rich.

Provides the screens the menus are made of: single-select list,
multi-select filter, yes/no confirm, free-text input, styled text, a
pager, and a spinner used as the executor's progress callback.
"""

from __future__ import annotations

import logging
import re
from typing import TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.status import Status
from rich.text import Text

from snapman.core.config import DEFAULT_SPINNER
from snapman.models.choice import Choice
from snapman.utils.formatting import console as default_console

logger = logging.getLogger(__name__)

T = TypeVar("T")

BACK_LABEL = "← Back"

_RANGE_RE = re.compile(r"^([0-9]+)-([0-9]+)$")


class SpinnerProgress:
    """Rich spinner shown while a command runs."""

    def __init__(self, console: Console | None = None, spinner: str = DEFAULT_SPINNER) -> None:
        self.console = console or default_console
        self.spinner = spinner
        self._status: Status | None = None

    def on_start(self, title: str) -> None:
        """Start the spinner with a title."""
        self._status = self.console.status(f"[accent]{title}[/]", spinner=self.spinner)
        self._status.start()

    def on_finish(self, title: str, success: bool) -> None:
        """Stop the spinner."""
        if self._status is not None:
            self._status.stop()
            self._status = None
        logger.debug("%s finished (success=%s)", title, success)


class TerminalUI:
    """Prompt toolkit used by the menus.

    All widgets read from and write to one Rich console, which makes
    them easy to drive from tests.
    """

    def __init__(self, console: Console | None = None, clear_screen: bool = True) -> None:
        """Initialize the UI.

        Args:
            console: Console to draw on. Defaults to the shared console.
            clear_screen: Whether :meth:`clear` actually clears.
        """
        self.console = console or default_console
        self.clear_screen = clear_screen

    def clear(self) -> None:
        """Clear the screen before drawing a menu."""
        if self.clear_screen:
            self.console.clear()

    def title(self, message: str) -> None:
        """Print a screen title."""
        self.console.print(f"[title]{message}[/]")

    def style(self, message: str) -> None:
        """Print an accented message."""
        self.console.print(f"[accent]{message}[/]")

    def _print_options(self, header: str, labels: list[str], *, first: int) -> None:
        self.console.print(f"[prompt.header]{header}[/]")
        for index, label in enumerate(labels, start=first):
            self.console.print(f"  [muted]{index:>2})[/] ", Text(label))

    def choose(self, header: str, choices: list[Choice[T]], *, back: bool = True) -> T | None:
        """Let the user pick exactly one option.

        With ``back=True`` a "← Back" option is listed first as 0.

        Args:
            header: Question shown above the options.
            choices: Options in display order.
            back: Whether to offer the back option.

        Returns:
            The chosen value, or None when the user went back.
        """
        labels = [c.label for c in choices]
        first = 1
        if back:
            labels = [BACK_LABEL, *labels]
            first = 0

        self._print_options(header, labels, first=first)
        valid = [str(i) for i in range(first, first + len(labels))]
        answer = Prompt.ask(
            "[accent]Select[/]",
            console=self.console,
            choices=valid,
            show_choices=False,
        )

        index = int(answer)
        if back and index == 0:
            return None
        return choices[index - 1].value

    def filter_many(self, header: str, choices: list[Choice[T]]) -> list[T]:
        """Let the user pick zero or more options.

        The answer is a space or comma separated list of numbers, ranges
        (``2-4``), ``all``, or text that selects every option whose label
        contains it. An empty answer selects nothing.

        Args:
            header: Question shown above the options.
            choices: Options in display order.

        Returns:
            Selected values, in display order.
        """
        self._print_options(header, [c.label for c in choices], first=1)
        answer = Prompt.ask(
            "[accent]Select (numbers, ranges, 'all' or text; empty for none)[/]",
            console=self.console,
            default="",
            show_default=False,
        )
        indices = select_indices(answer, [c.label for c in choices])
        return [choices[i].value for i in indices]

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question. Ctrl-C counts as no."""
        try:
            return Confirm.ask(message, console=self.console, default=default)
        except KeyboardInterrupt:
            return False

    def text_input(self, header: str, placeholder: str) -> str:
        """Ask for one line of free text.

        Args:
            header: Question shown above the input.
            placeholder: Hint shown as the prompt.

        Returns:
            The raw answer, possibly empty.
        """
        self.console.print(f"[prompt.header]{header}[/]")
        return Prompt.ask(
            f"[muted]{placeholder}[/]",
            console=self.console,
            default="",
            show_default=False,
        )

    def pager(self, text: str) -> None:
        """Show text in the console pager."""
        with self.console.pager(styles=True):
            self.console.print(Text(text))

    def wait_for_input(self) -> None:
        """Pause until the user presses Enter."""
        self.console.print()
        Prompt.ask(
            "[accent]Press Enter to continue...[/]",
            console=self.console,
            default="",
            show_default=False,
        )

    def progress(self, spinner: str = DEFAULT_SPINNER) -> SpinnerProgress:
        """Create a spinner progress callback on this UI's console."""
        return SpinnerProgress(self.console, spinner)


def select_indices(answer: str, labels: list[str]) -> list[int]:
    """Resolve a multi-select answer to zero-based indices.

    Args:
        answer: Raw answer typed by the user.
        labels: Option labels in display order.

    Returns:
        Sorted, de-duplicated indices. Out-of-range numbers are ignored.
    """
    selected: set[int] = set()
    for token in re.split(r"[,\s]+", answer.strip()):
        if not token:
            continue
        if token.lower() == "all":
            selected.update(range(len(labels)))
        elif token.isdigit():
            index = int(token) - 1
            if 0 <= index < len(labels):
                selected.add(index)
        elif (match := _RANGE_RE.match(token)) is not None:
            low, high = int(match.group(1)), int(match.group(2))
            selected.update(i - 1 for i in range(low, high + 1) if 1 <= i <= len(labels))
        else:
            needle = token.lower()
            selected.update(i for i, label in enumerate(labels) if needle in label.lower())
    return sorted(selected)
