"""Selection list entries."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Choice(Generic[T]):
    """A labeled option in a selection list.

    The value travels with its label, so a selected entry never has to
    be parsed back out of the rendered text.

    Attributes:
        label: Single-line text shown to the user.
        value: Identifier handed to the command that follows.
    """

    label: str
    value: T
