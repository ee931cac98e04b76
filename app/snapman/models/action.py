"""Action result model for state-changing snap commands."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of executing one state-changing command.

    Attributes:
        description: Human-readable description of what was attempted.
        args: Full argument vector that was (or would have been) executed.
        success: Whether the command exited with status 0.
        message: Optional success message or additional information.
        error: Optional error message if the command failed.
    """

    description: str
    args: tuple[str, ...] = field(default=())
    success: bool = True
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the command failed."""
        return not self.success


def all_succeeded(results: list[ActionResult]) -> bool:
    """Check whether every result in a batch succeeded.

    An empty batch counts as success.

    Args:
        results: Results of a multi-command action.

    Returns:
        True if no result failed.
    """
    return not any(r.failed for r in results)
