"""Operators issuing state-changing snap commands."""

from snapman.operators.snap import RETAIN_MAX, RETAIN_MIN, SnapOperator

__all__ = ["RETAIN_MAX", "RETAIN_MIN", "SnapOperator"]
