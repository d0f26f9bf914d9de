"""Exception types raised by list/dropdown transitions and the intent layer."""

from __future__ import annotations


class HeadlessUIError(Exception):
    """Base exception for all headless_ui errors."""


class InvalidIndexError(HeadlessUIError, IndexError):
    """Index-based transition targeted a position with no item."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Invalid list index: {index} (length {length})")


class BoundaryError(HeadlessUIError):
    """Navigation tried to move past the edge of a non-circular list."""

    def __init__(self, direction: str) -> None:
        self.direction = direction
        if direction == "next":
            message = "Cannot advance past the end of the list"
        else:
            message = "Cannot rewind past the beginning of the list"
        super().__init__(message)


class UnknownIntentError(HeadlessUIError, ValueError):
    """Intent name, argument count, or alias target is not recognized."""
