"""Exceptions raised by the researchsim core.

Every error carries the structured values that produced it so callers can
report or recover without parsing messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .environment.position import Position


class ResearchSimError(Exception):
    """Base class for all researchsim failures."""


class OutOfBoundsError(ResearchSimError):
    """Raised when a coordinate falls outside the grid it is used against."""

    def __init__(self, position: "Position", *, width: int, height: int) -> None:
        self.position = position
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate {position} is outside the {width}x{height} grid "
            f"(expected 0 <= x < {width} and 0 <= y < {height})"
        )


class NoSuchEntityError(ResearchSimError):
    """Raised when the contents of an empty tile are requested."""

    def __init__(self, position: Optional["Position"] = None) -> None:
        self.position = position
        where = f" at {position}" if position is not None else ""
        super().__init__(f"Attempted to get the entity at an empty tile{where}.")


class BadSaveError(ResearchSimError):
    """Raised when a scenario save blob violates the save format.

    ``line_number`` is 1-based and refers to the offending line of the input
    when the failure can be pinned to one.
    """

    def __init__(self, reason: str = "Malformed scenario save", *, line_number: int | None = None) -> None:
        self.reason = reason
        self.line_number = line_number
        message = reason if line_number is None else f"line {line_number}: {reason}"
        super().__init__(message)
