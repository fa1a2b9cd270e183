"""Exceptions raised by the sunrise/sunset core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .values import SunCondition


class SunRiseSetError(RuntimeError):
    """Raised when an event cannot be determined for a report."""


class NoCrossingError(ValueError):
    """Raised when the sun never reaches the requested zenith angle on a day.

    The hour-angle argument fell outside ``[-1, 1]``.  ``condition`` tells
    whether the sun stayed above or below the zenith angle all day.
    """

    def __init__(self, argument: float, condition: "SunCondition") -> None:
        super().__init__(
            f"Hour angle argument {argument:.6f} outside [-1, 1] ({condition.value})"
        )
        self.argument = argument
        self.condition = condition


class PolarFallbackError(SunRiseSetError):
    """Raised when no fallback direction applies to a missing event."""


class PolarSearchExhausted(PolarFallbackError):
    """Raised when the bounded day search finds no event."""


class InvalidLocationError(ValueError):
    """Raised for latitude or longitude values outside their valid ranges."""
