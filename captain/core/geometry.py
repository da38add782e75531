"""
Point values for scripts.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .merger import InvalidArgumentError


class Point(BaseModel):
    """An immutable 2D point."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(description="Horizontal coordinate.")
    y: float = Field(description="Vertical coordinate.")

    @classmethod
    def from_value(cls, value: Any) -> "Point":
        """
        Convert a point-like value into a Point.

        Args:
            value: A Point, an ``(x, y)`` sequence, or a mapping with
                ``x`` and ``y`` keys

        Returns:
            Point instance

        Raises:
            InvalidArgumentError: If the value has no point shape
            pydantic.ValidationError: If a coordinate is not numeric
        """
        if isinstance(value, Point):
            return value

        if isinstance(value, Mapping):
            if "x" not in value or "y" not in value:
                raise InvalidArgumentError(f"Mapping {value!r} lacks 'x' and 'y' keys")
            return cls(x=value["x"], y=value["y"])

        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 2:
                raise InvalidArgumentError(
                    f"Expected exactly 2 coordinates, got {len(value)}"
                )
            return cls(x=value[0], y=value[1])

        raise InvalidArgumentError(f"Cannot convert {type(value).__name__!r} to a Point")

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def make_point(x: float, y: float) -> Point:
    """Create a point from two coordinates."""
    return Point(x=x, y=y)


# Shorthand used by scripts
p = make_point
