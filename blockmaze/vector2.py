"""Two-dimensional vectors and circle collision."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def size(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def scale(self, factor: float) -> Vector2:
        """Return the vector multiplied by ``factor``."""
        return Vector2(self.x * factor, self.y * factor)

    def normalized(self) -> Vector2:
        """Return a unit vector with the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.size()
        if length == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return self.scale(1.0 / length)

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)


def circle_hit(first: Vector2, second: Vector2, radius: float) -> bool:
    """Return True when the two points are closer than ``radius``."""
    return (first - second).size() < radius