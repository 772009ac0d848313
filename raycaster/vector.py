"""
2D vector math used by the caster, the camera and both renderers.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector. Every operation returns a new instance."""

    x: float
    y: float

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def mul(self, other: Vector2) -> Vector2:
        """Element-wise product."""
        return Vector2(self.x * other.x, self.y * other.y)

    def div(self, other: Vector2) -> Vector2:
        """Element-wise quotient."""
        return Vector2(self.x / other.x, self.y / other.y)

    def scale(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm(self) -> Vector2:
        """
        Return the unit vector pointing the same way.
        Raises ValueError for the zero vector, which has no direction.
        """
        length = self.length()
        if length == 0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vector2(self.x / length, self.y / length)

    def distance_to(self, other: Vector2) -> float:
        return other.sub(self).length()

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def lerp(self, other: Vector2, t: float) -> Vector2:
        """Point at fraction t of the way from self to other."""
        return self.add(other.sub(self).scale(t))

    @staticmethod
    def from_angle(angle: float) -> Vector2:
        """Unit vector for the given angle in radians."""
        return Vector2(math.cos(angle), math.sin(angle))

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vector2:
        return self.scale(factor)

    def __rmul__(self, factor: float) -> Vector2:
        return self.scale(factor)

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        # Allows tuple(v) and passing vectors straight to pygame
        yield self.x
        yield self.y
