#!/usr/bin/env python3
"""
2D point and vector types used throughout the engine.

Both are small immutable value types: arithmetic always returns a new value.
A Coordinate is an absolute position; an EuclideanVector is a displacement,
velocity or force.
"""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


@dataclass(frozen=True, eq=False)
class EuclideanVector:
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def between(cls, start: "Coordinate", end: "Coordinate") -> "EuclideanVector":
        """Vector pointing from start to end."""
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def towards(cls, to: "Coordinate") -> "EuclideanVector":
        """Position vector of a coordinate, seen from the origin."""
        return cls(to.x, to.y)

    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def versor(self) -> "EuclideanVector":
        """
        Unit vector with the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.magnitude()
        return EuclideanVector(self.dx / length, self.dy / length)

    def __add__(self, other: "EuclideanVector") -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return EuclideanVector(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: "EuclideanVector") -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return EuclideanVector(self.dx - other.dx, self.dy - other.dy)

    def __mul__(self, scalar: float) -> "EuclideanVector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return EuclideanVector(self.dx * scalar, self.dy * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "EuclideanVector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return EuclideanVector(self.dx / scalar, self.dy / scalar)

    def __neg__(self) -> "EuclideanVector":
        return EuclideanVector(-self.dx, -self.dy)

    def __eq__(self, other) -> bool:
        # Comparing against a number compares the length, exactly.
        if isinstance(other, EuclideanVector):
            return self.dx == other.dx and self.dy == other.dy
        if isinstance(other, Real):
            return self.magnitude() == other
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return f"({self.dx:.4f}, {self.dy:.4f})"


@dataclass(frozen=True)
class Coordinate:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_tuple(cls, pair: Tuple[float, float]) -> "Coordinate":
        return cls(float(pair[0]), float(pair[1]))

    def __add__(self, delta: EuclideanVector) -> "Coordinate":
        if not isinstance(delta, EuclideanVector):
            return NotImplemented
        return Coordinate(self.x + delta.dx, self.y + delta.dy)

    def __sub__(self, other: "Coordinate") -> EuclideanVector:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return EuclideanVector(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
