"""
Immutable 2D point on the drawing lattice.
"""

import math
from typing import Tuple


class LatticePoint:
    __slots__ = ('_x', '_y')

    def __init__(self, x: float = 0, y: float = 0):
        object.__setattr__(self, '_x', x)
        object.__setattr__(self, '_y', y)

    def __setattr__(self, name, value):
        raise AttributeError("LatticePoint is immutable")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __add__(self, other: 'LatticePoint') -> 'LatticePoint':
        return LatticePoint(self._x + other._x, self._y + other._y)

    def __sub__(self, other: 'LatticePoint') -> 'LatticePoint':
        return LatticePoint(self._x - other._x, self._y - other._y)

    def __mul__(self, scalar: float) -> 'LatticePoint':
        return LatticePoint(self._x * scalar, self._y * scalar)

    def __rmul__(self, scalar: float) -> 'LatticePoint':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'LatticePoint':
        return LatticePoint(self._x / scalar, self._y / scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LatticePoint):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"LatticePoint({self._x}, {self._y})"

    def rotate(self, angle_rad: float) -> 'LatticePoint':
        """Rotate this point, read as a displacement, about the origin."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return LatticePoint(
            self._x * cos_a - self._y * sin_a,
            self._x * sin_a + self._y * cos_a
        )

    def distance_to(self, other: 'LatticePoint') -> float:
        return math.hypot(self._x - other._x, self._y - other._y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self._x, self._y)

    def to_int_tuple(self) -> Tuple[int, int]:
        return (int(round(self._x)), int(round(self._y)))

    @classmethod
    def from_tuple(cls, t: tuple) -> 'LatticePoint':
        return cls(t[0], t[1])
