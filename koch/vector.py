"""
Directed segment between two lattice points, and the Koch edge-replacement rule.
"""

import math
from typing import Tuple

from .point import LatticePoint

# Rotating the middle third by -60 degrees puts the bump outside a boundary
# wound clockwise on screen (y axis pointing down).
BUMP_ANGLE = -math.pi / 3


class LatticeVector:
    __slots__ = ('_start', '_end', '_delta', '_length', '_angle')

    def __init__(self, start: LatticePoint, end: LatticePoint):
        self._start = start
        self._end = end
        self._delta = end - start
        self._length = math.hypot(self._delta.x, self._delta.y)
        self._angle = math.atan2(self._delta.y, self._delta.x)

    @classmethod
    def of(cls, p1: LatticePoint, p2: LatticePoint) -> 'LatticeVector':
        return cls(p1, p2)

    @property
    def start(self) -> LatticePoint:
        return self._start

    @property
    def end(self) -> LatticePoint:
        return self._end

    @property
    def delta(self) -> LatticePoint:
        return self._delta

    @property
    def length(self) -> float:
        return self._length

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def is_degenerate(self) -> bool:
        return self._length == 0

    def subdivision_points(self) -> Tuple[LatticePoint, LatticePoint, LatticePoint]:
        """
        Points splitting this edge for one Koch generation.

        P1 and P3 sit at one and two thirds of the way from start to end,
        P2 is the apex of the equilateral triangle erected on P1-P3.
        """
        p1 = self._start + self._delta / 3
        p3 = self._start + self._delta * 2 / 3
        p2 = p1 + (p3 - p1).rotate(BUMP_ANGLE)
        return p1, p2, p3

    def subdivide(self) -> Tuple['LatticeVector', 'LatticeVector', 'LatticeVector', 'LatticeVector']:
        p1, p2, p3 = self.subdivision_points()
        return (
            LatticeVector(self._start, p1),
            LatticeVector(p1, p2),
            LatticeVector(p2, p3),
            LatticeVector(p3, self._end),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, LatticeVector):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def to_tuple(self) -> tuple:
        return (self._start.to_tuple(), self._end.to_tuple())

    def __repr__(self) -> str:
        return f"LatticeVector({self._start} -> {self._end})"
