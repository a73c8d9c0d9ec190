"""
Boundary - the closed curve stored as a circular doubly-linked list.

Nodes live in an arena (a plain list) and refer to their neighbours by index,
so a whole generation can be rebuilt and swapped in with a single assignment.
"""

import threading
from typing import Iterator, List, Optional, Tuple

from .point import LatticePoint
from .vector import LatticeVector
from .profiling import profile


class BoundaryNode:
    __slots__ = ('index', 'line', 'next', 'previous')

    def __init__(self, index: int, line: LatticeVector, next: int, previous: int):
        self.index = index
        self.line = line
        self.next = next
        self.previous = previous

    def __repr__(self) -> str:
        return f"BoundaryNode({self.index}: {self.line}, next={self.next}, previous={self.previous})"


def seed_triangle(world_width: int, world_height: int, padding: int) -> List[LatticeVector]:
    """The three edges of the seed triangle, wound clockwise on screen."""
    if world_width <= 0 or world_height <= 0:
        raise ValueError(
            f"World dimensions must be positive, got {world_width}x{world_height}"
        )
    if padding < 0:
        raise ValueError(f"Padding must be non-negative, got {padding}")
    if 2 * padding >= min(world_width, world_height):
        raise ValueError(
            f"Padding {padding} too large for a {world_width}x{world_height} world"
        )

    bottom_left = LatticePoint(padding, world_height - padding)
    apex = LatticePoint(world_width // 2, padding)
    bottom_right = LatticePoint(world_width - padding, world_height - padding)

    return [
        LatticeVector.of(bottom_left, apex),
        LatticeVector.of(apex, bottom_right),
        LatticeVector.of(bottom_right, bottom_left),
    ]


class Boundary:
    def __init__(self):
        self._nodes: List[BoundaryNode] = []
        self._start: Optional[int] = None
        self._cursor: Optional[int] = None
        self.lock = threading.RLock()

    def initialize(self, world_width: int, world_height: int, padding: int):
        self.replace(seed_triangle(world_width, world_height, padding))

    @profile
    def replace(self, lines: List[LatticeVector]):
        """Swap in a new cycle built from an ordered list of segments."""
        n = len(lines)
        if n == 0:
            raise ValueError("A boundary needs at least one segment")

        nodes = [
            BoundaryNode(i, line, (i + 1) % n, (i - 1) % n)
            for i, line in enumerate(lines)
        ]

        with self.lock:
            self._nodes = nodes
            self._start = 0
            self._cursor = 0

    def _require_initialized(self):
        if not self._nodes:
            raise RuntimeError("Boundary has not been initialized")

    @property
    def is_initialized(self) -> bool:
        return bool(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def start_node(self) -> BoundaryNode:
        self._require_initialized()
        return self._nodes[self._start]

    @property
    def current_node(self) -> BoundaryNode:
        self._require_initialized()
        return self._nodes[self._cursor]

    def node(self, index: int) -> BoundaryNode:
        self._require_initialized()
        return self._nodes[index]

    def advance_cursor(self) -> BoundaryNode:
        """Move the inspection cursor one node along the cycle."""
        self._require_initialized()
        with self.lock:
            self._cursor = self._nodes[self._cursor].next
            return self._nodes[self._cursor]

    def traverse(self) -> Iterator[Tuple[LatticeVector, LatticeVector]]:
        """
        Yield (segment, successor) pairs once around the cycle.

        Starts at the start node every time it is called. The arena is captured
        under the lock before the first pair is produced, so a subdivision
        running meanwhile never shows up halfway through a pass.
        """
        self._require_initialized()
        with self.lock:
            nodes = self._nodes
            start = self._start
        return self._walk(nodes, start)

    @staticmethod
    def _walk(nodes: List[BoundaryNode], start: int) -> Iterator[Tuple[LatticeVector, LatticeVector]]:
        index = start
        while True:
            node = nodes[index]
            yield node.line, nodes[node.next].line
            index = node.next
            if index == start:
                break

    def segments(self) -> List[LatticeVector]:
        return [line for line, _ in self.traverse()]

    def is_closed(self) -> bool:
        """Check the cycle invariant and that consecutive segments share endpoints."""
        if not self._nodes:
            return False
        with self.lock:
            nodes = self._nodes
            start = self._start

        n = len(nodes)
        index = start
        for step in range(n):
            node = nodes[index]
            successor = nodes[node.next]
            if successor.previous != index:
                return False
            if node.line.end != successor.line.start:
                return False
            index = node.next
            if index == start and step < n - 1:
                return False
        return index == start

    def __repr__(self) -> str:
        return f"Boundary({len(self._nodes)} nodes)"
