"""
Koch subdivision - rewrites every edge of the boundary as four edges.

The pass reads the current cycle, builds the next generation as a fresh list,
and swaps it in while holding the boundary lock, so readers only ever see a
complete generation.
"""

from typing import List

from .boundary import Boundary
from .vector import LatticeVector
from .profiling import profile

MIN_SEGMENTS = 3


@profile
def subdivide(boundary: Boundary) -> int:
    """
    Advance the boundary by one generation.
    Returns the new segment count (four times the old one).
    """
    with boundary.lock:
        if boundary.node_count < MIN_SEGMENTS:
            raise RuntimeError(
                f"Cannot subdivide a boundary with {boundary.node_count} segments; "
                f"at least {MIN_SEGMENTS} are required"
            )

        original = boundary.segments()

        children: List[LatticeVector] = []
        for line in original:
            children.extend(line.subdivide())

        boundary.replace(children)

    return len(children)
