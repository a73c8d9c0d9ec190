"""
Koch snowflake: a closed curve grown by replacing every edge with four.

Starting from an equilateral triangle, each generation erects an outward
equilateral bump on the middle third of every edge.
"""

from .point import LatticePoint
from .vector import LatticeVector
from .boundary import Boundary, BoundaryNode
from .subdivision import subdivide
from .snowflake import KochSnowflake, GrowthState, GrowthStatus
from .visualization import (
    visualize_snowflake,
    animate_growth,
    plot_growth_statistics,
    collect_growth_history,
    growth_snapshot
)

__all__ = [
    'LatticePoint',
    'LatticeVector',
    'Boundary',
    'BoundaryNode',
    'subdivide',
    'KochSnowflake',
    'GrowthState',
    'GrowthStatus',
    'visualize_snowflake',
    'animate_growth',
    'plot_growth_statistics',
    'collect_growth_history',
    'growth_snapshot'
]
