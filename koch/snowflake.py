"""
KochSnowflake - owns the boundary and drives it generation by generation.

Growth is a two-state machine: GROWING while fewer than max_iterations
generations have been applied, COMPLETE afterwards. Stepping a complete
snowflake leaves it untouched.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from config.koch_config import KochConfig
from .boundary import Boundary
from .subdivision import subdivide


class GrowthState(Enum):
    GROWING = 'growing'
    COMPLETE = 'complete'


@dataclass(frozen=True)
class GrowthStatus:
    generation: int
    max_iterations: int
    segment_count: int
    complete: bool


class KochSnowflake:
    def __init__(self, config: KochConfig):
        self.config = config
        self.boundary = Boundary()
        self.generation = 0
        self.max_iterations = config.max_iterations

        self._initialize()

    def _initialize(self):
        self.boundary.initialize(self.config.width, self.config.height, self.config.padding)
        self.generation = 0

    @property
    def state(self) -> GrowthState:
        if self.generation >= self.max_iterations:
            return GrowthState.COMPLETE
        return GrowthState.GROWING

    def is_complete(self) -> bool:
        return self.state is GrowthState.COMPLETE

    def step(self) -> GrowthState:
        """
        Apply one generation if still growing.
        Returns the state after the call.
        """
        if self.is_complete():
            return GrowthState.COMPLETE

        subdivide(self.boundary)
        self.generation += 1

        return self.state

    def grow(self, callback: Optional[Callable[['KochSnowflake', int], None]] = None,
             delay: Optional[float] = None) -> int:
        """
        Step until complete.
        Optional callback is called after each generation with (snowflake, generation).
        delay is the pause in seconds between generations, defaulting to the
        configured thread_sleep_time. Returns the final generation.
        """
        if delay is None:
            delay = self.config.delay_seconds

        print(f"Growing Koch snowflake to generation {self.max_iterations}...")

        while not self.is_complete():
            self.step()

            if callback:
                callback(self, self.generation)

            print(f"  Generation {self.generation}: {self.segment_count} segments, "
                  f"perimeter {self.perimeter:.1f}")

            if delay > 0 and not self.is_complete():
                time.sleep(delay)

        print(f"Growth complete after {self.generation} generations")
        return self.generation

    @property
    def segment_count(self) -> int:
        return self.boundary.node_count

    @property
    def perimeter(self) -> float:
        return sum(line.length for line in self.boundary.segments())

    def status(self) -> GrowthStatus:
        return GrowthStatus(
            generation=self.generation,
            max_iterations=self.max_iterations,
            segment_count=self.segment_count,
            complete=self.is_complete(),
        )

    def get_segments(self) -> List[tuple]:
        """Return all segments as ((x1,y1), (x2,y2)) tuples in drawing order."""
        return [line.to_tuple() for line in self.boundary.segments()]

    def __repr__(self) -> str:
        return (f"KochSnowflake(generation={self.generation}/{self.max_iterations}, "
                f"segments={self.segment_count})")
