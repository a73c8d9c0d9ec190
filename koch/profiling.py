"""
Timing of subdivision passes and boundary swaps.

Recording is off until a script sets `profiler.enabled = True`; the summary
table is printed at interpreter exit when anything was recorded.
"""

import time
import atexit
from functools import wraps
from typing import List, Tuple


class Timing:
    __slots__ = ('calls', 'total', 'worst')

    def __init__(self):
        self.calls = 0
        self.total = 0.0
        self.worst = 0.0

    def add(self, elapsed: float):
        self.calls += 1
        self.total += elapsed
        if elapsed > self.worst:
            self.worst = elapsed

    @property
    def mean(self) -> float:
        return self.total / self.calls if self.calls else 0.0


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.timings = {}
            cls._instance.enabled = False
            atexit.register(cls._instance.print_stats)
        return cls._instance

    def record(self, name: str, elapsed: float):
        if self.enabled:
            self.timings.setdefault(name, Timing()).add(elapsed)

    def summary(self) -> List[Tuple[str, Timing]]:
        """Timings sorted by total time, slowest first."""
        return sorted(self.timings.items(), key=lambda item: item[1].total, reverse=True)

    def print_stats(self):
        rows = self.summary()
        if not rows:
            return

        print(f"\n{'Koch profiling':=^72}")
        print(f"{'Name':<32}{'Calls':>8}{'Total(s)':>10}{'Mean(ms)':>11}{'Worst(ms)':>11}")
        for name, timing in rows:
            print(f"{name:<32}{timing.calls:>8}{timing.total:>10.3f}"
                  f"{timing.mean * 1000:>11.3f}{timing.worst * 1000:>11.3f}")
        print("=" * 72)

    def reset(self):
        self.timings.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            profiler.record(func.__qualname__, time.perf_counter() - start)
    return wrapper


class profile_block:
    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        profiler.record(self.name, time.perf_counter() - self.start)
