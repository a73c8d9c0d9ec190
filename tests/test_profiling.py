import pytest

from koch.boundary import Boundary
from koch.profiling import Timing, profile, profile_block, profiler
from koch.subdivision import subdivide


@pytest.fixture
def recording():
    profiler.reset()
    profiler.enabled = True
    yield profiler
    profiler.enabled = False
    profiler.reset()


def test_disabled_profiler_records_nothing():
    profiler.reset()
    profiler.enabled = False

    with profile_block('idle'):
        pass

    assert profiler.summary() == []


def test_subdivision_passes_are_timed(recording):
    boundary = Boundary()
    boundary.initialize(800, 600, 30)

    subdivide(boundary)
    subdivide(boundary)

    timings = dict(recording.summary())
    assert timings['subdivide'].calls == 2
    # initialize swaps in the seed, each pass swaps in a new generation
    assert timings['Boundary.replace'].calls == 3


def test_failing_call_is_still_timed(recording):
    @profile
    def explode():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()

    assert dict(recording.summary())[explode.__qualname__].calls == 1


def test_timing_tracks_mean_and_worst():
    timing = Timing()
    assert timing.mean == 0.0

    for elapsed in (0.1, 0.3, 0.2):
        timing.add(elapsed)

    assert timing.calls == 3
    assert timing.mean == pytest.approx(0.2)
    assert timing.worst == 0.3


def test_summary_is_sorted_slowest_first(recording):
    recording.record('fast', 0.01)
    recording.record('slow', 0.5)

    assert [name for name, _ in recording.summary()] == ['slow', 'fast']
