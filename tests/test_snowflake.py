import pytest

from config.koch_config import KochConfig
from koch import GrowthState, KochSnowflake


def test_initial_state(small_config):
    snowflake = KochSnowflake(small_config)

    assert snowflake.generation == 0
    assert snowflake.state is GrowthState.GROWING
    assert not snowflake.is_complete()
    assert snowflake.segment_count == 3


def test_step_advances_one_generation(small_config):
    snowflake = KochSnowflake(small_config)

    assert snowflake.step() is GrowthState.GROWING
    assert snowflake.generation == 1
    assert snowflake.segment_count == 12


def test_scenario_800x600_three_iterations(small_config):
    snowflake = KochSnowflake(small_config)

    states = [snowflake.step() for _ in range(3)]

    assert states == [GrowthState.GROWING, GrowthState.GROWING, GrowthState.COMPLETE]
    assert snowflake.segment_count == 192
    assert snowflake.is_complete()
    assert snowflake.boundary.is_closed()


def test_step_after_completion_is_a_noop(small_config):
    snowflake = KochSnowflake(small_config)
    for _ in range(3):
        snowflake.step()

    before = snowflake.get_segments()
    for _ in range(5):
        assert snowflake.step() is GrowthState.COMPLETE

    assert snowflake.generation == 3
    assert snowflake.get_segments() == before


def test_zero_max_iterations_starts_complete():
    snowflake = KochSnowflake(KochConfig(max_iterations=0, thread_sleep_time=0))
    assert snowflake.is_complete()
    assert snowflake.step() is GrowthState.COMPLETE
    assert snowflake.segment_count == 3


def test_is_complete_has_no_side_effects(small_config):
    snowflake = KochSnowflake(small_config)
    for _ in range(10):
        snowflake.is_complete()
    assert snowflake.generation == 0
    assert snowflake.segment_count == 3


def test_independent_sessions_are_deterministic(small_config):
    a = KochSnowflake(small_config)
    b = KochSnowflake(KochConfig(width=800, height=600, padding=30,
                                 max_iterations=3, thread_sleep_time=0))
    for _ in range(3):
        a.step()
        b.step()

    assert a.get_segments() == b.get_segments()
    assert a.boundary is not b.boundary


def test_grow_runs_to_completion_with_callback(small_config):
    snowflake = KochSnowflake(small_config)
    seen = []

    final = snowflake.grow(callback=lambda s, g: seen.append((g, s.segment_count)))

    assert final == 3
    assert seen == [(1, 12), (2, 48), (3, 192)]


def test_grow_sleeps_between_generations(small_config, monkeypatch):
    sleeps = []
    monkeypatch.setattr('koch.snowflake.time.sleep', sleeps.append)

    KochSnowflake(small_config).grow(delay=0.25)

    assert sleeps == [0.25, 0.25]


def test_status_reports_progress(small_config):
    snowflake = KochSnowflake(small_config)
    snowflake.step()

    status = snowflake.status()
    assert status.generation == 1
    assert status.max_iterations == 3
    assert status.segment_count == 12
    assert not status.complete


def test_perimeter_grows_by_four_thirds(small_config):
    snowflake = KochSnowflake(small_config)
    before = snowflake.perimeter
    snowflake.step()
    assert snowflake.perimeter == pytest.approx(before * 4 / 3)


def test_segments_form_closed_polygon(small_config):
    snowflake = KochSnowflake(small_config)
    snowflake.step()
    segments = snowflake.get_segments()

    assert segments[-1][1] == segments[0][0]
    for (_, end), (start, _) in zip(segments, segments[1:]):
        assert end == start
