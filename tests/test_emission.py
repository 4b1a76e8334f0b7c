import math
import random

import pytest

from diorama.emission import EmissionController


def _run(rate, dts):
    ec = EmissionController(rate)
    total = 0
    for dt in dts:
        n = ec.tick(dt)
        assert n >= 0
        assert ec.accumulator >= 0
        total += n
    return total


def test_fixed_frame_step_spawns_rate_times_elapsed():
    total = _run(200, [0.016] * 100)
    assert abs(total - math.floor(200 * 1.6)) <= 1


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_total_spawned_does_not_depend_on_frame_split(seed):
    rng = random.Random(seed)
    dts = [rng.uniform(0.0, 0.05) for _ in range(400)]
    elapsed = sum(dts)
    for rate in (13.0, 100.0, 200.0):
        assert abs(_run(rate, dts) - math.floor(rate * elapsed)) <= 1


def test_one_big_tick_matches_many_small_ticks():
    assert abs(_run(100, [2.0]) - _run(100, [0.001] * 2000)) <= 1


def test_fractional_time_is_carried_over():
    ec = EmissionController(10)
    assert ec.tick(0.05) == 0
    assert ec.accumulator == pytest.approx(0.05)
    assert ec.tick(0.05) == 1
    assert ec.accumulator == pytest.approx(0.0, abs=1e-12)


def test_zero_and_negative_dt_spawn_nothing():
    ec = EmissionController(200)
    assert ec.tick(0.0) == 0
    assert ec.tick(-1.0) == 0
    assert ec.accumulator == 0.0


def test_stalled_frame_spawns_the_backlog_at_once():
    ec = EmissionController(200)
    assert ec.tick(5.0) == 1000


def test_rate_must_be_positive():
    with pytest.raises(ValueError):
        EmissionController(0)


def test_reset_clears_owed_time():
    ec = EmissionController(10)
    ec.tick(0.07)
    ec.reset()
    assert ec.accumulator == 0.0
