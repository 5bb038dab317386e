import numpy as np

from runtime_tracks.geo import distance_m, step_distances_m
from runtime_tracks.kinematics import (
    accumulate_windows,
    compute_horizontal_speed,
    compute_vertical_speed,
    step_deltas,
)
from runtime_tracks.models import LatLon


def test_distance_along_equator():
    assert abs(distance_m(LatLon(0.0, 0.0), LatLon(0.0, 1.0)) - 111319) <= 1


def test_step_distances_start_at_zero():
    steps = step_distances_m([0.0, 0.0, 0.0], [0.0, 1.0, 1.0])
    assert steps.shape == (3,)
    assert steps[0] == 0
    assert steps[1] > 0
    assert steps[2] == 0


def test_no_motion_gives_zero_speeds():
    time_sec = [0, 5, 10, 15, 20]
    lat = [45.0] * 5
    lon = [6.0] * 5
    alt = [1000.0] * 5
    assert np.all(compute_horizontal_speed(lat, lon, time_sec) == 0)
    assert np.all(compute_vertical_speed(alt, time_sec) == 0)


def test_zero_elapsed_time_gives_zero_speeds():
    time_sec = [10, 10, 10, 10]
    alt = [0, 100, 200, 300]
    vz = compute_vertical_speed(alt, time_sec)
    vx = compute_horizontal_speed([45.0, 45.1, 45.2, 45.3], [6.0] * 4, time_sec)
    assert np.all(vz == 0)
    assert np.all(vx == 0)
    assert np.all(np.isfinite(vz))


def test_short_tracks():
    assert compute_vertical_speed([], []).size == 0
    assert compute_vertical_speed([100], [0]).tolist() == [0]
    assert compute_horizontal_speed([45.0], [6.0], [0]).tolist() == [0]


def test_window_repeats_leading_step():
    steps = np.array([0.0, 5.0, 7.0, 9.0])
    deltas = np.array([0.0, 1.0, 1.0, 1.0])
    totals, elapsed = accumulate_windows(steps, deltas, max_samples=65, max_seconds=60)
    # Index 1 has two slots before the end of the track.
    assert totals.tolist() == [0.0, 10.0, 7.0, 0.0]
    assert elapsed.tolist() == [0.0, 2.0, 1.0, 0.0]


def test_window_stops_once_time_limit_exceeded():
    steps = np.full(10, 5.0)
    deltas = np.full(10, 40.0)
    totals, elapsed = accumulate_windows(steps, deltas, max_samples=65, max_seconds=60)
    assert totals[1] == 10.0
    assert elapsed[1] == 80.0


def test_window_is_capped_by_sample_count():
    steps = np.full(100, 2.0)
    deltas = np.full(100, 0.1)
    totals, elapsed = accumulate_windows(steps, deltas, max_samples=65, max_seconds=60)
    assert totals[1] == 64 * 2.0
    assert np.isclose(elapsed[1], 6.4)
    assert totals[98] == 2.0
    assert totals[99] == 0.0


def test_vertical_speed_rounds_to_one_decimal():
    vz = compute_vertical_speed([0, 10, 13, 13], [0, 3, 6, 9])
    assert vz.tolist() == [0.0, 3.3, 1.0, 0.0]
    # Exact ties round away from zero.
    assert compute_vertical_speed([0, 5, 10], [0, 20, 40]).tolist() == [0.0, 0.3, 0.0]
    assert compute_vertical_speed([0, -5, -10], [0, 20, 40]).tolist() == [0.0, -0.3, 0.0]


def test_horizontal_speed_uses_supplied_distances():
    steps = np.array([0.0, 100.0, 50.0])
    vx = compute_horizontal_speed([0, 0, 0], [0, 0, 0], [0, 10, 20], step_distances=steps)
    assert vx.tolist() == [0.0, 36.0, 0.0]


def test_inputs_are_not_mutated():
    alt = np.array([100.0, 110.0, 120.0])
    time_sec = np.array([0.0, 10.0, 20.0])
    compute_vertical_speed(alt, time_sec)
    assert alt.tolist() == [100.0, 110.0, 120.0]
    assert time_sec.tolist() == [0.0, 10.0, 20.0]


def test_step_deltas():
    assert step_deltas([3, 5, 4]).tolist() == [0.0, 2.0, -1.0]
