"""Windowed speed estimation for decoded tracks.

Both estimators walk the track and, for each fix, accumulate the fix's own
step (distance and elapsed time from the previous fix) once per window slot
until the window is full, the track ends, or the accumulated time exceeds the
limit. The leading step is repeated rather than summing the following steps.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .codec import round_half_away, round_half_up
from .geo import step_distances_m

# m/s to km/h.
MPS_TO_KMH: float = 3.6

HORIZONTAL_MAX_SAMPLES: int = 65
HORIZONTAL_MAX_SECONDS: float = 60.0
VERTICAL_MAX_SAMPLES: int = 35
VERTICAL_MAX_SECONDS: float = 30.0


def step_deltas(values: Sequence[float]) -> np.ndarray:
    """Return ``values[i] - values[i - 1]`` with 0 for the first element."""

    data = np.asarray(values, dtype=float)
    deltas = np.zeros(len(data), dtype=float)
    if len(data) > 1:
        deltas[1:] = np.diff(data)
    return deltas


def accumulate_windows(
    steps: np.ndarray,
    delta_sec: np.ndarray,
    max_samples: int,
    max_seconds: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return the accumulated step and elapsed time of each forward window."""

    n = len(steps)
    totals = np.zeros(n, dtype=float)
    elapsed = np.zeros(n, dtype=float)

    for i in range(n):
        distance = 0.0
        seconds = 0.0
        avg = 1
        while i + avg < n and avg < max_samples:
            distance += steps[i]
            seconds += delta_sec[i]
            if seconds > max_seconds:
                break
            avg += 1
        totals[i] = distance
        elapsed[i] = seconds

    return totals, elapsed


def _rates(totals: np.ndarray, elapsed: np.ndarray, factor: float = 1.0) -> np.ndarray:
    """Divide ``factor * totals`` by ``elapsed``, yielding 0 where no time elapsed."""

    out = np.zeros(len(totals), dtype=float)
    np.divide(factor * totals, elapsed, out=out, where=elapsed > 0)
    return out


def compute_horizontal_speed(
    lat: Sequence[float],
    lon: Sequence[float],
    time_sec: Sequence[float],
    step_distances: Optional[np.ndarray] = None,
    max_samples: int = HORIZONTAL_MAX_SAMPLES,
    max_seconds: float = HORIZONTAL_MAX_SECONDS,
) -> np.ndarray:
    """Return the horizontal speed of each fix in km/h, rounded to integers.

    ``step_distances`` may carry distances already computed by the caller so
    the geodesic computation runs once per track.
    """

    if step_distances is None:
        step_distances = step_distances_m(lat, lon)
    totals, elapsed = accumulate_windows(step_distances, step_deltas(time_sec), max_samples, max_seconds)
    return round_half_up(_rates(totals, elapsed, MPS_TO_KMH))


# altitude is in meter.
# time is in seconds.
def compute_vertical_speed(
    alt: Sequence[float],
    time_sec: Sequence[float],
    max_samples: int = VERTICAL_MAX_SAMPLES,
    max_seconds: float = VERTICAL_MAX_SECONDS,
) -> np.ndarray:
    """Return the vertical speed of each fix in m/s, rounded to one decimal."""

    totals, elapsed = accumulate_windows(step_deltas(alt), step_deltas(time_sec), max_samples, max_seconds)
    return round_half_away(_rates(totals, elapsed), 1)
