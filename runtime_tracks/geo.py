"""Geodesic distances between track fixes."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from pyproj import Geod

from .codec import round_half_up
from .models import LatLon

# Single WGS84 ellipsoid instance reused for every distance computation.
_geod = Geod(ellps="WGS84")


def distance_m(point_a: LatLon, point_b: LatLon) -> float:
    """Return the distance between two points in whole meters."""

    _, _, dist = _geod.inv(point_a.lon, point_a.lat, point_b.lon, point_b.lat)
    return float(round_half_up(dist))


def step_distances_m(lat: Sequence[float], lon: Sequence[float]) -> np.ndarray:
    """Return the distance from each fix to the previous one, in whole meters.

    The first entry is 0 as the first fix has no predecessor.
    """

    lat_arr = np.asarray(lat, dtype=float)
    lon_arr = np.asarray(lon, dtype=float)
    steps = np.zeros(len(lat_arr), dtype=float)
    if len(lat_arr) < 2:
        return steps

    _, _, dist = _geod.inv(lon_arr[:-1], lat_arr[:-1], lon_arr[1:], lat_arr[1:])
    steps[1:] = round_half_up(dist)
    return steps
