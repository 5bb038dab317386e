"""Assembly of runtime tracks from differentially encoded tracks.

The assembler decodes the positional, altitude and time arrays, derives the
speed series, reserves placeholders for values computed later (ground
altitude, heading, camera look-at), and records per-field extrema. Overlays
are merged in place right after assembly.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple

import numpy as np

from .codec import diff_decode_array, diff_encode_array
from .config import COORDINATE_SCALE, DecoderConfig
from .geo import step_distances_m
from .kinematics import compute_horizontal_speed, compute_vertical_speed
from .models import Airspaces, GroundAltitude, RuntimeTrack, Track


def _extent(values: np.ndarray) -> Tuple[float, float]:
    """Return ``(max, min)`` of ``values``, ``(0.0, 0.0)`` when empty."""

    if len(values) == 0:
        return 0.0, 0.0
    return float(np.max(values)), float(np.min(values))


def diff_encode_track(track: Track, coordinate_scale: float = COORDINATE_SCALE) -> Track:
    """Differential encoding of a track."""

    return replace(
        track,
        lat=diff_encode_array(track.lat, coordinate_scale),
        lon=diff_encode_array(track.lon, coordinate_scale),
        alt=diff_encode_array(track.alt),
        # Keep sub-second precision.
        time_sec=diff_encode_array(track.time_sec, 1, round_values=False),
    )


def diff_decode_track(track: Track, coordinate_scale: float = COORDINATE_SCALE) -> Track:
    """Differential decoding of a track."""

    return replace(
        track,
        lat=diff_decode_array(track.lat, coordinate_scale),
        lon=diff_decode_array(track.lon, coordinate_scale),
        alt=diff_decode_array(track.alt),
        time_sec=diff_decode_array(track.time_sec),
    )


def diff_encode_airspaces(airspaces: Airspaces) -> Airspaces:
    """Differential encoding of airspaces.

    Signed values are used as the end times are not ordered.
    """

    return replace(
        airspaces,
        start_sec=diff_encode_array(airspaces.start_sec, signed=True),
        end_sec=diff_encode_array(airspaces.end_sec, signed=True),
    )


def diff_decode_airspaces(airspaces: Airspaces) -> Airspaces:
    """Differential decoding of airspaces."""

    return replace(
        airspaces,
        start_sec=diff_decode_array(airspaces.start_sec),
        end_sec=diff_decode_array(airspaces.end_sec),
    )


def assemble_runtime_track(
    track_id: str,
    differential_track: Track,
    is_post_processed: bool,
    config: Optional[DecoderConfig] = None,
) -> RuntimeTrack:
    """Create a runtime track from a differentially encoded track.

    Parameters
    ----------
    track_id:
        Identifier composed by the caller, see :func:`runtime_tracks.ids.create_track_id`.
    differential_track:
        Track whose arrays hold differential encodings.
    is_post_processed:
        Whether the server post-processed the track.
    config:
        Decoder settings; defaults apply when omitted.

    Returns
    -------
    RuntimeTrack
        Decoded track with speeds, placeholders and extrema.
    """

    config = config or DecoderConfig()
    track = diff_decode_track(differential_track, config.coordinate_scale)
    lat: np.ndarray = track.lat
    lon: np.ndarray = track.lon
    alt: np.ndarray = track.alt
    time_sec: np.ndarray = track.time_sec
    track_len = len(lat)

    # Computed once, reused for vx and max_distance.
    dist_x = step_distances_m(lat, lon)
    vx = compute_horizontal_speed(
        lat,
        lon,
        time_sec,
        step_distances=dist_x,
        max_samples=config.horizontal_max_samples,
        max_seconds=config.horizontal_max_seconds,
    )
    vz = compute_vertical_speed(
        alt,
        time_sec,
        max_samples=config.vertical_max_samples,
        max_seconds=config.vertical_max_seconds,
    )

    max_alt, min_alt = _extent(alt)
    max_lat, min_lat = _extent(lat)
    max_lon, min_lon = _extent(lon)
    max_time_sec, min_time_sec = _extent(time_sec)
    max_vx, min_vx = _extent(vx)
    max_vz, min_vz = _extent(vz)
    max_distance, _ = _extent(dist_x)

    return RuntimeTrack(
        id=track_id,
        name=track.pilot,
        is_post_processed=is_post_processed,
        lat=lat,
        lon=lon,
        alt=alt,
        time_sec=time_sec,
        # Replaced by the ground altitude overlay when available.
        gnd_alt=np.zeros(track_len, dtype=float),
        vx=vx,
        vz=vz,
        heading=np.zeros(track_len, dtype=float),
        # Replaced by the smoothed camera path when available.
        look_at_lat=lat.copy(),
        look_at_lon=lon.copy(),
        max_alt=max_alt,
        min_alt=min_alt,
        max_lat=max_lat,
        min_lat=min_lat,
        max_lon=max_lon,
        min_lon=min_lon,
        max_time_sec=max_time_sec,
        min_time_sec=min_time_sec,
        max_vx=max_vx,
        min_vx=min_vx,
        max_vz=max_vz,
        min_vz=min_vz,
        max_distance=max_distance,
    )


def add_ground_altitude(track: RuntimeTrack, ground_altitude: GroundAltitude) -> None:
    """Add the ground altitude to a runtime track.

    The overlay is ignored when it is missing or its length does not match the
    track, leaving the zero-filled placeholder in place.
    """

    altitudes: Optional[Sequence[float]] = ground_altitude.altitudes
    if altitudes is None or len(altitudes) != len(track):
        logging.debug(
            "Skipping ground altitude for track %s (%s values for %d fixes)",
            track.id,
            "no" if altitudes is None else len(altitudes),
            len(track),
        )
        return
    track.gnd_alt = diff_decode_array(altitudes)


def add_airspaces(track: RuntimeTrack, airspaces: Airspaces) -> None:
    """Add the decoded airspaces to a runtime track."""

    track.airspaces = diff_decode_airspaces(airspaces)
