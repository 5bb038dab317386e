"""Decoding of differentially encoded GPS tracks into runtime tracks.

This package reverses the compact delta/quantized transport encoding of track
groups, derives horizontal and vertical speed series, merges ground altitude
and airspace overlays, and summarises each track with per-field extrema.
"""

from .assembler import (
    add_airspaces,
    add_ground_altitude,
    assemble_runtime_track,
    diff_decode_airspaces,
    diff_decode_track,
    diff_encode_airspaces,
    diff_encode_track,
)
from .codec import diff_decode_array, diff_encode_array
from .config import DecoderConfig, resolve_config
from .groups import GroupDecoder, create_runtime_tracks
from .ids import create_track_id, extract_group_id
from .kinematics import compute_horizontal_speed, compute_vertical_speed
from .models import (
    Airspaces,
    AirspacesGroup,
    GroundAltitude,
    GroundAltitudeGroup,
    MetaTrackGroup,
    RuntimeTrack,
    Track,
    TrackGroup,
)

__all__ = [
    "Airspaces",
    "AirspacesGroup",
    "DecoderConfig",
    "GroundAltitude",
    "GroundAltitudeGroup",
    "GroupDecoder",
    "MetaTrackGroup",
    "RuntimeTrack",
    "Track",
    "TrackGroup",
    "add_airspaces",
    "add_ground_altitude",
    "assemble_runtime_track",
    "compute_horizontal_speed",
    "compute_vertical_speed",
    "create_runtime_tracks",
    "create_track_id",
    "diff_decode_airspaces",
    "diff_decode_array",
    "diff_decode_track",
    "diff_encode_airspaces",
    "diff_encode_array",
    "diff_encode_track",
    "extract_group_id",
    "resolve_config",
]
