"""Data models for encoded track groups and decoded runtime tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class LatLon:
    """Geographic position in decimal degrees."""

    lat: float
    lon: float


@dataclass
class Track:
    """A single track, either differentially encoded or decoded.

    Attributes:
        pilot: Display name of the pilot.
        lat: Latitudes, degrees once decoded.
        lon: Longitudes, degrees once decoded.
        alt: Altitudes in meters once decoded.
        time_sec: Time of each fix in seconds.
    """

    pilot: str = ""
    lat: Sequence[float] = field(default_factory=list)
    lon: Sequence[float] = field(default_factory=list)
    alt: Sequence[float] = field(default_factory=list)
    time_sec: Sequence[float] = field(default_factory=list)


@dataclass
class TrackGroup:
    tracks: List[Track] = field(default_factory=list)


@dataclass
class GroundAltitude:
    """Differentially encoded terrain elevation, one value per fix."""

    altitudes: Optional[Sequence[float]] = None
    has_errors: bool = False


@dataclass
class GroundAltitudeGroup:
    ground_altitudes: List[GroundAltitude] = field(default_factory=list)


@dataclass
class Airspaces:
    """Airspace crossings of a track.

    ``start_sec`` and ``end_sec`` hold entry and exit times. They are encoded
    as signed deltas since the end times are not ordered. The remaining fields
    are parallel descriptive values passed through untouched.
    """

    start_sec: Sequence[float] = field(default_factory=list)
    end_sec: Sequence[float] = field(default_factory=list)
    name: List[str] = field(default_factory=list)
    category: List[str] = field(default_factory=list)
    top: List[str] = field(default_factory=list)
    bottom: List[str] = field(default_factory=list)
    flags: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.start_sec)


@dataclass
class AirspacesGroup:
    airspaces: List[Airspaces] = field(default_factory=list)


@dataclass
class MetaTrackGroup:
    """A group of tracks as delivered by the server, after deserialization.

    Each container is optional. The overlay containers are parallel to
    ``track_group.tracks``: entry ``i`` belongs to track ``i``.
    """

    id: int
    num_postprocess: int = 0
    track_group: Optional[TrackGroup] = None
    ground_altitude_group: Optional[GroundAltitudeGroup] = None
    airspaces_group: Optional[AirspacesGroup] = None


@dataclass
class RuntimeTrack:
    """A fully decoded track ready for rendering and analysis.

    ``heading`` and ``look_at_lat``/``look_at_lon`` are placeholders that a
    downstream smoothing process may replace. ``gnd_alt`` stays zero-filled
    until a ground altitude overlay of matching length is merged.
    """

    # Composed as "{group_id}-{group_index}".
    id: str
    name: str
    # Whether the track has been post-processed on the server.
    is_post_processed: bool
    lat: np.ndarray
    lon: np.ndarray
    alt: np.ndarray
    time_sec: np.ndarray
    gnd_alt: np.ndarray
    vx: np.ndarray
    vz: np.ndarray
    heading: np.ndarray
    look_at_lat: np.ndarray
    look_at_lon: np.ndarray
    max_alt: float
    min_alt: float
    max_lat: float
    min_lat: float
    max_lon: float
    min_lon: float
    max_time_sec: float
    min_time_sec: float
    max_vx: float
    min_vx: float
    max_vz: float
    min_vz: float
    # Largest distance between two consecutive fixes, in meters.
    max_distance: float
    airspaces: Optional[Airspaces] = None

    def __len__(self) -> int:
        return len(self.lat)
