"""Input/output helpers for runtime track decoding.

Covers loading already-deserialized track groups from JSON or joblib files,
tabular summaries of runtime tracks, and CSV saving.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import joblib
import pandas as pd

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

SUMMARY_COLUMNS: List[str] = [
    "id",
    "name",
    "is_post_processed",
    "n_points",
    "max_alt",
    "min_alt",
    "max_lat",
    "min_lat",
    "max_lon",
    "min_lon",
    "max_time_sec",
    "min_time_sec",
    "max_vx",
    "min_vx",
    "max_vz",
    "min_vz",
    "max_distance",
    "n_airspaces",
]


def _track_from_mapping(data: Mapping[str, Any]) -> Track:
    return Track(
        pilot=str(data.get("pilot", "")),
        lat=list(data.get("lat", [])),
        lon=list(data.get("lon", [])),
        alt=list(data.get("alt", [])),
        time_sec=list(data.get("time_sec", [])),
    )


def _airspaces_from_mapping(data: Mapping[str, Any]) -> Airspaces:
    return Airspaces(
        start_sec=list(data.get("start_sec", [])),
        end_sec=list(data.get("end_sec", [])),
        name=list(data.get("name", [])),
        category=list(data.get("category", [])),
        top=list(data.get("top", [])),
        bottom=list(data.get("bottom", [])),
        flags=list(data.get("flags", [])),
    )


def meta_group_from_mapping(data: Mapping[str, Any]) -> MetaTrackGroup:
    """Build a :class:`MetaTrackGroup` from a plain mapping.

    Only ``id`` is required; absent containers stay ``None``.

    Raises:
        KeyError: If the mapping has no ``id``.
    """

    if "id" not in data:
        raise KeyError("Track group mapping must contain an 'id'.")

    track_group: Optional[TrackGroup] = None
    if data.get("track_group") is not None:
        track_group = TrackGroup(
            tracks=[_track_from_mapping(track) for track in data["track_group"].get("tracks", [])]
        )

    ground_altitude_group: Optional[GroundAltitudeGroup] = None
    if data.get("ground_altitude_group") is not None:
        ground_altitude_group = GroundAltitudeGroup(
            ground_altitudes=[
                GroundAltitude(
                    altitudes=entry.get("altitudes"),
                    has_errors=bool(entry.get("has_errors", False)),
                )
                for entry in data["ground_altitude_group"].get("ground_altitudes", [])
            ]
        )

    airspaces_group: Optional[AirspacesGroup] = None
    if data.get("airspaces_group") is not None:
        airspaces_group = AirspacesGroup(
            airspaces=[_airspaces_from_mapping(entry) for entry in data["airspaces_group"].get("airspaces", [])]
        )

    return MetaTrackGroup(
        id=int(data["id"]),
        num_postprocess=int(data.get("num_postprocess", 0)),
        track_group=track_group,
        ground_altitude_group=ground_altitude_group,
        airspaces_group=airspaces_group,
    )


def load_meta_groups(path: str | Path) -> List[MetaTrackGroup]:
    """Load deserialized track groups from a ``.json`` or ``.joblib`` file.

    The payload is either a list of group mappings or a mapping holding that
    list under ``groups``.
    """

    path = Path(path)
    if not path.exists():
        message = f"Track group file not found: {path}"
        logging.error(message)
        raise FileNotFoundError(message)

    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as fh:
            payload: Any = json.load(fh)
    elif suffix == ".joblib":
        payload = joblib.load(path)
    else:
        raise ValueError(f"Unsupported track group file format: {path.suffix}")

    if isinstance(payload, Mapping):
        payload = payload.get("groups", [])

    groups = [meta_group_from_mapping(entry) for entry in payload]
    logging.info("Loaded %d track groups from %s", len(groups), path)
    return groups


def tracks_to_frame(tracks: List[RuntimeTrack]) -> pd.DataFrame:
    """Return one summary row per runtime track."""

    rows: List[Dict[str, Any]] = []
    for track in tracks:
        row: Dict[str, Any] = {column: getattr(track, column, None) for column in SUMMARY_COLUMNS}
        row["n_points"] = len(track)
        row["n_airspaces"] = len(track.airspaces) if track.airspaces is not None else 0
        rows.append(row)
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def track_samples_to_frame(track: RuntimeTrack) -> pd.DataFrame:
    """Return the per-fix arrays of a runtime track as a table."""

    return pd.DataFrame(
        {
            "time_sec": track.time_sec,
            "lat": track.lat,
            "lon": track.lon,
            "alt": track.alt,
            "gnd_alt": track.gnd_alt,
            "vx": track.vx,
            "vz": track.vz,
            "heading": track.heading,
        }
    )


def save_dataframe(df: pd.DataFrame, path: str | Path) -> None:
    """Persist a DataFrame to CSV."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logging.info("Saved %d rows to %s", len(df), path)
