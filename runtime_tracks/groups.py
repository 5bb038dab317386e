"""Decoding of track groups into a flat list of runtime tracks."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .assembler import add_airspaces, add_ground_altitude, assemble_runtime_track
from .base import PipelineComponent
from .config import DecoderConfig
from .ids import create_track_id
from .models import MetaTrackGroup, RuntimeTrack


class GroupDecoder(PipelineComponent):
    """Build runtime tracks for each group and merge the group overlays."""

    def __init__(self, config: Optional[DecoderConfig] = None) -> None:
        """Store configuration shared by every assembled track."""

        super().__init__(config or DecoderConfig())

    def decode(self, meta_groups: Iterable[MetaTrackGroup]) -> List[RuntimeTrack]:
        """Return the runtime tracks of all groups, in group then index order."""

        runtime_tracks: List[RuntimeTrack] = []
        num_groups = 0
        for meta_group in meta_groups:
            runtime_tracks.extend(self.decode_group(meta_group))
            num_groups += 1

        self.logger.info("Decoded %d runtime tracks from %d groups.", len(runtime_tracks), num_groups)
        return runtime_tracks

    def decode_group(self, meta_group: MetaTrackGroup) -> List[RuntimeTrack]:
        """Return the runtime tracks of a single group.

        Groups are independent of each other so a batch can be split across
        callers, provided the results are concatenated in group order.
        """

        rt_tracks: List[RuntimeTrack] = []
        is_post_processed = meta_group.num_postprocess > 0

        if meta_group.track_group is not None:
            for i, track in enumerate(meta_group.track_group.tracks):
                rt_tracks.append(
                    assemble_runtime_track(
                        create_track_id(meta_group.id, i),
                        track,
                        is_post_processed,
                        self.config,
                    )
                )

        if meta_group.ground_altitude_group is not None:
            ground_altitudes = meta_group.ground_altitude_group.ground_altitudes
            self._warn_on_extra_overlays("ground altitude", meta_group.id, len(ground_altitudes), len(rt_tracks))
            for rt_track, gnd_alt in zip(rt_tracks, ground_altitudes):
                add_ground_altitude(rt_track, gnd_alt)

        if meta_group.airspaces_group is not None:
            airspaces = meta_group.airspaces_group.airspaces
            self._warn_on_extra_overlays("airspaces", meta_group.id, len(airspaces), len(rt_tracks))
            for rt_track, track_airspaces in zip(rt_tracks, airspaces):
                add_airspaces(rt_track, track_airspaces)

        self.logger.debug("Group %s produced %d runtime tracks.", meta_group.id, len(rt_tracks))
        return rt_tracks

    def _warn_on_extra_overlays(self, kind: str, group_id: int, num_overlays: int, num_tracks: int) -> None:
        if num_overlays > num_tracks:
            self.logger.warning(
                "Group %s has %d %s entries for %d tracks; ignoring the extra entries.",
                group_id,
                num_overlays,
                kind,
                num_tracks,
            )


def create_runtime_tracks(
    meta_groups: Iterable[MetaTrackGroup],
    config: Optional[DecoderConfig] = None,
) -> List[RuntimeTrack]:
    """Create the runtime tracks of a batch of groups."""

    return GroupDecoder(config).decode(meta_groups)
