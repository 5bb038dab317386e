"""Optional plotting utilities for debugging.

Draws the altitude and speed profiles of a runtime track over time.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

from .models import RuntimeTrack


def plot_track_profile(track: RuntimeTrack, output_path: Path) -> None:
    """Plot altitude, ground altitude and speeds against elapsed time."""

    if len(track) == 0:
        return

    elapsed = track.time_sec - track.min_time_sec
    fig, (ax_alt, ax_speed) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)

    ax_alt.plot(elapsed, track.alt, label="altitude")
    ax_alt.fill_between(elapsed, track.gnd_alt, color="tab:brown", alpha=0.4, label="ground")
    ax_alt.set_ylabel("Altitude (m)")
    ax_alt.legend(loc="best", fontsize=8)

    ax_speed.plot(elapsed, track.vx, label="vx (km/h)")
    ax_vz = ax_speed.twinx()
    ax_vz.plot(elapsed, track.vz, color="tab:orange", label="vz (m/s)")
    ax_speed.set_xlabel("Elapsed time (s)")
    ax_speed.set_ylabel("Horizontal speed (km/h)")
    ax_vz.set_ylabel("Vertical speed (m/s)")

    title = f"Track {track.id}"
    if track.name:
        title += f" ({track.name})"
    fig.suptitle(title)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
