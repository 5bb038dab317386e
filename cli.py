"""CLI entry point for runtime track decoding.

Loads deserialized track groups, builds runtime tracks with speeds, overlays
and extrema, and writes a summary table plus optional per-track samples and
profile plots.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict

from runtime_tracks.config import get_nested, load_config, resolve_config
from runtime_tracks.groups import GroupDecoder
from runtime_tracks.io import load_meta_groups, save_dataframe, track_samples_to_frame, tracks_to_frame


def configure_logging(log_cfg: Dict[str, object]) -> None:
    """Configure root logger with both file and console handlers."""

    log_dir = Path(log_cfg.get("dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    filename = log_cfg.get("filename", "runtime_tracks.log")
    log_path = log_dir / filename
    level_name = str(log_cfg.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s - %(levelname)s - %(message)s"
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(fmt))
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(fmt))

    root.addHandler(file_handler)
    root.addHandler(stream_handler)
    root.info("Logging to %s (level=%s)", log_path, level_name)


def main(config_path: str = "config/runtime_tracks.yaml", input_path: str | None = None) -> None:
    cfg = load_config(config_path)

    configure_logging(cfg.get("logging", {}) or {})
    decoder_cfg = cfg.get("decoder", {}) or {}
    decoder_config = resolve_config(decoder_cfg)
    if "log_level" in decoder_cfg:
        logging.getLogger().setLevel(decoder_config.log_level)

    input_path = input_path or get_nested(cfg, ["input", "path"], "data/track_groups.json")
    meta_groups = load_meta_groups(input_path)

    tracks = GroupDecoder(decoder_config).decode(meta_groups)
    if not tracks:
        logging.warning("No runtime tracks decoded from %s; exiting.", input_path)
        return

    output_cfg = cfg.get("output", {}) or {}
    output_dir = Path(output_cfg.get("dir", "output"))
    csv_dir = output_dir / "csv"
    plots_dir = output_dir / "figures"

    save_dataframe(tracks_to_frame(tracks), csv_dir / "runtime_tracks_summary.csv")

    if output_cfg.get("save_samples", False):
        for track in tracks:
            save_dataframe(track_samples_to_frame(track), csv_dir / f"samples_{track.id}.csv")

    if output_cfg.get("save_plots", False):
        from runtime_tracks.plots import plot_track_profile

        for track in tracks:
            plot_track_profile(track, plots_dir / f"profile_{track.id}.png")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Decode differentially encoded track groups.")
    parser.add_argument(
        "-c",
        "--config",
        default="config/runtime_tracks.yaml",
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Track group file (.json or .joblib); overrides input.path from the config.",
    )
    args = parser.parse_args()
    main(args.config, args.input)
