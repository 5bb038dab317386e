import json
import logging

import pandas as pd

from cli import main
from runtime_tracks.assembler import diff_encode_track
from runtime_tracks.models import Track


def test_cli_writes_summary_samples_and_plots(tmp_path):
    track = diff_encode_track(
        Track(pilot="Jane", lat=[45.0, 45.001, 45.002], lon=[6.0] * 3, alt=[900, 950, 1000], time_sec=[0, 20, 40])
    )
    groups = [
        {
            "id": 5,
            "track_group": {
                "tracks": [
                    {
                        "pilot": track.pilot,
                        "lat": track.lat.tolist(),
                        "lon": track.lon.tolist(),
                        "alt": track.alt.tolist(),
                        "time_sec": track.time_sec.tolist(),
                    }
                ]
            },
        }
    ]
    input_path = tmp_path / "groups.json"
    input_path.write_text(json.dumps(groups), encoding="utf-8")

    output_dir = tmp_path / "out"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"input:\n  path: {input_path}\n"
        f"output:\n  dir: {output_dir}\n  save_samples: true\n  save_plots: true\n"
        f"logging:\n  dir: {tmp_path / 'logs'}\n",
        encoding="utf-8",
    )

    main(str(config_path))

    summary = pd.read_csv(output_dir / "csv" / "runtime_tracks_summary.csv")
    assert summary["id"].tolist() == ["5-0"]
    assert summary.loc[0, "max_alt"] == 1000
    assert (output_dir / "csv" / "samples_5-0.csv").exists()
    assert (output_dir / "figures" / "profile_5-0.png").exists()
    assert (tmp_path / "logs" / "runtime_tracks.log").exists()


def _write_config(tmp_path, extra=""):
    input_path = tmp_path / "groups.json"
    input_path.write_text("[]", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"input:\n  path: {input_path}\n"
        f"output:\n  dir: {tmp_path / 'out'}\n"
        f"logging:\n  dir: {tmp_path / 'logs'}\n  level: DEBUG\n" + extra,
        encoding="utf-8",
    )
    return config_path


def test_cli_logging_level_reaches_components(tmp_path):
    main(str(_write_config(tmp_path)))
    assert logging.getLogger("GroupDecoder").getEffectiveLevel() == logging.DEBUG


def test_cli_decoder_log_level_applies_to_root(tmp_path):
    main(str(_write_config(tmp_path, "decoder:\n  log_level: WARNING\n")))
    assert logging.getLogger().level == logging.WARNING
