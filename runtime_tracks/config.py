"""Configuration helpers for runtime track decoding.

Provides the strongly-typed decoder settings, YAML loading, and a small
utility for reading nested configuration values with defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .kinematics import (
    HORIZONTAL_MAX_SAMPLES,
    HORIZONTAL_MAX_SECONDS,
    VERTICAL_MAX_SAMPLES,
    VERTICAL_MAX_SECONDS,
)

# Latitude and longitude are transported in 1e-5 degree units.
COORDINATE_SCALE: float = 1e5


@dataclass
class DecoderConfig:
    """Settings shared by the assembler and the group decoder."""

    coordinate_scale: float = COORDINATE_SCALE
    horizontal_max_samples: int = HORIZONTAL_MAX_SAMPLES
    horizontal_max_seconds: float = HORIZONTAL_MAX_SECONDS
    vertical_max_samples: int = VERTICAL_MAX_SAMPLES
    vertical_max_seconds: float = VERTICAL_MAX_SECONDS
    log_level: int = logging.INFO


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML configuration file."""

    with Path(path).open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def get_nested(config: Dict[str, Any], keys: list[str], default: Any) -> Any:
    """Retrieve a nested value from a config dict with a default."""

    current: Any = config
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def resolve_config(decoder_cfg: Optional[Mapping[str, Any]] = None) -> DecoderConfig:
    """Build a :class:`DecoderConfig` from the ``decoder`` section of a config.

    Missing keys keep their defaults. ``log_level`` accepts either a level name
    such as ``"DEBUG"`` or a numeric level.
    """

    cfg: Mapping[str, Any] = decoder_cfg or {}
    defaults = DecoderConfig()

    level: Any = cfg.get("log_level", defaults.log_level)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    coordinate_scale = float(cfg.get("coordinate_scale", defaults.coordinate_scale))
    if coordinate_scale <= 0:
        raise ValueError(f"coordinate_scale must be positive, got {coordinate_scale}")

    return DecoderConfig(
        coordinate_scale=coordinate_scale,
        horizontal_max_samples=int(cfg.get("horizontal_max_samples", defaults.horizontal_max_samples)),
        horizontal_max_seconds=float(cfg.get("horizontal_max_seconds", defaults.horizontal_max_seconds)),
        vertical_max_samples=int(cfg.get("vertical_max_samples", defaults.vertical_max_samples)),
        vertical_max_seconds=float(cfg.get("vertical_max_seconds", defaults.vertical_max_seconds)),
        log_level=int(level),
    )
