"""Differential (delta) encoding of numeric sequences.

Every array carried by a track group uses the same transform: values are
scaled, optionally rounded to integers, and stored as the first scaled value
followed by the differences between consecutive scaled values. Decoding takes
the running sum and divides by the scale.

Quantizing before differencing keeps every decoded value within half a
quantization step (``0.5 / scale``) of the original value; the rounding error
does not accumulate along the sequence.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _check_scale(scale: float) -> None:
    if not np.isfinite(scale) or scale <= 0:
        raise ValueError(f"scale must be a positive finite number, got {scale}")


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, ties towards positive infinity."""

    return np.floor(np.asarray(values, dtype=float) + 0.5)


def round_half_away(values: np.ndarray, decimals: int = 0) -> np.ndarray:
    """Round to ``decimals`` places, ties away from zero."""

    data = np.asarray(values, dtype=float)
    factor = 10.0**decimals
    return np.sign(data) * np.floor(np.abs(data) * factor + 0.5) / factor


def diff_encode_array(
    values: Sequence[float],
    scale: float = 1,
    round_values: bool = True,
    signed: bool = True,
) -> np.ndarray:
    """Return the differential encoding of ``values``.

    Parameters
    ----------
    values:
        Numeric samples in their natural units.
    scale:
        Multiplier applied before quantization, e.g. ``1e5`` for degrees.
    round_values:
        Round the scaled values to integers. Disable for series that must keep
        sub-unit precision.
    signed:
        Whether negative deltas may be stored. Unsigned streams reject
        sequences that decrease.

    Returns
    -------
    np.ndarray
        ``int64`` deltas when rounding, ``float64`` otherwise.

    Raises
    ------
    ValueError
        If ``scale`` is not positive or an unsigned stream would hold a
        negative delta.
    """

    _check_scale(scale)
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return np.array([], dtype=np.int64 if round_values else float)

    scaled = data * scale
    if round_values:
        scaled = round_half_up(scaled).astype(np.int64)

    encoded = np.concatenate((scaled[:1], np.diff(scaled)))
    if not signed and np.any(encoded[1:] < 0):
        raise ValueError("Unsigned differential encoding requires non-decreasing values.")
    return encoded


def diff_decode_array(values: Sequence[float], scale: float = 1) -> np.ndarray:
    """Return the values reconstructed from their differential encoding.

    Element ``i`` is the sum of the stored deltas ``0..i`` divided by
    ``scale``. Signed and unsigned streams decode the same way.
    """

    _check_scale(scale)
    deltas = np.asarray(values, dtype=float)
    if deltas.size == 0:
        return np.array([], dtype=float)
    return np.cumsum(deltas) / scale
