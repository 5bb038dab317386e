import numpy as np
import pytest

from runtime_tracks.codec import diff_decode_array, diff_encode_array, round_half_away


def test_encode_stores_first_value_then_deltas():
    encoded = diff_encode_array([1.5, 2.5, 2.0])
    assert encoded.dtype == np.int64
    assert encoded.tolist() == [2, 1, -1]


def test_coordinates_round_trip_within_quantization_step():
    lat = [45.123456, 45.123471, 45.12339, 45.2, 44.999999]
    decoded = diff_decode_array(diff_encode_array(lat, 1e5), 1e5)
    assert np.allclose(decoded, lat, rtol=0, atol=0.5e-5 + 1e-12)


def test_rounding_error_does_not_accumulate():
    values = np.full(1000, 0.4) * np.arange(1000)
    decoded = diff_decode_array(diff_encode_array(values))
    assert np.max(np.abs(decoded - values)) <= 0.5


def test_unrounded_unit_scale_round_trip_is_exact():
    values = [0.0, 0.5, 1.25, 1.0, 3.0, 2.75]
    encoded = diff_encode_array(values, 1, round_values=False)
    assert encoded.dtype == np.float64
    assert diff_decode_array(encoded).tolist() == values


def test_empty_and_singleton():
    assert diff_encode_array([]).size == 0
    assert diff_decode_array([]).size == 0
    assert diff_encode_array([3.7], 10).tolist() == [37]
    assert np.allclose(diff_decode_array([37], 10), [3.7])


def test_signed_stream_accepts_decreasing_values():
    end_sec = [100, 50, 300]
    encoded = diff_encode_array(end_sec, signed=True)
    assert encoded.tolist() == [100, -50, 250]
    assert diff_decode_array(encoded).tolist() == end_sec


def test_unsigned_stream_rejects_decreasing_values():
    assert diff_encode_array([1, 2, 2, 5], signed=False).tolist() == [1, 1, 0, 3]
    with pytest.raises(ValueError):
        diff_encode_array([1, 3, 2], signed=False)


def test_invalid_scale_raises():
    with pytest.raises(ValueError):
        diff_encode_array([1, 2], scale=0)
    with pytest.raises(ValueError):
        diff_decode_array([1, 2], scale=-1)


def test_round_half_away_from_zero():
    assert round_half_away([0.25, -0.25, 0.24, -0.26, 0.0], 1).tolist() == [0.3, -0.3, 0.2, -0.3, 0.0]
    assert round_half_away([2.5, -2.5], 0).tolist() == [3.0, -3.0]
