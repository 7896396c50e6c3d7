import math

import pytest

from size_encoder.domain.exceptions import InvalidDurationException, InvalidSizeException
from size_encoder.services.bitrate_planner import plan_bitrate_kbps


def test_ten_megabytes_over_one_hundred_seconds():
    assert plan_bitrate_kbps(10, 100) == 819


@pytest.mark.parametrize(
    "size_mb, duration",
    [(1, 1), (8, 60.5), (0.5, 3.2), (700, 5400), (25.75, 12.34)],
)
def test_matches_floor_formula(size_mb, duration):
    bitrate = plan_bitrate_kbps(size_mb, duration)
    assert bitrate == math.floor(size_mb * 8192 / duration)
    assert isinstance(bitrate, int)
    assert bitrate > 0


@pytest.mark.parametrize("size_mb", [0, -1, -0.01, float("nan"), float("inf")])
def test_rejects_invalid_size(size_mb):
    with pytest.raises(InvalidSizeException):
        plan_bitrate_kbps(size_mb, 100)


@pytest.mark.parametrize("duration", [0, -5, float("nan"), float("inf")])
def test_rejects_invalid_duration(duration):
    with pytest.raises(InvalidDurationException):
        plan_bitrate_kbps(10, duration)


def test_audio_reserve_is_subtracted():
    assert plan_bitrate_kbps(10, 100, audio_reserve_kbps=128) == 819 - 128


def test_audio_reserve_larger_than_budget_is_rejected():
    with pytest.raises(InvalidSizeException):
        plan_bitrate_kbps(1, 100, audio_reserve_kbps=128)


def test_budget_rounding_down_to_zero_is_rejected():
    # 0.001 MB over an hour floors to 0 kbit/s.
    with pytest.raises(InvalidSizeException):
        plan_bitrate_kbps(0.001, 3600)
