import numpy as np
import pytest

from fmcw_proc.dsp.normalize import FULL_SCALE, MAG_EPS, db_floor, magnitude_dbfs
from fmcw_proc.dsp.rd_map import range_profile
from fmcw_proc.errors import ConfigurationError


def test_exact_formula() -> None:
    x = np.array([3.0 + 4.0j, 0.0, 1e4])
    wsum = 50.0
    expected = 20 * np.log10((np.abs(x) + MAG_EPS) / (FULL_SCALE * wsum) + 1e-6)
    np.testing.assert_array_equal(magnitude_dbfs(x, wsum), expected)


def test_zero_bin_maps_to_finite_floor() -> None:
    out = magnitude_dbfs(np.zeros((3, 4), dtype=np.complex128), 80.0)
    assert np.all(np.isfinite(out))
    assert np.all(out == out[0, 0])
    assert np.isclose(out[0, 0], db_floor(80.0))
    # The ratio floor dominates: about -120 dB
    assert np.isclose(out[0, 0], -120.0, atol=1e-3)


def test_monotonic() -> None:
    mags = np.logspace(-6, 6, 200)
    out = magnitude_dbfs(mags, 100.0)
    assert np.all(np.diff(out) > 0)


def test_full_scale_tone_is_zero_dbfs() -> None:
    wsum = 37.5
    out = magnitude_dbfs(np.array([FULL_SCALE * wsum]), wsum)
    assert np.isclose(out[0], 0.0, atol=1e-4)


def test_ratio_floor_is_additive_not_a_clamp() -> None:
    # A magnitude whose ratio equals the floor sits 6 dB above it
    wsum = 10.0
    x = np.array([1e-6 * FULL_SCALE * wsum])
    assert np.isclose(magnitude_dbfs(x, wsum)[0], 20 * np.log10(2e-6), atol=1e-6)


@pytest.mark.parametrize("wsum", [0.0, -1.0])
def test_non_positive_window_sum_rejected(wsum: float) -> None:
    with pytest.raises(ConfigurationError):
        magnitude_dbfs(np.ones(2), wsum)


def test_range_profile_averages_magnitude_over_chirps() -> None:
    # Opposite phases cancel in a complex mean but not in a magnitude mean
    cube = np.zeros((2, 4, 1), dtype=np.complex128)
    cube[0, :, 0] = [1000, -1000, 1000j, -1000j]
    cube[1, :, 0] = [0, 0, 0, 4000]
    wsum = 20.0
    profile = range_profile(cube, wsum)
    assert profile.shape == (2, 1)
    np.testing.assert_allclose(profile[:, 0], magnitude_dbfs(np.array([1000.0, 1000.0]), wsum))


def test_range_profile_average_frames() -> None:
    cube = np.zeros((3, 2, 2), dtype=np.complex128)
    cube[1, :, 0] = 100.0
    cube[1, :, 1] = 300.0
    profile = range_profile(cube, 5.0, average_frames=True)
    assert profile.shape == (3,)
    assert np.isclose(profile[1], magnitude_dbfs(np.array([200.0]), 5.0)[0])
    assert profile[0] == profile[2] == db_floor(5.0)
