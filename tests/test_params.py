import numpy as np
import pytest

from fmcw_proc.config import RadarConfig
from fmcw_proc.params import derive_parameters


def _scenario_config(**overrides) -> RadarConfig:
    kwargs = dict(
        start_freq_ghz=77.0,
        slope_mhz_per_us=29.982,
        idle_time_us=100.0,
        ramp_end_time_us=60.0,
        sample_rate_ksps=10000.0,
        adc_samples=256,
        num_chirps=128,
        num_frames=1,
    )
    kwargs.update(overrides)
    return RadarConfig.from_engineering_units(**kwargs)


def test_scenario_bandwidth_and_resolution() -> None:
    params = derive_parameters(_scenario_config())
    assert np.isclose(params.bandwidth, 1.799e9, rtol=1e-3)
    assert np.isclose(params.range_resolution, 0.0834, atol=1e-4)
    assert np.isclose(params.chirp_time, 160e-6)
    assert np.isclose(params.prf, 6250.0)
    assert np.isclose(params.wavelength, 3e8 / 77e9)
    assert params.num_range_bins == 128


def test_range_axis_properties() -> None:
    cfg = _scenario_config()
    axis = derive_parameters(cfg).range_axis
    assert axis.shape == (cfg.adc_samples // 2,)
    assert axis[0] == 0.0
    assert np.all(axis >= 0)
    assert np.all(np.diff(axis) > 0)


def test_range_axis_uses_slope() -> None:
    cfg = _scenario_config()
    axis = derive_parameters(cfg).range_axis
    i = np.arange(cfg.adc_samples // 2)
    expected = cfg.c * i * (cfg.sample_rate / cfg.adc_samples) / (2 * cfg.slope)
    np.testing.assert_allclose(axis, expected, rtol=1e-12)
    # Bin spacing equals c*fs/(2*slope*N), not the bandwidth-based resolution
    assert np.isclose(axis[1], 3e8 * 10e6 / (2 * 29.982e12 * 256))


def test_velocity_axis_exact_formula() -> None:
    cfg = _scenario_config()
    params = derive_parameters(cfg)
    axis = params.velocity_axis
    n = cfg.num_chirps
    j = np.arange(n)
    expected = (params.wavelength / 2) * (j - n / 2) / (n * params.chirp_time)
    np.testing.assert_allclose(axis, expected, rtol=1e-12, atol=0)
    assert axis.shape == (n,)
    assert np.all(np.diff(axis) > 0)
    assert axis[n // 2] == 0.0
    # One extra bin on the negative side
    assert np.isclose(axis[0], -params.max_velocity)
    assert np.isclose(axis[-1], params.max_velocity - params.velocity_resolution)
    assert np.isclose(axis[n // 2 - 1], -axis[n // 2 + 1])


def test_max_range_is_one_bin_past_axis_end() -> None:
    params = derive_parameters(_scenario_config())
    spacing = params.range_axis[1] - params.range_axis[0]
    assert np.isclose(params.max_range, params.range_axis[-1] + spacing)


def test_axes_are_read_only() -> None:
    params = derive_parameters(_scenario_config(adc_samples=8, num_chirps=4))
    with pytest.raises(ValueError):
        params.range_axis[0] = 1.0
    with pytest.raises(ValueError):
        params.velocity_axis[0] = 1.0


def test_summary_is_plain_numbers() -> None:
    summary = derive_parameters(_scenario_config()).summary()
    assert summary["num_range_bins"] == 128
    assert all(isinstance(v, (int, float)) for v in summary.values())
