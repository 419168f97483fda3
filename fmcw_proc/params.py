"""Derived radar parameters and measurement axes.

`derive_parameters` turns a validated `RadarConfig` into the timing,
resolution and axis values used to label the range–Doppler map.  The
range axis follows the FMCW beat-frequency equation
`R = c * f_b / (2 * slope)`; it is not a plain FFT-bin-to-Hz mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .config import RadarConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DerivedParameters:
    """Quantities computed once from a `RadarConfig`.

    Attributes
    ----------
    chirp_time : float
        Ramp end time plus idle time (s).
    prf : float
        Chirp repetition frequency (Hz).
    wavelength : float
        Wavelength at the start frequency (m).
    bandwidth : float
        Swept bandwidth over the ramp (Hz).
    range_resolution : float
        `c / (2 * bandwidth)` (m).
    num_range_bins : int
        Number of retained range bins, `adc_samples // 2`.
    range_axis : np.ndarray
        Range of each retained bin (m), ascending from 0.
    velocity_axis : np.ndarray
        Radial velocity of each Doppler bin after the FFT shift (m/s).
    max_range : float
        Range covered by the retained half-spectrum (m).
    max_velocity : float
        Maximum unambiguous radial velocity, `wavelength / (4 * chirp_time)`.
    velocity_resolution : float
        Spacing of `velocity_axis` (m/s).
    """

    chirp_time: float
    prf: float
    wavelength: float
    bandwidth: float
    range_resolution: float
    num_range_bins: int
    range_axis: np.ndarray
    velocity_axis: np.ndarray
    max_range: float
    max_velocity: float
    velocity_resolution: float

    def summary(self) -> dict:
        """Return the scalar parameters as plain Python numbers."""
        return {
            "chirp_time": float(self.chirp_time),
            "prf": float(self.prf),
            "wavelength": float(self.wavelength),
            "bandwidth": float(self.bandwidth),
            "range_resolution": float(self.range_resolution),
            "num_range_bins": int(self.num_range_bins),
            "max_range": float(self.max_range),
            "max_velocity": float(self.max_velocity),
            "velocity_resolution": float(self.velocity_resolution),
        }


def range_axis(config: RadarConfig) -> np.ndarray:
    """Return the range (m) of each of the `adc_samples // 2` retained bins."""
    df = config.sample_rate / config.adc_samples
    bins = np.arange(config.adc_samples // 2)
    return config.c * bins * df / (2.0 * config.slope)


def velocity_axis(config: RadarConfig) -> np.ndarray:
    """Return the radial velocity (m/s) of each FFT-shifted Doppler bin.

    Bins run from `-num_chirps/2` to `num_chirps/2 - 1`; the extra bin
    is on the negative side, as with `np.fft.fftshift`.
    """
    n = config.num_chirps
    chirp_time = config.ramp_end_time + config.idle_time
    wavelength = config.c / config.start_freq
    doppler = np.arange(-n // 2, n // 2) / (n * chirp_time)
    return (wavelength / 2.0) * doppler


def derive_parameters(config: RadarConfig) -> DerivedParameters:
    """Compute timing, resolution and axes for `config`.

    Parameters
    ----------
    config : RadarConfig
        Validated radar configuration.

    Returns
    -------
    DerivedParameters
        Read-only derived quantities.  The axis arrays are flagged
        non-writeable.
    """
    chirp_time = config.ramp_end_time + config.idle_time
    wavelength = config.c / config.start_freq
    bandwidth = config.slope * config.ramp_end_time
    r_axis = range_axis(config)
    v_axis = velocity_axis(config)
    r_axis.flags.writeable = False
    v_axis.flags.writeable = False
    params = DerivedParameters(
        chirp_time=chirp_time,
        prf=1.0 / chirp_time,
        wavelength=wavelength,
        bandwidth=bandwidth,
        range_resolution=config.c / (2.0 * bandwidth),
        num_range_bins=config.adc_samples // 2,
        range_axis=r_axis,
        velocity_axis=v_axis,
        max_range=config.c * config.sample_rate / (4.0 * config.slope),
        max_velocity=wavelength / (4.0 * chirp_time),
        velocity_resolution=wavelength / (2.0 * config.num_chirps * chirp_time),
    )
    logger.info(
        "Bandwidth %.3f GHz, range resolution %.4f m, max range %.2f m, max velocity %.2f m/s",
        bandwidth / 1e9,
        params.range_resolution,
        params.max_range,
        params.max_velocity,
    )
    return params
