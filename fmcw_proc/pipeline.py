"""End-to-end processing of one ADC capture.

The high level steps are:

1. Derive timing, resolution and axes from the radar configuration.
2. Validate the ADC stream and arrange it as `[fast_time, chirp, frame]`.
3. Apply the Kaiser window and compute the range FFT.
4. From the range FFT compute the range–Doppler map and the
   chirp-averaged range profile, both in dBFS.

Steps 1 and 2 are independent; steps 3 and 4 depend only on their
inputs and never modify them.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .config import RadarConfig
from .dsp.fft import range_fft
from .dsp.rd_map import compute_range_doppler_map, range_profile
from .dsp.windows import WindowCoefficients, kaiser_window
from .io.adc import SampleStream, load_adc_tensor, read_adc_file
from .params import DerivedParameters, derive_parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ProcessingResult:
    """Outputs of one processing run.

    Attributes
    ----------
    params : DerivedParameters
        Derived parameters, including the range and velocity axes.
    window : WindowCoefficients
        Range window used.
    range_doppler_map : np.ndarray
        dBFS map, shape `(range_bins, doppler_bins, frames)`.
    range_profile : np.ndarray
        Per-frame dBFS profile, shape `(range_bins, frames)`.
    mean_range_profile : np.ndarray
        Profile averaged over chirps and frames, shape `(range_bins,)`.
    """

    params: DerivedParameters
    window: WindowCoefficients
    range_doppler_map: np.ndarray
    range_profile: np.ndarray
    mean_range_profile: np.ndarray

    @property
    def range_axis(self) -> np.ndarray:
        return self.params.range_axis

    @property
    def velocity_axis(self) -> np.ndarray:
        return self.params.velocity_axis


def process_tensor(
    tensor: np.ndarray,
    config: RadarConfig,
    workers: Optional[int] = None,
) -> ProcessingResult:
    """Process an ADC tensor already shaped `(samples, chirps, frames)`."""
    expected = (config.adc_samples, config.num_chirps, config.num_frames)
    if tensor.shape != expected:
        raise ValueError(f"tensor shape {tensor.shape} does not match configuration {expected}")
    params = derive_parameters(config)
    window = kaiser_window(config.adc_samples)
    t0 = time.perf_counter()
    range_cube = range_fft(tensor, window, workers=workers)
    t1 = time.perf_counter()
    rd_map = compute_range_doppler_map(range_cube, window.total, workers=workers)
    t2 = time.perf_counter()
    profile = range_profile(range_cube, window.total)
    mean_profile = range_profile(range_cube, window.total, average_frames=True)
    t3 = time.perf_counter()
    logger.debug(
        "Range FFT %.1f ms, Doppler map %.1f ms, profile %.1f ms",
        (t1 - t0) * 1e3,
        (t2 - t1) * 1e3,
        (t3 - t2) * 1e3,
    )
    for arr in (rd_map, profile, mean_profile):
        arr.flags.writeable = False
    logger.info("Range-Doppler map %s, range profile %s", rd_map.shape, profile.shape)
    return ProcessingResult(
        params=params,
        window=window,
        range_doppler_map=rd_map,
        range_profile=profile,
        mean_range_profile=mean_profile,
    )


def process(
    samples: SampleStream,
    config: RadarConfig,
    workers: Optional[int] = None,
) -> ProcessingResult:
    """Process a flat ADC stream.

    Parameters
    ----------
    samples : array-like or bytes
        Interleaved int16 stream `[I0, Q0, I1, Q1, ...]`.
    config : RadarConfig
        Capture configuration.
    workers : int, optional
        Threads used by the FFT stages.

    Raises
    ------
    SizeMismatchError
        If the stream length does not match the configuration.
    """
    tensor = load_adc_tensor(samples, config)
    return process_tensor(tensor, config, workers=workers)


def process_file(
    path: Union[str, Path],
    config: RadarConfig,
    workers: Optional[int] = None,
) -> ProcessingResult:
    """Read a capture file and process it."""
    logger.info("Processing %s", path)
    return process(read_adc_file(path), config, workers=workers)
