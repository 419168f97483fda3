"""FFT utilities for range and Doppler processing.

This module computes the range FFT along the fast-time axis and the
Doppler FFT along the slow-time (chirp) axis of an ADC tensor laid out
as `[fast_time, chirp, frame]`.  Each (chirp, frame) column and each
(range bin, frame) row is transformed independently, so both functions
accept a `workers` count forwarded to `scipy.fft` to spread the lanes
over several threads.  Neither function normalises magnitudes; that
is done in `fmcw_proc.dsp.normalize`.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np
from scipy import fft as sp_fft

from .windows import WindowCoefficients


def range_fft(
    tensor: np.ndarray,
    window: Union[WindowCoefficients, np.ndarray],
    workers: Optional[int] = None,
) -> np.ndarray:
    """Compute the range FFT of an ADC tensor.

    Parameters
    ----------
    tensor : np.ndarray
        Real samples of shape `(samples, chirps, frames)`.
    window : WindowCoefficients or np.ndarray
        Window of length `samples`, applied to every fast-time column.
    workers : int, optional
        Number of threads used by the FFT.  `None` runs single-threaded.

    Returns
    -------
    np.ndarray
        Read-only complex array of shape `(samples // 2, chirps, frames)`.
        Bin 0 is DC and range increases with the bin index.
    """
    if tensor.ndim != 3:
        raise ValueError(f"expected a (samples, chirps, frames) tensor, got shape {tensor.shape}")
    samples = tensor.shape[0]
    win = window.values if isinstance(window, WindowCoefficients) else np.asarray(window)
    if win.shape != (samples,):
        raise ValueError(f"window length {win.shape} does not match {samples} samples per chirp")
    windowed = tensor * win[:, np.newaxis, np.newaxis]
    spectrum = sp_fft.fft(windowed, n=samples, axis=0, workers=workers)
    # The beat signal is real; the upper half mirrors the lower one.
    range_cube = spectrum[: samples // 2]
    range_cube.flags.writeable = False
    return range_cube


def doppler_fft(range_cube: np.ndarray, workers: Optional[int] = None) -> np.ndarray:
    """Compute the Doppler FFT of a range-processed cube.

    Parameters
    ----------
    range_cube : np.ndarray
        Output of `range_fft`, shape `(range_bins, chirps, frames)`.
    workers : int, optional
        Number of threads used by the FFT.

    Returns
    -------
    np.ndarray
        Complex cube of the same shape with the chirp axis replaced by
        Doppler bins.  Zero Doppler sits at index `chirps // 2`.
    """
    if range_cube.ndim != 3:
        raise ValueError(f"expected a (range, chirps, frames) cube, got shape {range_cube.shape}")
    chirps = range_cube.shape[1]
    spectrum = sp_fft.fft(range_cube, n=chirps, axis=1, workers=workers)
    return sp_fft.fftshift(spectrum, axes=1)
