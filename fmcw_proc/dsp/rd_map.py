"""Range–Doppler map and range profile computation.

Both outputs start from the same range FFT cube.  The range–Doppler
map runs the Doppler FFT and converts every bin to dBFS; the range
profile averages the range-bin magnitudes over chirps (magnitude, not
power and not complex value) before converting to dBFS.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .fft import doppler_fft
from .normalize import magnitude_dbfs


def compute_range_doppler_map(
    range_cube: np.ndarray,
    window_sum: float,
    workers: Optional[int] = None,
) -> np.ndarray:
    """Compute the range–Doppler map of every frame.

    Parameters
    ----------
    range_cube : np.ndarray
        Complex output of `range_fft`, shape `(range_bins, chirps, frames)`.
    window_sum : float
        Coherent gain of the range window.
    workers : int, optional
        Threads used by the Doppler FFT.

    Returns
    -------
    np.ndarray
        Map in dBFS with shape `(range_bins, doppler_bins, frames)`.
        Doppler bin `chirps // 2` is zero velocity.
    """
    rd_cube = doppler_fft(range_cube, workers=workers)
    return magnitude_dbfs(rd_cube, window_sum)


def range_profile(
    range_cube: np.ndarray,
    window_sum: float,
    average_frames: bool = False,
) -> np.ndarray:
    """Chirp-averaged range profile in dBFS.

    Parameters
    ----------
    range_cube : np.ndarray
        Complex output of `range_fft`, shape `(range_bins, chirps, frames)`.
    window_sum : float
        Coherent gain of the range window.
    average_frames : bool, optional
        Also average the magnitudes over frames, giving one profile.

    Returns
    -------
    np.ndarray
        Shape `(range_bins, frames)`, or `(range_bins,)` when
        `average_frames` is set.
    """
    axes = (1, 2) if average_frames else 1
    mean_mag = np.mean(np.abs(range_cube), axis=axes)
    return magnitude_dbfs(mean_mag, window_sum)
