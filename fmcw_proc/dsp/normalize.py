"""Conversion of FFT bins to dBFS.

Magnitudes are referenced to the ADC full scale (32767 for signed
16-bit samples) times the coherent gain of the window:

    dB = 20 * log10((|x| + machine_eps) / (full_scale * window_sum) + 1e-6)

The machine epsilon on the magnitude and the 1e-6 floor on the ratio
are two separate additive terms.  Together they map an exact-zero bin
to a finite floor instead of `-inf`; replacing either with a clamp
changes the noise floor.
"""

from __future__ import annotations

import numpy as np

from ..errors import ConfigurationError

FULL_SCALE = 32767.0
DB_FLOOR_EPS = 1e-6
MAG_EPS = np.finfo(np.float64).eps


def magnitude_dbfs(
    x: np.ndarray,
    window_sum: float,
    full_scale: float = FULL_SCALE,
    eps: float = DB_FLOOR_EPS,
) -> np.ndarray:
    """Return the magnitude of `x` in dB relative to full scale.

    Parameters
    ----------
    x : np.ndarray
        Complex FFT bins, or real non-negative magnitudes.
    window_sum : float
        Sum of the window coefficients applied before the range FFT.
    full_scale : float, optional
        ADC full-scale magnitude.
    eps : float, optional
        Additive floor inside the logarithm.

    Returns
    -------
    np.ndarray
        Real array of the same shape as `x`.
    """
    if not window_sum > 0:
        raise ConfigurationError(f"window_sum must be strictly positive, got {window_sum!r}", "window_sum", window_sum)
    if not full_scale > 0:
        raise ConfigurationError(f"full_scale must be strictly positive, got {full_scale!r}", "full_scale", full_scale)
    magnitude = np.abs(x) + MAG_EPS
    return 20.0 * np.log10(magnitude / (full_scale * window_sum) + eps)


def db_floor(window_sum: float, full_scale: float = FULL_SCALE, eps: float = DB_FLOOR_EPS) -> float:
    """The value `magnitude_dbfs` assigns to an exact-zero bin."""
    return float(magnitude_dbfs(np.zeros(1), window_sum, full_scale, eps)[0])
