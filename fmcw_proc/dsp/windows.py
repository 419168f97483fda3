"""Window functions used prior to the range FFT.

The processing chain uses a Kaiser window with `beta = 12`: strong
sidelobe suppression at the cost of a wider mainlobe, matching the
evaluation tool.  Coefficients are returned un-normalised; the sum of
the coefficients (the coherent gain) is carried alongside them and
used later to reference magnitudes to full scale.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy import signal

KAISER_BETA = 12.0


@dataclass(frozen=True, eq=False)
class WindowCoefficients:
    """A read-only window and its coherent gain.

    Attributes
    ----------
    values : np.ndarray
        One-dimensional window coefficients.
    total : float
        Sum of `values`.
    """

    values: np.ndarray
    total: float

    def __len__(self) -> int:
        return len(self.values)


def get_window(name: str, length: int, **kwargs: float) -> np.ndarray:
    """Return a symmetric window of a given type and length.

    Parameters
    ----------
    name : str
        The window type, 'kaiser' or 'rectangular'.
    length : int
        The number of samples in the window.
    **kwargs : float
        `beta`, the Kaiser shape parameter (default 12).

    Returns
    -------
    np.ndarray
        A one-dimensional window of the requested type.
    """
    name = name.lower()
    if length <= 0:
        raise ValueError("length must be positive")
    if name == "kaiser":
        beta = float(kwargs.get("beta", KAISER_BETA))
        win = signal.windows.kaiser(length, beta, sym=True)
    elif name in {"rectangular", "rect", "none"}:
        win = np.ones(length)
    else:
        raise ValueError(f"Unknown window type: {name}")
    return win


def make_window(name: str, length: int, **kwargs: float) -> WindowCoefficients:
    """Return `get_window(name, length)` together with its sum, read-only."""
    values = get_window(name, length, **kwargs)
    values.flags.writeable = False
    return WindowCoefficients(values=values, total=float(np.sum(values)))


def kaiser_window(length: int, beta: float = KAISER_BETA) -> WindowCoefficients:
    """Kaiser window of `length` coefficients used by the range FFT."""
    return make_window("kaiser", length, beta=beta)
