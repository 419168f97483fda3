import numpy as np
import pytest
from scipy import signal

from fmcw_proc.dsp.windows import get_window, kaiser_window, make_window


def test_kaiser_window_matches_beta_12() -> None:
    win = kaiser_window(256)
    np.testing.assert_allclose(win.values, signal.windows.kaiser(256, 12.0))
    assert len(win) == 256
    assert np.isclose(win.total, np.sum(win.values))


def test_kaiser_window_is_symmetric_and_peaks_at_one() -> None:
    win = kaiser_window(64).values
    np.testing.assert_allclose(win, win[::-1])
    assert np.isclose(win.max(), 1.0, atol=1e-2)
    assert win[0] < 1e-3


def test_window_is_not_normalised() -> None:
    # Coherent gain of a rectangular window is its length
    assert make_window("rectangular", 16).total == 16.0


def test_window_is_read_only() -> None:
    win = kaiser_window(8)
    with pytest.raises(ValueError):
        win.values[0] = 1.0


@pytest.mark.parametrize("name", ["kaiser", "rectangular", "rect"])
def test_supported_windows(name: str) -> None:
    assert get_window(name, 32).shape == (32,)


def test_invalid_window_requests() -> None:
    with pytest.raises(ValueError):
        get_window("hann", 8)
    with pytest.raises(ValueError):
        get_window("kaiser", 0)
