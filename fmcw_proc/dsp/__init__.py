"""Signal processing primitives for FMCW ADC tensors.

Modules in this package implement the range window, the range and
Doppler FFTs, dBFS normalisation and the range–Doppler map and range
profile built from them.
"""

from . import windows, fft, normalize, rd_map

__all__ = ["windows", "fft", "normalize", "rd_map"]
