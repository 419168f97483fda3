"""Loading raw ADC captures.

Captures are flat streams of little-endian int16 values laid out as
`[I0, Q0, I1, Q1, ...]`.  In the real-only acquisition mode the Q slot
is a zero placeholder, so only the even-indexed values carry signal.
The in-phase samples are arranged into a `[fast_time, chirp, frame]`
tensor with the fast-time sample varying fastest, then the chirp, then
the frame (column-major fill).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np

from ..config import RadarConfig
from ..errors import SizeMismatchError

logger = logging.getLogger(__name__)

ADC_DTYPE = np.dtype("<i2")

SampleStream = Union[np.ndarray, bytes, bytearray, memoryview]


def read_adc_file(path: Union[str, Path]) -> np.ndarray:
    """Read a whole capture file as a flat int16 array."""
    with open(path, "rb") as f:
        samples = np.fromfile(f, dtype=ADC_DTYPE)
    logger.debug("Read %d int16 values from %s", samples.size, path)
    return samples


def load_adc_tensor(samples: SampleStream, config: RadarConfig) -> np.ndarray:
    """Validate and reshape a flat ADC stream.

    Parameters
    ----------
    samples : array-like or bytes
        The raw stream, either as int16 values or as the undecoded
        little-endian bytes.
    config : RadarConfig
        Capture configuration giving samples per chirp, chirps per
        frame and frame count.

    Returns
    -------
    np.ndarray
        Read-only int16 tensor of shape `(adc_samples, num_chirps, num_frames)`
        holding a copy of the in-phase samples.

    Raises
    ------
    SizeMismatchError
        If the stream does not hold exactly
        `2 * adc_samples * num_chirps * num_frames` values.
    TypeError
        If the stream does not hold integer samples.
    ValueError
        If integer samples fall outside the int16 range.
    """
    expected = config.expected_sample_count
    if isinstance(samples, (bytes, bytearray, memoryview)):
        nbytes = memoryview(samples).nbytes
        if nbytes % ADC_DTYPE.itemsize:
            raise SizeMismatchError(nbytes / ADC_DTYPE.itemsize, expected)
        samples = np.frombuffer(samples, dtype=ADC_DTYPE)
    flat = np.ravel(samples)
    if not np.issubdtype(flat.dtype, np.integer):
        raise TypeError(f"ADC stream must hold integer samples, got dtype {flat.dtype}")
    if flat.size != expected:
        raise SizeMismatchError(flat.size, expected)
    info = np.iinfo(ADC_DTYPE)
    if flat.dtype != ADC_DTYPE and flat.size and (flat.min() < info.min or flat.max() > info.max):
        raise ValueError(f"ADC stream values exceed the int16 range [{info.min}, {info.max}]")
    in_phase = flat[0::2]
    shape = (config.adc_samples, config.num_chirps, config.num_frames)
    # Copy so the tensor never aliases the caller's buffer.
    tensor = np.array(np.reshape(in_phase, shape, order="F"), dtype=ADC_DTYPE, order="F")
    tensor.flags.writeable = False
    logger.debug("ADC tensor shape %s", tensor.shape)
    return tensor


def load_adc_file(path: Union[str, Path], config: RadarConfig) -> np.ndarray:
    """Read a capture file and return its `[fast_time, chirp, frame]` tensor."""
    return load_adc_tensor(read_adc_file(path), config)
