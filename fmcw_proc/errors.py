"""Exceptions raised by the processing chain.

Both error types derive from `ValueError` so that callers treating bad
input generically keep working, and from `FmcwProcError` so that the
command line runner can catch everything this package raises in one
place.
"""

from __future__ import annotations

from typing import Any, Optional


class FmcwProcError(Exception):
    """Base class for errors raised by `fmcw_proc`."""


class ConfigurationError(FmcwProcError, ValueError):
    """A radar or processing parameter is missing, non-positive or invalid.

    Attributes
    ----------
    parameter : str or None
        Name of the offending parameter, when a single one is at fault.
    value : Any
        The rejected value.
    """

    def __init__(self, message: str, parameter: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class SizeMismatchError(FmcwProcError, ValueError):
    """The ADC stream does not hold the number of values the configuration implies.

    The dataset is unusable when this is raised; no partial processing
    is attempted.
    """

    def __init__(self, observed: float, expected: int) -> None:
        super().__init__(
            f"ADC stream holds {observed} int16 values, expected {expected} "
            "(2 x samples x chirps x frames)"
        )
        self.observed = observed
        self.expected = expected
