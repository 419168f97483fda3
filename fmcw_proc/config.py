"""Radar configuration.

`RadarConfig` holds the chirp and frame parameters in SI units.  It is
immutable and validated when constructed, so every later stage can
assume strictly positive times and frequencies and even sample/chirp
counts.

Parameter files use the engineering units of the evaluation tool
(GHz, MHz/us, us, ksps) and are read with `load_config`:

```yaml
radar:
  start_freq_ghz: 77.0
  slope_mhz_per_us: 29.982
  idle_time_us: 100.0
  ramp_end_time_us: 60.0
  sample_rate_ksps: 10000
  adc_samples: 256
  num_chirps: 128
  num_frames: 1
```
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .errors import ConfigurationError

# Speed of light as used by the reference evaluation tool (m/s).
SPEED_OF_LIGHT = 3e8

# Keys of the engineering-unit configuration surface.  All are required.
CONFIG_KEYS = (
    "start_freq_ghz",
    "slope_mhz_per_us",
    "idle_time_us",
    "ramp_end_time_us",
    "sample_rate_ksps",
    "adc_samples",
    "num_chirps",
    "num_frames",
)


def _check_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a number, got {value!r}", name, value)
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be strictly positive, got {value!r}", name, value)


def _check_count(name: str, value: Any, minimum: int, even: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}", name, value)
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}", name, value)
    if even and value % 2:
        raise ConfigurationError(f"{name} must be even, got {value}", name, value)


@dataclass(frozen=True)
class RadarConfig:
    """Chirp and frame configuration of one capture, in SI units.

    Attributes
    ----------
    start_freq : float
        Chirp start frequency in Hz.
    slope : float
        Frequency slope in Hz/s.
    idle_time : float
        Idle time between chirps in seconds.
    ramp_end_time : float
        Ramp end time in seconds.
    sample_rate : float
        ADC sample rate in Hz.
    adc_samples : int
        ADC samples per chirp (even, at least 2).
    num_chirps : int
        Chirps per frame (even, at least 2).
    num_frames : int
        Number of frames in the capture.
    c : float
        Propagation speed in m/s.
    """

    start_freq: float
    slope: float
    idle_time: float
    ramp_end_time: float
    sample_rate: float
    adc_samples: int
    num_chirps: int
    num_frames: int
    c: float = SPEED_OF_LIGHT

    def __post_init__(self) -> None:
        for name in ("start_freq", "slope", "idle_time", "ramp_end_time", "sample_rate", "c"):
            _check_positive(name, getattr(self, name))
        _check_count("adc_samples", self.adc_samples, minimum=2, even=True)
        _check_count("num_chirps", self.num_chirps, minimum=2, even=True)
        _check_count("num_frames", self.num_frames, minimum=1, even=False)

    @classmethod
    def from_engineering_units(
        cls,
        start_freq_ghz: float,
        slope_mhz_per_us: float,
        idle_time_us: float,
        ramp_end_time_us: float,
        sample_rate_ksps: float,
        adc_samples: int,
        num_chirps: int,
        num_frames: int,
    ) -> "RadarConfig":
        """Build a configuration from the units used by the evaluation tool."""
        # Reject bad values under their engineering names before scaling.
        for name, value in (
            ("start_freq_ghz", start_freq_ghz),
            ("slope_mhz_per_us", slope_mhz_per_us),
            ("idle_time_us", idle_time_us),
            ("ramp_end_time_us", ramp_end_time_us),
            ("sample_rate_ksps", sample_rate_ksps),
        ):
            _check_positive(name, value)
        return cls(
            start_freq=start_freq_ghz * 1e9,
            slope=slope_mhz_per_us * 1e12,  # MHz/us -> Hz/s
            idle_time=idle_time_us * 1e-6,
            ramp_end_time=ramp_end_time_us * 1e-6,
            sample_rate=sample_rate_ksps * 1e3,
            adc_samples=adc_samples,
            num_chirps=num_chirps,
            num_frames=num_frames,
        )

    @property
    def expected_sample_count(self) -> int:
        """Number of int16 values a capture with this configuration holds."""
        return 2 * self.adc_samples * self.num_chirps * self.num_frames


def config_from_dict(cfg: Mapping[str, Any]) -> RadarConfig:
    """Create a `RadarConfig` from a parsed configuration mapping.

    The mapping may hold the keys at top level or nested under
    `radar`.  Every key in `CONFIG_KEYS` is required; unknown keys are
    rejected so that typos do not silently fall back to anything.
    """
    if "radar" in cfg and isinstance(cfg["radar"], Mapping):
        cfg = cfg["radar"]
    missing = [k for k in CONFIG_KEYS if k not in cfg]
    if missing:
        raise ConfigurationError(f"missing radar parameters: {', '.join(missing)}", missing[0])
    unknown = sorted(str(k) for k in set(cfg) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigurationError(f"unknown radar parameters: {', '.join(unknown)}", unknown[0])
    return RadarConfig.from_engineering_units(**{k: cfg[k] for k in CONFIG_KEYS})


def load_config(path: Union[str, Path]) -> RadarConfig:
    """Read a YAML parameter file and return the validated configuration."""
    with open(path, "r") as f:
        try:
            cfg: Dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(cfg, Mapping):
        raise ConfigurationError(f"{path}: expected a mapping of radar parameters")
    return config_from_dict(cfg)
