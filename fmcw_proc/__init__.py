"""Top level package for FMCW range–Doppler processing.

This package turns raw ADC captures from an FMCW radar front end into
a range–Doppler map and a range profile.  It contains the radar
configuration (config), derived parameters (params), ADC loading (io),
signal processing (dsp), the end-to-end pipeline and result export.
Typical use:

```python
from fmcw_proc.config import load_config
from fmcw_proc.pipeline import process_file

result = process_file("adc_data.bin", load_config("radar.yaml"))
```
"""

from .config import RadarConfig, load_config
from .errors import ConfigurationError, FmcwProcError, SizeMismatchError
from .params import DerivedParameters, derive_parameters
from .pipeline import ProcessingResult, process, process_file

__all__ = [
    "RadarConfig",
    "load_config",
    "ConfigurationError",
    "FmcwProcError",
    "SizeMismatchError",
    "DerivedParameters",
    "derive_parameters",
    "ProcessingResult",
    "process",
    "process_file",
    "io",
    "dsp",
]
