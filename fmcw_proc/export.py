"""Saving processing results for downstream plotting.

`save_result` writes three files into an output directory:

* `result.npz` with the axes, the range–Doppler map and the profiles;
* `range_profile.csv` with one row per range bin;
* `params.yaml` with the derived scalar parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

import numpy as np
import pandas as pd
import yaml

from .pipeline import ProcessingResult


def range_profile_frame(result: ProcessingResult) -> pd.DataFrame:
    """Return the range profiles as a DataFrame indexed by range bin."""
    data = {"range_m": result.range_axis}
    for k in range(result.range_profile.shape[1]):
        data[f"frame_{k}_db"] = result.range_profile[:, k]
    data["mean_db"] = result.mean_range_profile
    return pd.DataFrame(data)


def save_result(result: ProcessingResult, out_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write `result` into `out_dir` and return the written paths by kind."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "npz": out_dir / "result.npz",
        "csv": out_dir / "range_profile.csv",
        "params": out_dir / "params.yaml",
    }
    np.savez(
        paths["npz"],
        range_axis=result.range_axis,
        velocity_axis=result.velocity_axis,
        range_doppler_map=result.range_doppler_map,
        range_profile=result.range_profile,
        mean_range_profile=result.mean_range_profile,
    )
    range_profile_frame(result).to_csv(paths["csv"], index=False)
    with open(paths["params"], "w") as f:
        yaml.safe_dump(result.params.summary(), f, sort_keys=False)
    return paths
