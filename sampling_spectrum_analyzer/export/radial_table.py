from __future__ import annotations

"""Plain-text radial mean tables.

Format: one row per retained ring, ``<bin index> <mean power>``, separated by a
single space, mean written with 15 fixed decimals. Rings without contributing
cells are written as ``nan``.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from sampling_spectrum_analyzer.analysis.radial import RadialMean


RADIAL_COLUMNS = ("bin", "mean_power")


def write_radial_mean_txt(path: str | Path, radial: RadialMean) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    radial.table().to_csv(
        out,
        sep=" ",
        header=False,
        index=False,
        float_format="%.15f",
        na_rep="nan",
        lineterminator="\n",
    )


def load_radial_mean_txt(path: str | Path) -> pd.DataFrame:
    """Read a table written by :func:`write_radial_mean_txt`."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    df = pd.read_csv(p, sep=" ", header=None, names=list(RADIAL_COLUMNS))
    if df.shape[1] != 2 or df["bin"].isna().any():
        raise ValueError(f"Not a radial mean table: {p}")
    df["bin"] = df["bin"].astype(int)
    df["mean_power"] = df["mean_power"].astype(np.float64)
    return df
