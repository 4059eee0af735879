"""Radially averaged power spectrum.

Every cell of a square power grid is assigned to the integer ring
``floor(distance to centre)``. Rings are averaged into a 1D curve indexed by
ring number, i.e. by radial frequency in units of the frequency step.

Edge handling
-------------
- Cells with ``distance >= halfwidth - 1`` are discarded. Rings that reach the
  grid border (and the corners of the circumscribed square) have incomplete
  angular coverage. As a consequence the last ring ``halfwidth - 1`` never receives
  a cell.
- A ring without cells has an undefined mean. It is kept as NaN, never replaced
  by zero.
- The emitted table additionally drops the last ``trim`` rings (default 5), close
  to the Nyquist edge where estimates are unreliable. A trim of ``halfwidth``
  or more leaves an empty table; the curve itself is always complete.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from sampling_spectrum_analyzer.models.grids import Resolution, validate_resolution


DEFAULT_RADIAL_TRIM = 5


@dataclass(frozen=True)
class RadialMean:
    """Radial mean power curve.

    Attributes
    ----------
    bins:
        Ring indices ``0..halfwidth-1``.
    mean:
        ``sums / counts`` per ring, NaN where no cell contributed.
    counts:
        Number of contributing cells per ring.
    sums:
        Summed power per ring.
    trim:
        Number of trailing rings left out of :meth:`table`.
    """

    bins: np.ndarray
    mean: np.ndarray
    counts: np.ndarray
    sums: np.ndarray
    trim: int = DEFAULT_RADIAL_TRIM

    @property
    def halfwidth(self) -> int:
        return int(self.bins.size)

    def table(self) -> pd.DataFrame:
        """Retained rings ``0..halfwidth-1-trim`` as columns ``bin`` and ``mean_power``."""
        keep = max(self.halfwidth - int(self.trim), 0)
        return pd.DataFrame(
            {
                "bin": self.bins[:keep].astype(int),
                "mean_power": self.mean[:keep].astype(np.float64),
            }
        )


class RadialAverager:
    """Reduce square power grids of a fixed resolution to radial mean curves.

    Resolution and trim are validated once here, so a non-square configuration
    fails before any trial is run.
    """

    def __init__(self, resolution: Resolution, trim: int = DEFAULT_RADIAL_TRIM):
        try:
            R = validate_resolution(resolution)
        except ValueError as e:
            raise ValueError(f"radial mean power assumes square images: {e}") from e

        halfwidth = R // 2
        trim = int(trim)
        if trim < 0:
            raise ValueError(f"radial trim must be >= 0, got {trim}")

        self.resolution = R
        self.halfwidth = halfwidth
        self.trim = trim

        rows, cols = np.indices((R, R), dtype=np.float64)
        distance = np.hypot(halfwidth - cols, halfwidth - rows)
        self._keep = distance < (halfwidth - 1)
        self._bin_index = distance[self._keep].astype(np.int64)
        self._counts = np.bincount(self._bin_index, minlength=halfwidth)

    def average(self, power: np.ndarray) -> RadialMean:
        p = np.asarray(power, dtype=np.float64)
        if p.shape != (self.resolution, self.resolution):
            raise ValueError(
                f"power grid shape {p.shape} does not match the configured "
                f"{self.resolution}x{self.resolution} resolution"
            )

        sums = np.bincount(self._bin_index, weights=p[self._keep], minlength=self.halfwidth)
        counts = self._counts.copy()
        with np.errstate(invalid="ignore", divide="ignore"):
            mean = sums / counts.astype(np.float64)

        return RadialMean(
            bins=np.arange(self.halfwidth, dtype=int),
            mean=mean,
            counts=counts,
            sums=sums,
            trim=self.trim,
        )


def radial_mean_power(power: np.ndarray, trim: int = DEFAULT_RADIAL_TRIM) -> RadialMean:
    """Radial mean of a single power grid. Rejects non-square grids."""
    p = np.asarray(power)
    if p.ndim != 2:
        raise ValueError(f"power grid must be 2D, got shape {p.shape}")
    return RadialAverager((p.shape[1], p.shape[0]), trim=trim).average(p)
