from __future__ import annotations

"""Owned grid buffers used by the spectral analysis.

``FrequencyGrid`` holds one complex accumulator per frequency bin. Cell
``(row, col)`` maps to the frequency

    wx = (col - R/2) * df
    wy = (row - R/2) * df

so the zero-frequency term sits exactly at the centre cell ``(R/2, R/2)``.

``PowerAccumulator`` keeps the running sum of per-trial power grids for one
sample count. It is a context manager: leaving the ``with`` block releases the
buffer, also when a trial fails.
"""

import math
from typing import Optional, Tuple, Union

import numpy as np


Resolution = Union[int, Tuple[int, int]]


def validate_resolution(resolution: Resolution) -> int:
    """Return the side length ``R`` of a square, even grid.

    ``resolution`` may be an int or an ``(x_res, y_res)`` pair. A pair must be square.
    """
    if isinstance(resolution, (tuple, list)):
        if len(resolution) != 2:
            raise ValueError(f"resolution must be an int or an (x_res, y_res) pair, got {resolution!r}")
        x_res, y_res = (int(v) for v in resolution)
        if x_res != y_res:
            raise ValueError(
                f"spectral grids must be square, got x_res={x_res}, y_res={y_res}"
            )
        R = x_res
    else:
        R = int(resolution)

    if R <= 0:
        raise ValueError(f"resolution must be > 0, got {R}")
    if R % 2 != 0:
        raise ValueError(f"resolution must be even so that DC lands on a cell, got {R}")
    return R


class FrequencyGrid:
    """Square complex grid sampled at regular frequency steps.

    Parameters
    ----------
    resolution:
        Side length ``R`` (or a square ``(x_res, y_res)`` pair). Must be even.
    frequency_step:
        Spacing ``df`` between neighbouring frequency samples on both axes.
    """

    def __init__(self, resolution: Resolution = 512, frequency_step: float = 1.0):
        df = float(frequency_step)
        if not math.isfinite(df) or df <= 0.0:
            raise ValueError(f"frequency_step must be finite and > 0, got {frequency_step!r}")
        self.frequency_step = df
        self.resolution = validate_resolution(resolution)
        self.values = np.zeros((self.resolution, self.resolution), dtype=np.complex128)

    def __repr__(self) -> str:
        return f"FrequencyGrid(resolution={self.resolution}, frequency_step={self.frequency_step})"

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.resolution, self.resolution)

    @property
    def halfwidth(self) -> int:
        return self.resolution // 2

    def clear(self) -> None:
        self.values.fill(0.0)

    def resize(self, resolution: Resolution) -> None:
        """Reallocate the buffer for a new (validated) resolution. Contents are zeroed."""
        R = validate_resolution(resolution)
        self.resolution = R
        self.values = np.zeros((R, R), dtype=np.complex128)

    def frequency_axis(self) -> np.ndarray:
        """Frequencies ``(k - R/2) * df`` for ``k = 0..R-1`` (same on both axes)."""
        k = np.arange(self.resolution, dtype=np.float64)
        return (k - self.halfwidth) * self.frequency_step

    def frequency_at(self, row: int, col: int) -> Tuple[float, float]:
        """Return ``(wx, wy)`` of one cell."""
        row = int(row)
        col = int(col)
        R = self.resolution
        if not (0 <= row < R and 0 <= col < R):
            raise IndexError(f"cell ({row}, {col}) outside a {R}x{R} frequency grid")
        wx = (col - self.halfwidth) * self.frequency_step
        wy = (row - self.halfwidth) * self.frequency_step
        return (wx, wy)


class PowerAccumulator:
    """Running sum of power grids over the trials of one sample count."""

    def __init__(self, shape: Tuple[int, int]):
        self.shape = (int(shape[0]), int(shape[1]))
        self._sum: Optional[np.ndarray] = np.zeros(self.shape, dtype=np.float64)
        self.trials = 0

    def __enter__(self) -> "PowerAccumulator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def total(self) -> np.ndarray:
        if self._sum is None:
            raise RuntimeError("PowerAccumulator buffer has been released")
        return self._sum

    def add(self, power: np.ndarray) -> None:
        p = np.asarray(power)
        if p.shape != self.shape:
            raise ValueError(f"power grid shape {p.shape} does not match accumulator shape {self.shape}")
        total = self.total
        total += p
        self.trials += 1

    def snapshot(self) -> np.ndarray:
        """Average power over the trials accumulated so far (a new array)."""
        if self.trials == 0:
            raise ValueError("no trial accumulated yet")
        return self.total / float(self.trials)

    def reset(self) -> None:
        self.total.fill(0.0)
        self.trials = 0

    def release(self) -> None:
        self._sum = None
        self.trials = 0
