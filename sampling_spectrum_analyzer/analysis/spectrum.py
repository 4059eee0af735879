"""Continuous Fourier spectrum of a 2D point set.

For every cell of a :class:`~sampling_spectrum_analyzer.models.grids.FrequencyGrid`
the transform of the point set is evaluated directly at that frequency:

    Re(w) = sum_i cos(-2*pi*(wx*x_i + wy*y_i))
    Im(w) = sum_i sin(-2*pi*(wx*x_i + wy*y_i))

This is not an FFT: frequencies are arbitrary multiples of the frequency step and
points are not on a lattice. Cost is O(R^2 * n).

The grid is split into square tiles. Each tile reads the same immutable point set
and writes a disjoint block of the grid, so tiles run in a shared-memory
``joblib`` pool without any locking. Inside a tile the phase factor is separable,

    exp(-2*pi*i*(wx*x + wy*y)) = exp(-2*pi*i*wy*y) * exp(-2*pi*i*wx*x)

which turns the sum over points into one matrix product per chunk of points.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np
from joblib import Parallel, delayed

from sampling_spectrum_analyzer.models.grids import FrequencyGrid, Resolution
from sampling_spectrum_analyzer.models.points import as_point_set


TWO_PI = 2.0 * np.pi

Tile = Tuple[int, int, int, int]  # (row0, row1, col0, col1), half-open


def iter_tiles(resolution: int, tile_size: int) -> Iterator[Tile]:
    """Yield the blocks covering a ``resolution x resolution`` grid, row-major."""
    for r0 in range(0, resolution, tile_size):
        r1 = min(r0 + tile_size, resolution)
        for c0 in range(0, resolution, tile_size):
            c1 = min(c0 + tile_size, resolution)
            yield (r0, r1, c0, c1)


class SpectrumComputer:
    """Tile-parallel evaluator of the continuous Fourier transform.

    Parameters
    ----------
    tile_size:
        Side of the square grid blocks handed to workers. Only affects performance.
    n_jobs:
        ``joblib`` worker count (``-1`` = all cores, ``1`` = run inline).
    point_chunk:
        Number of points processed per matrix product inside a tile. Bounds the
        temporary memory at ``2 * tile_size * point_chunk`` complex values per worker.
    """

    def __init__(self, tile_size: int = 16, n_jobs: int = -1, point_chunk: int = 8192):
        if int(tile_size) < 1:
            raise ValueError(f"tile_size must be >= 1, got {tile_size}")
        if int(point_chunk) < 1:
            raise ValueError(f"point_chunk must be >= 1, got {point_chunk}")
        if int(n_jobs) == 0:
            raise ValueError("n_jobs must be non-zero")
        self.tile_size = int(tile_size)
        self.n_jobs = int(n_jobs)
        self.point_chunk = int(point_chunk)

    def compute(self, points, grid: FrequencyGrid) -> FrequencyGrid:
        """Overwrite every cell of ``grid`` with the transform of ``points``."""
        pts = as_point_set(points)
        axis = grid.frequency_axis()
        tiles: List[Tile] = list(iter_tiles(grid.resolution, self.tile_size))

        Parallel(n_jobs=self.n_jobs, require="sharedmem")(
            delayed(self._fill_tile)(grid.values, axis, pts, tile) for tile in tiles
        )
        return grid

    def _fill_tile(self, out: np.ndarray, axis: np.ndarray, pts: np.ndarray, tile: Tile) -> None:
        r0, r1, c0, c1 = tile
        wy = axis[r0:r1]
        wx = axis[c0:c1]

        acc = np.zeros((r1 - r0, c1 - c0), dtype=np.complex128)
        for p0 in range(0, pts.shape[0], self.point_chunk):
            chunk = pts[p0 : p0 + self.point_chunk]
            ex = np.exp(-1j * TWO_PI * np.outer(wx, chunk[:, 0]))  # (cols, m)
            ey = np.exp(-1j * TWO_PI * np.outer(wy, chunk[:, 1]))  # (rows, m)
            acc += ey @ ex.T

        out[r0:r1, c0:c1] = acc


def continuous_fourier_spectrum(
    points,
    resolution: Resolution = 512,
    frequency_step: float = 1.0,
    *,
    tile_size: int = 16,
    n_jobs: int = -1,
) -> np.ndarray:
    """One-shot helper: complex spectrum of ``points`` on a fresh grid, shape ``(R, R)``."""
    grid = FrequencyGrid(resolution, frequency_step)
    SpectrumComputer(tile_size=tile_size, n_jobs=n_jobs).compute(points, grid)
    return grid.values
