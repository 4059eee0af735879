"""Random, jittered and regular lattice samplers of the unit square."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .base import check_count


class UniformRandomSampler:
    """Independent uniform points (white noise reference)."""

    type_identifier = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def validate_count(self, count: int) -> int:
        return check_count(count)

    def generate(self, count: int) -> np.ndarray:
        return self.rng.random((check_count(count), 2))


class JitteredSampler:
    """One uniform point per stratum of a ``k x k`` lattice, ``k = ceil(sqrt(n))``.

    When ``n`` is not a perfect square, ``n`` distinct strata are drawn at random.
    """

    type_identifier = "jitter"

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def validate_count(self, count: int) -> int:
        return check_count(count)

    def generate(self, count: int) -> np.ndarray:
        n = check_count(count)
        k = math.isqrt(n)
        if k * k < n:
            k += 1

        cells = np.arange(k * k)
        if cells.size > n:
            cells = np.sort(self.rng.choice(cells, size=n, replace=False))
        ix = cells % k
        iy = cells // k

        offsets = self.rng.random((n, 2))
        pts = np.column_stack([(ix + offsets[:, 0]) / k, (iy + offsets[:, 1]) / k])
        # (k-1 + 1-eps)/k can round up to 1.0
        return np.minimum(pts, np.nextafter(1.0, 0.0))


class RegularGridSampler:
    """Cell centres of a ``k x k`` lattice. ``n`` must be a perfect square."""

    type_identifier = "regular"

    def validate_count(self, count: int) -> int:
        n = check_count(count)
        if math.isqrt(n) ** 2 != n:
            raise ValueError(f"regular grid sampler needs a perfect square count, got {n}")
        return n

    def generate(self, count: int) -> np.ndarray:
        n = self.validate_count(count)
        k = math.isqrt(n)
        c = (np.arange(k, dtype=np.float64) + 0.5) / k
        xx, yy = np.meshgrid(c, c, indexing="xy")
        return np.column_stack([xx.ravel(), yy.ravel()])
