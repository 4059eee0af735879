from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .base import check_count


# Digit permutations keep 0 fixed so trailing zero digits contribute nothing.
_PERMUTATIONS: Dict[int, Tuple[int, ...]] = {
    2: (0, 1),
    3: (0, 2, 1),
}


def radical_inverse(indices: np.ndarray, base: int, permutation: Optional[Sequence[int]] = None) -> np.ndarray:
    """Van der Corput radical inverse of integer ``indices`` in ``base``."""
    idx = np.asarray(indices, dtype=np.int64).copy()
    perm = np.asarray(permutation if permutation is not None else range(base), dtype=np.int64)
    val = np.zeros(idx.shape, dtype=np.float64)
    f = 1.0
    while np.any(idx > 0):
        f /= base
        val += perm[idx % base] * f
        idx //= base
    return val


class HaltonSampler:
    """Halton sequence in bases 2 and 3.

    Successive calls continue the sequence. With a seed, each generated set is
    shifted by one random toroidal offset (Cranley-Patterson rotation), so trials
    are independent realizations.
    """

    type_identifier = "halton"

    def __init__(self, seed: Optional[int] = None, *, permute: bool = False, skip: int = 20):
        self.bases = (2, 3)
        self.permute = bool(permute)
        self.skip = int(skip)
        self.randomize = seed is not None
        self.rng = np.random.default_rng(seed)
        self._next = self.skip

    def validate_count(self, count: int) -> int:
        return check_count(count)

    def generate(self, count: int) -> np.ndarray:
        n = check_count(count)
        idx = np.arange(self._next, self._next + n, dtype=np.int64)
        self._next += n

        cols = []
        for base in self.bases:
            perm = _PERMUTATIONS[base] if self.permute else None
            cols.append(radical_inverse(idx, base, perm))
        pts = np.column_stack(cols)

        if self.randomize:
            pts = np.mod(pts + self.rng.random(2), 1.0)
        return pts
