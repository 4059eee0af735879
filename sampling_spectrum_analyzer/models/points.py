from __future__ import annotations

import numpy as np


def as_point_set(points) -> np.ndarray:
    """Validate a generated point set and return it as a read-only ``(n, 2)`` array.

    Column 0 holds x, column 1 holds y. Every coordinate must be finite and lie in
    the unit square ``[0, 1)``. An empty set is accepted and returned with shape ``(0, 2)``.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)

    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"point set must have shape (n, 2), got {pts.shape}")
    if not np.all(np.isfinite(pts)):
        raise ValueError("point set contains non-finite coordinates")
    if np.any(pts < 0.0) or np.any(pts >= 1.0):
        bad = np.where(np.any((pts < 0.0) | (pts >= 1.0), axis=1))[0]
        raise ValueError(f"points outside the unit square [0, 1)^2 at indices: {bad[:20].tolist()}")

    # Never alias the sampler's buffer.
    pts = np.array(pts, dtype=np.float64, copy=True)
    pts.setflags(write=False)
    return pts
