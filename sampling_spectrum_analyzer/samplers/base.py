from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Sampler(Protocol):
    """Capability the spectral analysis needs from a point-set generator.

    Any object with a ``type_identifier`` string (used in artifact names) and a
    ``generate(count)`` method returning an ``(count, 2)`` array of points in
    ``[0, 1)^2`` qualifies. Calls may be randomized.

    A sampler may also provide ``validate_count(count)``, raising ``ValueError``
    for counts it cannot generate. The analyzer calls it for every requested
    count before the first trial.
    """

    type_identifier: str

    def generate(self, count: int) -> np.ndarray:
        ...


def check_count(count: int) -> int:
    count = int(count)
    if count < 1:
        raise ValueError(f"sample count must be >= 1, got {count}")
    return count
