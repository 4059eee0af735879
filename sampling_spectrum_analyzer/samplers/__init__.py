"""Point-set generators.

The spectral analysis only depends on the :class:`Sampler` capability
(``type_identifier`` + ``generate(count)``). The backends below are reference
patterns; any object satisfying the protocol can be passed to the analyzer.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .base import Sampler
from .halton import HaltonSampler, radical_inverse
from .lattice import JitteredSampler, RegularGridSampler, UniformRandomSampler


SAMPLERS: Dict[str, Callable[[Optional[int]], Sampler]] = {
    "random": lambda seed: UniformRandomSampler(seed),
    "jitter": lambda seed: JitteredSampler(seed),
    "regular": lambda seed: RegularGridSampler(),
    "halton": lambda seed: HaltonSampler(seed),
}


def make_sampler(name: str, seed: Optional[int] = None) -> Sampler:
    key = str(name).strip().lower()
    if key not in SAMPLERS:
        raise ValueError(f"Unknown sampler {name!r}. Known samplers: {sorted(SAMPLERS)}")
    return SAMPLERS[key](seed)


__all__ = [
    "Sampler",
    "SAMPLERS",
    "make_sampler",
    "UniformRandomSampler",
    "JitteredSampler",
    "RegularGridSampler",
    "HaltonSampler",
    "radical_inverse",
]
