"""Spectral analysis package.

Design principle:
  - Samplers produce point sets in the unit square; the analysis never depends on
    a concrete sampler, only on ``type_identifier`` and ``generate(count)``.
  - Spectra are evaluated directly at each frequency sample (no FFT, no lattice
    assumption on the points).

Pipeline per trial: spectrum -> power -> running average -> radial mean.
"""

from .spectrum import SpectrumComputer, continuous_fourier_spectrum, iter_tiles
from .power import power_spectrum
from .radial import DEFAULT_RADIAL_TRIM, RadialAverager, RadialMean, radial_mean_power
from .trials import (
    ANALYZER_TYPE,
    SnapshotRecord,
    TrialConfig,
    TrialOrchestrator,
    is_output_trial,
    run_fourier_analysis,
)

__all__ = [
    "SpectrumComputer",
    "continuous_fourier_spectrum",
    "iter_tiles",
    "power_spectrum",
    "DEFAULT_RADIAL_TRIM",
    "RadialAverager",
    "RadialMean",
    "radial_mean_power",
    "ANALYZER_TYPE",
    "SnapshotRecord",
    "TrialConfig",
    "TrialOrchestrator",
    "is_output_trial",
    "run_fourier_analysis",
]
