"""Sampling Spectrum Analyzer -- Fourier analysis of 2D point-sampling patterns.

Aimed at Monte Carlo integration and rendering research, where the spectral
profile of a sampling pattern (white, blue, lattice-like, ...) predicts its
integration error behaviour.

This package provides tools for:
- Evaluating the continuous Fourier transform of a point set on a regular
  frequency grid (direct evaluation, tile-parallel)
- Normalizing it to a point-count independent power spectrum
- Averaging power spectra over repeated random trials
- Reducing a power spectrum to a radially averaged power-vs-frequency curve
- Writing grey EXR rasters and radial mean text tables at regular trial intervals

Key principles:
- No FFT: frequencies are sampled exactly, points are never snapped to a lattice
- Configuration errors fail before the first trial
- Undefined radial bins stay NaN; nothing is silently zeroed

Main subpackages:
- analysis: spectrum, power, radial mean, multi-trial orchestration
- models: grid buffers and point-set validation
- samplers: reference point-set generators
- export: EXR and text artifact writers
- cli: command-line entry point
"""

__all__ = []
