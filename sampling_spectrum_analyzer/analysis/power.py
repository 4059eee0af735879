from __future__ import annotations

from typing import Optional, Union

import numpy as np

from sampling_spectrum_analyzer.models.grids import FrequencyGrid


def power_spectrum(
    spectrum: Union[FrequencyGrid, np.ndarray],
    n: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Point-count normalized power ``(Re^2 + Im^2) / n`` of a complex spectrum.

    Dividing by ``n`` makes spectra of different sample counts comparable: white
    noise sits at 1 and the DC cell at ``n``.

    Parameters
    ----------
    spectrum:
        A :class:`FrequencyGrid` or a complex array.
    n:
        Number of points that produced the spectrum (>= 1).
    out:
        Optional float64 array of the same shape to write into (per-trial buffer reuse).
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"point count must be >= 1 to normalize power, got {n}")

    values = spectrum.values if isinstance(spectrum, FrequencyGrid) else np.asarray(spectrum)
    if out is None:
        out = np.empty(values.shape, dtype=np.float64)
    elif out.shape != values.shape:
        raise ValueError(f"out has shape {out.shape}, expected {values.shape}")

    np.multiply(values.real, values.real, out=out)
    out += values.imag * values.imag
    out /= float(n)
    return out
