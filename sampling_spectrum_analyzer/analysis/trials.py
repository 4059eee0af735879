from __future__ import annotations

"""Multi-trial power spectrum estimation.

For each requested sample count ``n`` (in the given order):

1) open a fresh :class:`~sampling_spectrum_analyzer.models.grids.PowerAccumulator`;
2) for ``trial = 1..n_trials``, strictly in order:
   - ask the sampler for a new point set of size ``n``,
   - compute its continuous Fourier spectrum and point-normalized power,
   - add the power to the running sum,
   - on trial 1 and on every ``trial_step_out``-th trial, write the running
     average as a grey EXR raster plus its radial mean table;
3) release the accumulator and move on to the next ``n``.

Artifacts are named ``power-<type>-n<n>-<trial>.exr`` and
``power-radial-mean-<type>-n<n>-<trial>.txt`` where ``<trial>`` is zero-padded to
the width of ``n_trials``.

Nothing is retried. Any exception from the sampler, the computation, or the
writers aborts the run.
"""

from dataclasses import dataclass
from pathlib import Path
import math
import sys
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from sampling_spectrum_analyzer.analysis.power import power_spectrum
from sampling_spectrum_analyzer.analysis.radial import DEFAULT_RADIAL_TRIM, RadialAverager, RadialMean
from sampling_spectrum_analyzer.analysis.spectrum import SpectrumComputer
from sampling_spectrum_analyzer.export.naming import radial_filename, raster_filename
from sampling_spectrum_analyzer.export.radial_table import write_radial_mean_txt
from sampling_spectrum_analyzer.export.raster import write_exr_grey
from sampling_spectrum_analyzer.models.grids import FrequencyGrid, PowerAccumulator, Resolution
from sampling_spectrum_analyzer.models.points import as_point_set
from sampling_spectrum_analyzer.samplers.base import Sampler


ANALYZER_TYPE = "fourier"

RasterWriter = Callable[[Path, np.ndarray, int, int], None]
RadialWriter = Callable[[Path, RadialMean], None]


@dataclass(frozen=True)
class TrialConfig:
    """Configuration of a multi-trial spectral analysis."""

    sample_counts: Tuple[int, ...]
    n_trials: int

    trial_step_out: int = 1
    frequency_step: float = 1.0

    resolution: Resolution = 512
    tile_size: int = 16
    radial_trim: int = DEFAULT_RADIAL_TRIM
    n_jobs: int = -1

    out_dir: Path = Path(".")
    progress: bool = True

    def validate(self) -> None:
        if len(self.sample_counts) == 0:
            raise ValueError("At least one sample count is required.")
        bad = [n for n in self.sample_counts if int(n) < 1]
        if bad:
            raise ValueError(f"Sample counts must be >= 1, got {bad}")
        counts = [int(n) for n in self.sample_counts]
        dupes = sorted({n for n in counts if counts.count(n) > 1})
        if dupes:
            raise ValueError(f"Duplicate sample counts would overwrite each other's artifacts: {dupes}")
        if int(self.n_trials) < 1:
            raise ValueError(f"n_trials must be >= 1, got {self.n_trials}")
        if int(self.trial_step_out) < 1:
            raise ValueError(f"trial_step_out must be >= 1, got {self.trial_step_out}")
        df = float(self.frequency_step)
        if not math.isfinite(df) or df <= 0.0:
            raise ValueError(f"frequency_step must be finite and > 0, got {self.frequency_step}")


@dataclass(frozen=True)
class SnapshotRecord:
    """One emitted (n, trial) snapshot."""

    sample_count: int
    trial: int
    raster_path: Path
    radial_path: Path
    radial: RadialMean


def is_output_trial(trial: int, trial_step_out: int) -> bool:
    return trial == 1 or trial % trial_step_out == 0


class TrialOrchestrator:
    """Drive repeated trials and emit running-average power snapshots.

    All collaborators and buffers are built here so configuration errors
    (non-square resolution, invalid steps, sample counts the sampler's
    ``validate_count`` rejects) surface before any trial runs.

    Parameters
    ----------
    sampler:
        Point-set generator (see :class:`~sampling_spectrum_analyzer.samplers.base.Sampler`).
    config:
        Run configuration.
    raster_writer:
        ``(path, grid, x_res, y_res)`` callable persisting the averaged power grid.
    radial_writer:
        ``(path, radial_mean)`` callable persisting the radial table.
    spectrum_computer:
        Optional preconfigured :class:`SpectrumComputer`.
    """

    def __init__(
        self,
        sampler: Sampler,
        config: TrialConfig,
        *,
        raster_writer: RasterWriter = write_exr_grey,
        radial_writer: RadialWriter = write_radial_mean_txt,
        spectrum_computer: Optional[SpectrumComputer] = None,
    ):
        config.validate()
        validate_count = getattr(sampler, "validate_count", None)
        if validate_count is not None:
            for n in config.sample_counts:
                validate_count(int(n))
        self.sampler = sampler
        self.config = config
        self.raster_writer = raster_writer
        self.radial_writer = radial_writer

        self.grid = FrequencyGrid(config.resolution, config.frequency_step)
        self.radial = RadialAverager(self.grid.resolution, trim=config.radial_trim)
        self.spectrum = spectrum_computer or SpectrumComputer(
            tile_size=config.tile_size, n_jobs=config.n_jobs
        )
        self._power = np.zeros(self.grid.shape, dtype=np.float64)

    @property
    def analyzer_type(self) -> str:
        return ANALYZER_TYPE

    def run_trial(self, points) -> np.ndarray:
        """Spectrum + power of one point set. Returns the per-trial power buffer."""
        pts = as_point_set(points)
        self.grid.clear()
        self.spectrum.compute(pts, self.grid)
        return power_spectrum(self.grid, pts.shape[0], out=self._power)

    def run(self) -> List[SnapshotRecord]:
        records: List[SnapshotRecord] = []
        for n in self.config.sample_counts:
            records.extend(self._run_sample_count(int(n)))
        if self.config.progress:
            print("", file=sys.stderr)
        return records

    def _run_sample_count(self, n: int) -> List[SnapshotRecord]:
        cfg = self.config
        records: List[SnapshotRecord] = []

        with PowerAccumulator(self.grid.shape) as accum:
            for trial in range(1, int(cfg.n_trials) + 1):
                pts = as_point_set(self.sampler.generate(n))
                if pts.shape[0] != n:
                    raise ValueError(
                        f"sampler {self.sampler.type_identifier!r} returned {pts.shape[0]} points, expected {n}"
                    )

                if cfg.progress:
                    print(f"\r {trial} / {cfg.n_trials} : {n}", end="", file=sys.stderr, flush=True)

                accum.add(self.run_trial(pts))

                if is_output_trial(trial, int(cfg.trial_step_out)):
                    records.append(self._emit_snapshot(accum, n, trial))

        return records

    def _emit_snapshot(self, accum: PowerAccumulator, n: int, trial: int) -> SnapshotRecord:
        cfg = self.config
        snapshot = accum.snapshot()
        kind = self.sampler.type_identifier
        out_dir = Path(cfg.out_dir)

        raster_path = out_dir / raster_filename(kind, n, trial, cfg.n_trials)
        radial_path = out_dir / radial_filename(kind, n, trial, cfg.n_trials)

        R = self.grid.resolution
        self.raster_writer(raster_path, snapshot.ravel(), R, R)

        radial = self.radial.average(snapshot)
        self.radial_writer(radial_path, radial)

        return SnapshotRecord(
            sample_count=n,
            trial=trial,
            raster_path=raster_path,
            radial_path=radial_path,
            radial=radial,
        )


def run_fourier_analysis(
    sampler: Sampler,
    sample_counts: Sequence[int],
    n_trials: int,
    **kwargs,
) -> List[SnapshotRecord]:
    """Convenience wrapper: build a :class:`TrialConfig` and run it."""
    cfg = TrialConfig(sample_counts=tuple(int(n) for n in sample_counts), n_trials=int(n_trials), **kwargs)
    return TrialOrchestrator(sampler, cfg).run()
