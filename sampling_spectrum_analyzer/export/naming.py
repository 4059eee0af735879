from __future__ import annotations


def padded_trial_index(trial: int, n_trials: int) -> str:
    """Trial number zero-padded to the decimal width of ``n_trials`` (``7`` of ``100`` -> ``"007"``)."""
    return str(int(trial)).zfill(len(str(int(n_trials))))


def raster_filename(sampler_type: str, n: int, trial: int, n_trials: int) -> str:
    return f"power-{sampler_type}-n{int(n)}-{padded_trial_index(trial, n_trials)}.exr"


def radial_filename(sampler_type: str, n: int, trial: int, n_trials: int) -> str:
    return f"power-radial-mean-{sampler_type}-n{int(n)}-{padded_trial_index(trial, n_trials)}.txt"
