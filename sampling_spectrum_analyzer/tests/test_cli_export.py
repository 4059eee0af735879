from __future__ import annotations

"""Tests for the command-line entry point and the EXR raster writer."""

import tempfile
from pathlib import Path

import numpy as np
import pytest

from sampling_spectrum_analyzer.cli.fourier import main


def test_missing_required_options_exit_before_running(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(SystemExit) as exc:
            main(["--nsamples", "16", "--out-dir", tmpdir])
        assert exc.value.code == 2
        assert list(Path(tmpdir).iterdir()) == []
    assert "--ntrials" in capsys.readouterr().err


def test_invalid_configuration_reports_error(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        rc = main(["--nsamples", "16", "--ntrials", "2", "--res", "15", "--out-dir", tmpdir])
        assert rc == 2
        assert list(Path(tmpdir).iterdir()) == []
    err = capsys.readouterr().err
    assert err.startswith("[error]")
    assert "even" in err


def test_count_rejected_by_sampler_writes_nothing(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        rc = main(
            [
                "--nsamples", "16",
                "--nsamples", "10",
                "--ntrials", "2",
                "--sampler", "regular",
                "--res", "16",
                "--jobs", "1",
                "--out-dir", tmpdir,
            ]
        )
        written = list(Path(tmpdir).iterdir())
    assert rc == 2
    assert written == []
    err = capsys.readouterr().err
    assert err.startswith("[error]")
    assert "perfect square count, got 10" in err


def test_duplicate_sample_counts_rejected(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        rc = main(["--nsamples", "16", "16", "--ntrials", "1", "--res", "16", "--out-dir", tmpdir])
        assert rc == 2
        assert list(Path(tmpdir).iterdir()) == []
    assert "Duplicate sample counts" in capsys.readouterr().err


def test_unknown_sampler_rejected() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--nsamples", "16", "--ntrials", "1", "--sampler", "nope"])
    assert exc.value.code == 2


def test_small_run_writes_artifacts(capsys) -> None:
    from sampling_spectrum_analyzer.export.raster import read_exr_grey

    with tempfile.TemporaryDirectory() as tmpdir:
        rc = main(
            [
                "--nsamples", "16",
                "--nsamples", "9",
                "--ntrials", "10",
                "--tstep", "5",
                "--sampler", "jitter",
                "--seed", "1",
                "--res", "16",
                "--jobs", "1",
                "--out-dir", tmpdir,
            ]
        )
        assert rc == 0
        names = sorted(p.name for p in Path(tmpdir).iterdir())
        expected = []
        for n in (16, 9):
            for t in ("01", "05", "10"):
                expected.append(f"power-jitter-n{n}-{t}.exr")
                expected.append(f"power-radial-mean-jitter-n{n}-{t}.txt")
        assert names == sorted(expected)

        raster = read_exr_grey(Path(tmpdir) / "power-jitter-n9-10.exr")
        lines = (Path(tmpdir) / "power-radial-mean-jitter-n9-10.txt").read_text().splitlines()

    assert raster.shape == (16, 16)
    assert raster[8, 8] == pytest.approx(9.0, rel=1e-6)
    assert len(lines) == 8 - 5
    assert lines[0].startswith("0 9.000000000000")

    captured = capsys.readouterr()
    assert "[info] fourier analysis: sampler=jitter" in captured.out
    assert "10 / 10 : 9" in captured.err


def test_exr_roundtrip_and_size_check() -> None:
    from sampling_spectrum_analyzer.export.raster import read_exr_grey, write_exr_grey

    grid = np.arange(6 * 4, dtype=np.float64).reshape(4, 6) / 7.0
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "nested" / "grey.exr"
        write_exr_grey(path, grid.ravel(), 6, 4)
        back = read_exr_grey(path)

        with pytest.raises(ValueError):
            write_exr_grey(Path(tmpdir) / "bad.exr", grid.ravel(), 5, 4)

    assert back.shape == (4, 6)
    np.testing.assert_allclose(back, grid.astype(np.float32), rtol=0, atol=0)
