import unittest

import numpy as np

from sampling_spectrum_analyzer.analysis.power import power_spectrum
from sampling_spectrum_analyzer.analysis.spectrum import (
    SpectrumComputer,
    continuous_fourier_spectrum,
    iter_tiles,
)
from sampling_spectrum_analyzer.models.grids import FrequencyGrid


def _direct_spectrum(pts: np.ndarray, R: int, df: float) -> np.ndarray:
    """Reference: explicit cos/sin sums, one cell at a time."""
    out = np.zeros((R, R), dtype=complex)
    half = R // 2
    for row in range(R):
        for col in range(R):
            wx = (col - half) * df
            wy = (row - half) * df
            arg = -2.0 * np.pi * (wx * pts[:, 0] + wy * pts[:, 1])
            out[row, col] = complex(np.cos(arg).sum(), np.sin(arg).sum())
    return out


class TestSpectrum(unittest.TestCase):
    def test_matches_direct_evaluation(self):
        rng = np.random.default_rng(3)
        pts = rng.random((37, 2))
        for R, df in [(8, 1.0), (10, 0.7)]:
            F = continuous_fourier_spectrum(pts, R, df, tile_size=3, n_jobs=1)
            ref = _direct_spectrum(pts, R, df)
            self.assertTrue(np.allclose(F, ref, atol=1e-9, rtol=0.0))

    def test_dc_is_point_count(self):
        rng = np.random.default_rng(4)
        for n in [1, 5, 100]:
            pts = rng.random((n, 2))
            F = continuous_fourier_spectrum(pts, 16, 1.0, n_jobs=1)
            self.assertAlmostEqual(F[8, 8].real, float(n), places=12)
            self.assertEqual(F[8, 8].imag, 0.0)

            P = power_spectrum(F, n)
            self.assertAlmostEqual(P[8, 8], float(n), places=10)

    def test_single_point_power_is_flat(self):
        for xy in [(0.0, 0.0), (0.3, 0.71), (0.999, 0.5)]:
            F = continuous_fourier_spectrum(np.array([xy]), 32, 1.0, n_jobs=1)
            P = power_spectrum(F, 1)
            self.assertTrue(np.allclose(P, 1.0, atol=1e-12, rtol=0.0))

    def test_tiling_and_workers_do_not_change_result(self):
        rng = np.random.default_rng(5)
        pts = rng.random((50, 2))
        ref = continuous_fourier_spectrum(pts, 24, 1.0, tile_size=24, n_jobs=1)
        for tile, jobs in [(1, 1), (5, 2), (16, 2), (16, -1)]:
            grid = FrequencyGrid(24, 1.0)
            SpectrumComputer(tile_size=tile, n_jobs=jobs, point_chunk=7).compute(pts, grid)
            self.assertTrue(np.allclose(grid.values, ref, atol=1e-10, rtol=0.0))

    def test_empty_point_set_gives_zero_grid(self):
        grid = FrequencyGrid(8)
        grid.values[:] = 3.0
        SpectrumComputer(n_jobs=1).compute(np.empty((0, 2)), grid)
        self.assertFalse(np.any(grid.values))

    def test_tiles_cover_grid_once(self):
        seen = np.zeros((20, 20), dtype=int)
        for r0, r1, c0, c1 in iter_tiles(20, 16):
            seen[r0:r1, c0:c1] += 1
        self.assertTrue(np.all(seen == 1))

    def test_invalid_computer_settings(self):
        with self.assertRaises(ValueError):
            SpectrumComputer(tile_size=0)
        with self.assertRaises(ValueError):
            SpectrumComputer(n_jobs=0)
        with self.assertRaises(ValueError):
            SpectrumComputer(point_chunk=0)


class TestPower(unittest.TestCase):
    def test_power_formula_and_out_buffer(self):
        F = np.array([[3 + 4j, 1j], [0, -2]], dtype=complex)
        out = np.full((2, 2), 7.0)
        P = power_spectrum(F, 5, out=out)
        self.assertIs(P, out)
        self.assertTrue(np.allclose(P, np.array([[5.0, 0.2], [0.0, 0.8]])))

    def test_accepts_frequency_grid(self):
        g = FrequencyGrid(4)
        g.values[:] = 2.0
        self.assertTrue(np.allclose(power_spectrum(g, 2), 2.0))

    def test_rejects_invalid_count_and_shape(self):
        with self.assertRaises(ValueError):
            power_spectrum(np.ones((2, 2), dtype=complex), 0)
        with self.assertRaises(ValueError):
            power_spectrum(np.ones((2, 2), dtype=complex), 1, out=np.zeros((3, 3)))


if __name__ == "__main__":
    unittest.main()
