"""
Integration tests for basic pynoisemap workflows.

These tests run the full pipeline: kernel construction, fractal fill,
normalisation and combination of several fields.
"""
import numpy as np
import pytest


class TestFillAndNormalize:
    """Fill a field from a kernel, then map it onto an output range."""

    @pytest.mark.integration
    def test_rank1_gradient_to_percent(self):
        """A seeded 1-D gradient fill normalised onto [0, 100] hits both bounds exactly."""
        import pynoisemap as pnm

        field = pnm.NoiseField(1, 32)
        kernel = pnm.GradientNoise(1234)
        pnm.fractal_fill(kernel, field, scale=16, octaves=3, lacunarity=2.0, persistence=0.5)
        field.normalize(0.0, 100.0)

        values = field.to_numpy()
        assert values.shape == (32,)
        assert np.all(np.isfinite(values))
        assert field.min() == 0.0
        assert field.max() == 100.0

    @pytest.mark.integration
    def test_permutation_seed_reproducibility(self):
        """Seed 42 rebuilds the same table; seed 43 gives a different one."""
        from pynoisemap.noise import PermutationTable

        first = PermutationTable(42)
        again = PermutationTable(42)
        other = PermutationTable(43)

        assert np.array_equal(first.table, again.table)
        assert np.any(first.table != other.table)

    @pytest.mark.integration
    @pytest.mark.parametrize("kind", ["gradient", "simplex", "value", "white"])
    def test_generator_matches_manual_pipeline(self, kind):
        """NoiseGenerator gives the same result as building the kernel by hand."""
        import pynoisemap as pnm

        params = pnm.NoiseParams(kind=kind, seed=31, scale=12.0, octaves=4)
        generated = pnm.NoiseGenerator(params, 0.0, 255.0).generate(pnm.NoiseField(2, 64))

        manual = pnm.NoiseField(2, 64)
        pnm.fractal_fill(pnm.make_kernel(params), manual, scale=12.0, octaves=4)
        manual.normalize(0.0, 255.0)

        assert np.array_equal(generated.values, manual.values)


class TestTerrainWorkflow:
    """Layer several noise fields into a heightmap."""

    @pytest.mark.integration
    @pytest.mark.slow
    def test_layered_heightmap(self):
        import pynoisemap as pnm

        base = pnm.generate_field(2, 128, pnm.NoiseParams(kind="simplex", seed=1, scale=64.0, octaves=6), -1.0, 1.0)
        ridges = pnm.generate_field(2, 128, pnm.NoiseParams(kind="gradient", seed=2, scale=16.0), -1.0, 1.0)
        grain = pnm.generate_field(2, 128, pnm.NoiseParams(kind="white", seed=3, octaves=1), -1.0, 1.0)

        expected = base.to_numpy() + 0.3 * ridges.values + 0.02 * grain.values
        base.combine(ridges, 0.3)
        base.combine(grain, 0.02)
        np.testing.assert_allclose(base.values, expected, atol=1e-12)

        base.normalize(0.0, 1000.0)
        assert base.min() == 0.0
        assert base.max() == 1000.0

        # large scale smooth field dominates: neighbouring cells stay close
        steps = np.abs(np.diff(base.values, axis=0))
        assert np.median(steps) < 50.0

    @pytest.mark.integration
    def test_volume_slices_are_coherent(self):
        import pynoisemap as pnm

        volume = pnm.generate_field(3, 32, pnm.NoiseParams(kind="value", seed=5, scale=8.0), 0.0, 1.0)
        plane_a = volume[10]
        plane_b = volume[11]
        assert np.corrcoef(plane_a.ravel(), plane_b.ravel())[0, 1] > 0.5

    @pytest.mark.integration
    def test_round_trip_through_npy(self, tmp_path):
        import pynoisemap as pnm

        field = pnm.generate_field(2, 32, pnm.NoiseParams(seed=8), 0.0, 1.0)
        path = tmp_path / "field.npy"
        np.save(path, field.values)

        restored = pnm.NoiseField.from_array(np.load(path))
        assert restored.rank == 2
        assert np.array_equal(restored.values, field.values)
