"""Unit tests for CLI functionality."""

import numpy as np
import pytest
from click.testing import CliRunner
from PIL import Image


@pytest.fixture
def runner():
    """Provide Click test runner."""
    return CliRunner()


class TestGenerateCommand:
    """pnm-generate"""

    @pytest.mark.unit
    def test_help(self, runner):
        from pynoisemap.cli import generate

        result = runner.invoke(generate, ["--help"])
        assert result.exit_code == 0
        assert "Generate a fractal noise field" in result.output
        assert "--octaves" in result.output

    @pytest.mark.unit
    def test_requires_output(self, runner):
        from pynoisemap.cli import generate

        result = runner.invoke(generate, [])
        assert result.exit_code != 0

    @pytest.mark.unit
    def test_writes_bounded_npy(self, runner, tmp_path):
        from pynoisemap.cli import generate

        out = tmp_path / "terrain.npy"
        result = runner.invoke(
            generate,
            [str(out), "--size", "48", "--seed", "42", "--lower", "0", "--upper", "1", "--arch", "cpu"],
        )
        assert result.exit_code == 0, result.output
        assert "Saved gradient noise (48, 48)" in result.output

        data = np.load(out)
        assert data.shape == (48, 48)
        assert data.min() == 0.0
        assert data.max() == 1.0

    @pytest.mark.unit
    def test_same_seed_same_output(self, runner, tmp_path):
        from pynoisemap.cli import generate

        args = ["-k", "value", "-r", "1", "-s", "64", "--seed", "7", "--interpolation", "linear"]
        a, b = tmp_path / "a.npy", tmp_path / "b.npy"
        assert runner.invoke(generate, [str(a)] + args).exit_code == 0
        assert runner.invoke(generate, [str(b)] + args).exit_code == 0
        assert np.array_equal(np.load(a), np.load(b))

    @pytest.mark.unit
    def test_verbose(self, runner, tmp_path):
        from pynoisemap.cli import generate

        result = runner.invoke(generate, [str(tmp_path / "c.npy"), "-k", "simplex", "-r", "3", "-s", "32", "-v"])
        assert result.exit_code == 0, result.output
        assert "Generating simplex noise" in result.output
        assert "Value range" in result.output
        assert np.load(tmp_path / "c.npy").shape == (32, 32, 32)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "args",
        [
            ["--size", "31"],
            ["--octaves", "0"],
            ["--lower", "0"],
            ["--lower", "2", "--upper", "1"],
        ],
    )
    def test_invalid_arguments_exit_1(self, runner, tmp_path, args):
        from pynoisemap.cli import generate

        out = tmp_path / "bad.npy"
        result = runner.invoke(generate, [str(out)] + args)
        assert result.exit_code == 1
        assert not out.exists()

    @pytest.mark.unit
    def test_rank_out_of_range_is_usage_error(self, runner, tmp_path):
        from pynoisemap.cli import generate

        result = runner.invoke(generate, [str(tmp_path / "x.npy"), "--rank", "4"])
        assert result.exit_code == 2


class TestNoise2PngCommand:
    """pnm-noise2png"""

    @pytest.fixture
    def noise_npy(self, tmp_path):
        rng = np.random.default_rng(0)
        path = tmp_path / "noise.npy"
        np.save(path, rng.uniform(-1.0, 1.0, size=(40, 50)))
        return path

    @pytest.mark.unit
    def test_help(self, runner):
        from pynoisemap.cli import noise2png

        result = runner.invoke(noise2png, ["--help"])
        assert result.exit_code == 0
        assert "Convert a noise array to PNG format" in result.output

    @pytest.mark.unit
    def test_default_is_16_bit(self, runner, noise_npy):
        from pynoisemap.cli import noise2png

        result = runner.invoke(noise2png, [str(noise_npy)])
        assert result.exit_code == 0, result.output
        assert "(mode I;16)" in result.output

        png = noise_npy.with_suffix(".png")
        with Image.open(png) as img:
            assert img.size == (50, 40)
            data = np.array(img)
        assert data.min() == 0
        assert data.max() == 65535

    @pytest.mark.unit
    def test_uint8(self, runner, noise_npy, tmp_path):
        from pynoisemap.cli import noise2png

        out = tmp_path / "gray.png"
        result = runner.invoke(noise2png, [str(noise_npy), "--uint", "-o", str(out)])
        assert result.exit_code == 0, result.output
        with Image.open(out) as img:
            assert img.mode == "L"
            assert np.array(img).max() == 255

    @pytest.mark.unit
    def test_colormap(self, runner, noise_npy, tmp_path):
        from pynoisemap.cli import noise2png

        out = tmp_path / "rgb.png"
        result = runner.invoke(noise2png, [str(noise_npy), "--cmap", "terrain", "-o", str(out)])
        assert result.exit_code == 0, result.output
        with Image.open(out) as img:
            assert img.mode == "RGB"
            assert img.size == (50, 40)

    @pytest.mark.unit
    def test_unknown_colormap(self, runner, noise_npy, tmp_path):
        from pynoisemap.cli import noise2png

        result = runner.invoke(noise2png, [str(noise_npy), "--cmap", "no_such_map", "-o", str(tmp_path / "x.png")])
        assert result.exit_code == 1

    @pytest.mark.unit
    def test_3d_slice(self, runner, tmp_path):
        from pynoisemap.cli import noise2png

        path = tmp_path / "cube.npy"
        np.save(path, np.random.default_rng(1).uniform(size=(4, 32, 32)))
        out = tmp_path / "slice.png"
        assert runner.invoke(noise2png, [str(path), "--slice", "2", "-o", str(out)]).exit_code == 0
        assert out.exists()
        assert runner.invoke(noise2png, [str(path), "--slice", "9"]).exit_code == 2

    @pytest.mark.unit
    def test_rejects_1d(self, runner, tmp_path):
        from pynoisemap.cli import noise2png

        path = tmp_path / "line.npy"
        np.save(path, np.linspace(0.0, 1.0, 64))
        result = runner.invoke(noise2png, [str(path)])
        assert result.exit_code == 1

    @pytest.mark.unit
    def test_constant_array_warns(self, runner, tmp_path):
        from pynoisemap.cli import noise2png

        path = tmp_path / "flat.npy"
        np.save(path, np.full((32, 32), 3.0))
        result = runner.invoke(noise2png, [str(path), "--uint"])
        assert result.exit_code == 0
        assert "constant" in result.output
