"""CLI command generating fractal noise fields with pynoisemap."""

import sys

import click
import numpy as np

import pynoisemap as pnm
from pynoisemap import constants as cte
from pynoisemap.errors import NoiseMapError


@click.command()
@click.argument("output", type=click.Path())
@click.option(
    "--kind",
    "-k",
    type=click.Choice(["gradient", "simplex", "value", "white"]),
    default="gradient",
    show_default=True,
    help="Noise kernel",
)
@click.option("--rank", "-r", type=click.IntRange(1, 3), default=2, show_default=True, help="Number of axes")
@click.option("--size", "-s", type=int, default=256, show_default=True, help="Cells per axis (>= 32)")
@click.option("--seed", type=int, default=None, help="Kernel seed (default: random)")
@click.option("--scale", type=float, default=cte.DEFAULT_SCALE, show_default=True, help="Frequency divisor")
@click.option("--octaves", "-o", type=int, default=cte.DEFAULT_OCTAVES, show_default=True, help="Number of octaves")
@click.option(
    "--lacunarity", type=float, default=cte.DEFAULT_LACUNARITY, show_default=True,
    help="Frequency multiplier per octave",
)
@click.option(
    "--persistence", type=float, default=cte.DEFAULT_PERSISTENCE, show_default=True,
    help="Amplitude multiplier per octave",
)
@click.option(
    "--interpolation",
    type=click.Choice(["cubic", "linear"]),
    default="cubic",
    show_default=True,
    help="Value noise interpolation",
)
@click.option("--raw-sum", is_flag=True, help="Do not divide the octave sum by the total absolute amplitude")
@click.option("--lower", type=float, default=None, help="Normalise onto [LOWER, UPPER]")
@click.option("--upper", type=float, default=None, help="Normalise onto [LOWER, UPPER]")
@click.option("--arch", type=click.Choice(["cpu", "gpu", "cuda", "vulkan", "metal"]), default=None,
              help="Taichi backend (default: $PYNOISEMAP_ARCH or cpu)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(output, kind, rank, size, seed, scale, octaves, lacunarity, persistence,
             interpolation, raw_sum, lower, upper, arch, verbose):
    """
    Generate a fractal noise field and save it to OUTPUT as a .npy array.

    Examples:

        # 256x256 gradient noise normalised to [0, 1]
        pnm-generate terrain.npy --seed 42 --lower 0 --upper 1

        # 3-D value noise, linear interpolation
        pnm-generate cube.npy -k value -r 3 -s 64 --interpolation linear
    """
    try:
        pnm.init(arch)
        params = pnm.NoiseParams(
            kind=kind,
            seed=seed,
            scale=scale,
            octaves=octaves,
            lacunarity=lacunarity,
            persistence=persistence,
            interpolation=interpolation,
            normalize_amplitude=not raw_sum,
        )
        if verbose:
            click.echo(
                f"Generating {kind} noise: rank={rank}, size={size}, seed={params.seed}, "
                f"scale={scale}, octaves={octaves}, lacunarity={lacunarity}, persistence={persistence}"
            )

        field = pnm.generate_field(rank, size, params, lower_bound=lower, upper_bound=upper)
        np.save(output, field.values)

        if verbose:
            click.echo(f"Value range: [{field.min():.4f}, {field.max():.4f}]")
        click.echo(f"Saved {kind} noise {field.shape} -> '{output}'")

    except NoiseMapError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    except Exception as e:  # pragma: no cover - error handling path
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["generate"]


if __name__ == "__main__":
    generate()
