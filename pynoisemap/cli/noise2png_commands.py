"""
Noise to PNG Conversion CLI Commands for pynoisemap

Command line interface for converting noise arrays (.npy) to PNG format.
"""

import sys

import click
import numpy as np
from PIL import Image


def to_unit_range(data):
    """Rescale an array to [0, 1]; constant arrays map to 0."""
    vmin = np.nanmin(data)
    vmax = np.nanmax(data)
    if vmin == vmax:
        return np.zeros_like(data, dtype=np.float64), True
    normalized = (data - vmin) / (vmax - vmin)
    return np.nan_to_num(normalized, nan=0.0), False


def colorize(normalized, cmap):
    """Map a [0, 1] array to 8-bit RGB through a matplotlib colormap."""
    import matplotlib

    rgba = matplotlib.colormaps[cmap](normalized)
    return (rgba[..., :3] * 255).astype(np.uint8)


@click.command()
@click.argument("input_npy", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Output PNG filename (default: input name with .png extension)",
)
@click.option(
    "--uint",
    is_flag=True,
    default=False,
    help="Save as uint8 (0-255), otherwise save as uint16 (0-65535)",
)
@click.option("--cmap", default=None, help="Matplotlib colormap name for an RGB image (e.g. terrain)")
@click.option("--slice", "slice_index", type=int, default=0, show_default=True,
              help="Index along the first axis used for 3-D arrays")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise2png(input_npy, output, uint, cmap, slice_index, verbose):
    """
    Convert a noise array to PNG format.

    INPUT_NPY: Path to a 2-D (or 3-D, see --slice) numpy array (.npy)

    Examples:

        # 16-bit grayscale PNG
        pnm-noise2png terrain.npy

        # 8-bit grayscale
        pnm-noise2png terrain.npy --uint

        # Coloured with a matplotlib colormap
        pnm-noise2png terrain.npy --cmap terrain -o terrain_rgb.png
    """
    try:
        if verbose:
            click.echo(f"Loading noise from '{input_npy}'...")

        data = np.load(input_npy)

        if data.ndim == 3:
            if not 0 <= slice_index < data.shape[0]:
                raise click.BadParameter(
                    f"slice {slice_index} out of range for {data.shape[0]} planes", param_hint="--slice"
                )
            data = data[slice_index]
        if data.ndim != 2:
            click.echo(f"Error: Expected a 2-D or 3-D array, got shape {data.shape}", err=True)
            sys.exit(1)

        if output is None:
            output = input_npy.rsplit(".", 1)[0] + ".png"

        if verbose:
            click.echo(f"Processing noise data (shape: {data.shape})...")

        normalized, constant = to_unit_range(data)
        if constant:
            click.echo("Warning: noise has constant values", err=True)

        if cmap is not None:
            img_data = colorize(normalized, cmap)
            mode = "RGB"
        elif uint:
            img_data = (normalized * 255).astype(np.uint8)
            mode = "L"
        else:
            img_data = (normalized * 65535).astype(np.uint16)
            mode = "I;16"

        # uint8 -> L, uint16 -> I;16, (H, W, 3) uint8 -> RGB
        img = Image.fromarray(img_data)

        if verbose:
            click.echo(f"Saving PNG to '{output}'...")

        img.save(output)

        click.echo(f"Converted '{input_npy}' -> '{output}' (mode {mode})")

    except click.BadParameter:
        raise

    except KeyError as e:
        click.echo(f"Error: Unknown colormap {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["noise2png"]


if __name__ == "__main__":
    noise2png()
