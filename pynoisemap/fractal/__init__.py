"""
Fractal compositing module for pynoisemap.

Layers a noise kernel over several octaves (fractal Brownian motion) to fill a
NoiseField, with taichi kernels parallelised over the field coordinates.

Usage:
    import pynoisemap as pnm

    field = pnm.field.NoiseField(2, 256)
    kernel = pnm.noise.SimplexNoise(seed=3)
    pnm.fractal.fractal_fill(kernel, field, scale=64, octaves=6,
                             lacunarity=2.0, persistence=0.5)
"""

from .compositor import (
    fractal_fill,
    fractal_fill_1d_kernel,
    fractal_fill_2d_kernel,
    fractal_fill_3d_kernel,
    validate_fractal_parameters,
    octave_amplitudes,
    amplitude_sum,
)

__all__ = [
    "fractal_fill",
    "fractal_fill_1d_kernel",
    "fractal_fill_2d_kernel",
    "fractal_fill_3d_kernel",
    "validate_fractal_parameters",
    "octave_amplitudes",
    "amplitude_sum",
]
