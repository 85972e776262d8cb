"""
pynoisemap: seeded coherent noise fields on 1-, 2- and 3-D lattices.

Subpackages:
- noise: permutation table and the gradient, simplex, value and white kernels
- fractal: octave compositor filling a field from a kernel
- field: NoiseField container with normalize / combine
- generator: NoiseParams and generation helpers
- cli: command line tools

Usage:
    import pynoisemap as pnm

    pnm.init("cpu")
    field = pnm.NoiseField(2, 256)
    pnm.fractal_fill(pnm.GradientNoise(seed=42), field, scale=32, octaves=5)
    field.normalize(0.0, 1.0)
"""

__version__ = "0.1.0"

from . import constants
from . import errors
from .runtime import init
from . import noise
from . import fractal
from . import field
from . import generator

from .noise import GradientNoise, SimplexNoise, ValueNoise, WhiteNoise, NoiseKind, ValueInterpolation
from .fractal import fractal_fill
from .field import NoiseField
from .generator import NoiseParams, NoiseGenerator, generate_field, generate_for_field, make_kernel

__all__ = [
    "__version__",
    "constants",
    "errors",
    "init",
    "noise",
    "fractal",
    "field",
    "generator",
    "GradientNoise",
    "SimplexNoise",
    "ValueNoise",
    "WhiteNoise",
    "NoiseKind",
    "ValueInterpolation",
    "fractal_fill",
    "NoiseField",
    "NoiseParams",
    "NoiseGenerator",
    "generate_field",
    "generate_for_field",
    "make_kernel",
]
