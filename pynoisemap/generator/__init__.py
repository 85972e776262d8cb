"""
Noise generation facade for pynoisemap.

Turns a NoiseParams description into a filled (and optionally normalised)
NoiseField.

Usage:
    import pynoisemap as pnm

    params = pnm.generator.NoiseParams(kind="value", seed=5, scale=32, octaves=4)
    field = pnm.generator.generate_field(2, 128, params, lower_bound=0, upper_bound=1)
"""

from .params import NoiseParams, random_seed
from .generate import make_kernel, generate_for_field, generate_field, NoiseGenerator

__all__ = [
    "NoiseParams",
    "random_seed",
    "make_kernel",
    "generate_for_field",
    "generate_field",
    "NoiseGenerator",
]
