"""
Noise field container for pynoisemap.

Provides NoiseField, the dense 1-, 2- or 3-D value store filled by the fractal
compositor, with in-place range normalisation and weighted combination.
"""

from .noise_field import NoiseField

__all__ = ["NoiseField"]
