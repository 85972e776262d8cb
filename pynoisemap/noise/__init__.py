"""
Noise kernels for pynoisemap.

Provides the seeded permutation table shared by the lattice kernels and the
four noise kernels. Each kernel is built from a seed and evaluated at 1-, 2- or
3-D coordinates, either one point at a time or in batches through taichi.

Noise Types:
- Gradient Noise: improved Perlin noise, approximately [-1, 1]
- Simplex Noise: 2-D simplex noise (3-D extension), approximately [-1, 1]
- Value Noise: hashed lattice values, linear or Catmull-Rom cubic, [0, 1]
- White Noise: independent uniform draws, [-1, 1)

Usage:
    import pynoisemap as pnm

    perlin = pnm.noise.GradientNoise(seed=42)
    v = perlin.noise(1.25, 3.5)

    value = pnm.noise.ValueNoise(seed=42, interpolation="linear")
    values = value.noise_many(np.random.rand(1000, 3) * 10)
"""

from .permutation import PermutationTable, fisher_yates_permutation, seeded_generator
from .base import NoiseKind, ValueInterpolation, NoiseKernel, LatticeNoiseKernel
from .gradient_noise import GradientNoise, gradient_noise_points_kernel
from .simplex_noise import SimplexNoise, simplex_noise_points_kernel
from .value_noise import ValueNoise, value_noise_points_kernel
from .white_noise import WhiteNoise

__all__ = [
    "PermutationTable", "fisher_yates_permutation", "seeded_generator",
    "NoiseKind", "ValueInterpolation", "NoiseKernel", "LatticeNoiseKernel",
    "GradientNoise", "gradient_noise_points_kernel",
    "SimplexNoise", "simplex_noise_points_kernel",
    "ValueNoise", "value_noise_points_kernel",
    "WhiteNoise",
]
