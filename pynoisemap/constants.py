"""
Global constants for pynoisemap.

Numeric types shared by the taichi kernels and the numpy side, the size of the
permutation table, field limits and the default fractal parameters.
"""

import numpy as np
import taichi as ti

# Floating point precision used by every kernel and by NoiseField storage
FLOAT_TYPE_TI = ti.f64
FLOAT_TYPE_NP = np.float64

# Integer type of the permutation table
INT_TYPE_TI = ti.i32
INT_TYPE_NP = np.int32

# Permutation table: 256 shuffled values stored twice
PERMUTATION_SIZE = 256
PERMUTATION_MASK = PERMUTATION_SIZE - 1

# NoiseField limits
MIN_MAP_SIZE = 32
MAX_RANK = 3

# Default fractal parameters
DEFAULT_SCALE = 16.0
DEFAULT_OCTAVES = 3
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERSISTENCE = 0.5

# Default normalisation bounds of the generator facade
DEFAULT_LOWER_BOUND = 0.0
DEFAULT_UPPER_BOUND = 128.0

# Environment variable selecting the taichi backend
ARCH_ENV_VAR = "PYNOISEMAP_ARCH"
