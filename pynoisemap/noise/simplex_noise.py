"""
Simplex noise for pynoisemap.

2-D simplex noise: the input is skewed onto a triangular lattice, the three
corners of the containing triangle each contribute ``t^4 * (g . d)`` with a
radial falloff ``t = 0.5 - |d|^2``, and the sum is scaled by 70. Gradients are
picked from an 8-direction set by ``perm[...] % 8``.

The 3-D variant follows the same scheme on a tetrahedral lattice with 12 edge
gradients, a 0.6 falloff radius and a scale of 32.
"""

import math

import taichi as ti

from .. import constants as cte
from .base import LatticeNoiseKernel, NoiseKind

# Skew / unskew factors
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0


@ti.func
def grad8_dot(gi: ti.i32, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """
    Dot product with one of the 8 simplex gradients:
    (1,1) (-1,1) (1,-1) (-1,-1) (1,0) (-1,0) (0,1) (0,-1)
    """
    gx = 0.0
    gy = 0.0
    if gi < 4:
        gx = ti.select((gi & 1) == 0, 1.0, -1.0)
        gy = ti.select((gi & 2) == 0, 1.0, -1.0)
    elif gi == 4:
        gx = 1.0
    elif gi == 5:
        gx = -1.0
    elif gi == 6:
        gy = 1.0
    else:
        gy = -1.0
    return gx * x + gy * y


@ti.func
def grad12_dot(
    gi: ti.i32, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI
) -> cte.FLOAT_TYPE_TI:
    """Dot product with one of the 12 cube-edge gradients"""
    a = ti.select((gi & 1) == 0, 1.0, -1.0)
    b = ti.select((gi & 2) == 0, 1.0, -1.0)
    res = 0.0
    if gi < 4:
        res = a * x + b * y
    elif gi < 8:
        res = a * x + b * z
    else:
        res = a * y + b * z
    return res


@ti.func
def _corner_2d(gi: ti.i32, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    t = 0.5 - x * x - y * y
    n = 0.0
    if t >= 0.0:
        t *= t
        n = t * t * grad8_dot(gi, x, y)
    return n


@ti.func
def _corner_3d(
    gi: ti.i32, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI
) -> cte.FLOAT_TYPE_TI:
    t = 0.6 - x * x - y * y - z * z
    n = 0.0
    if t >= 0.0:
        t *= t
        n = t * t * grad12_dot(gi, x, y, z)
    return n


@ti.func
def simplex_noise_2d(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template()) -> cte.FLOAT_TYPE_TI:
    """
    Simplex noise at (x, y).

    Args:
        x, y: Coordinates for noise evaluation
        perm: 512-element permutation table

    Returns:
        Noise value in range approximately [-1, 1]
    """
    # Skew to find the simplex cell
    s = (x + y) * F2
    i = ti.cast(ti.floor(x + s), ti.i32)
    j = ti.cast(ti.floor(y + s), ti.i32)

    # Unskew the cell origin back to (x, y) space
    t = ti.cast(i + j, cte.FLOAT_TYPE_TI) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower triangle when x0 > y0, upper otherwise
    i1 = 0
    j1 = 1
    if x0 > y0:
        i1 = 1
        j1 = 0

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    gi0 = perm[(i + perm[j & cte.PERMUTATION_MASK]) & cte.PERMUTATION_MASK] % 8
    gi1 = perm[(i + i1 + perm[(j + j1) & cte.PERMUTATION_MASK]) & cte.PERMUTATION_MASK] % 8
    gi2 = perm[(i + 1 + perm[(j + 1) & cte.PERMUTATION_MASK]) & cte.PERMUTATION_MASK] % 8

    return 70.0 * (_corner_2d(gi0, x0, y0) + _corner_2d(gi1, x1, y1) + _corner_2d(gi2, x2, y2))


@ti.func
def simplex_noise_3d(
    x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI, perm: ti.template()
) -> cte.FLOAT_TYPE_TI:
    """Simplex noise at (x, y, z), approximately in [-1, 1]."""
    s = (x + y + z) * F3
    i = ti.cast(ti.floor(x + s), ti.i32)
    j = ti.cast(ti.floor(y + s), ti.i32)
    k = ti.cast(ti.floor(z + s), ti.i32)

    t = ti.cast(i + j + k, cte.FLOAT_TYPE_TI) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Offsets of the second and third tetrahedron corners
    i1 = 0
    j1 = 0
    k1 = 0
    i2 = 0
    j2 = 0
    k2 = 0
    if x0 >= y0:
        if y0 >= z0:
            i1 = 1
            i2 = 1
            j2 = 1
        elif x0 >= z0:
            i1 = 1
            i2 = 1
            k2 = 1
        else:
            k1 = 1
            i2 = 1
            k2 = 1
    else:
        if y0 < z0:
            k1 = 1
            j2 = 1
            k2 = 1
        elif x0 < z0:
            j1 = 1
            j2 = 1
            k2 = 1
        else:
            j1 = 1
            i2 = 1
            j2 = 1

    x1 = x0 - i1 + G3
    y1 = y0 - j1 + G3
    z1 = z0 - k1 + G3
    x2 = x0 - i2 + 2.0 * G3
    y2 = y0 - j2 + 2.0 * G3
    z2 = z0 - k2 + 2.0 * G3
    x3 = x0 - 1.0 + 3.0 * G3
    y3 = y0 - 1.0 + 3.0 * G3
    z3 = z0 - 1.0 + 3.0 * G3

    ii = i & cte.PERMUTATION_MASK
    jj = j & cte.PERMUTATION_MASK
    kk = k & cte.PERMUTATION_MASK
    gi0 = perm[ii + perm[jj + perm[kk]]] % 12
    gi1 = perm[ii + i1 + perm[jj + j1 + perm[kk + k1]]] % 12
    gi2 = perm[ii + i2 + perm[jj + j2 + perm[kk + k2]]] % 12
    gi3 = perm[ii + 1 + perm[jj + 1 + perm[kk + 1]]] % 12

    return 32.0 * (
        _corner_3d(gi0, x0, y0, z0)
        + _corner_3d(gi1, x1, y1, z1)
        + _corner_3d(gi2, x2, y2, z2)
        + _corner_3d(gi3, x3, y3, z3)
    )


@ti.kernel
def simplex_noise_points_kernel(
    points: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
    out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
    perm: ti.types.ndarray(dtype=cte.INT_TYPE_TI, ndim=1),
    dims: ti.template(),
):
    """Evaluate simplex noise at a batch of (N, dims) points."""
    for n in range(out.shape[0]):
        if ti.static(dims == 3):
            out[n] = simplex_noise_3d(points[n, 0], points[n, 1], points[n, 2], perm)
        elif ti.static(dims == 2):
            out[n] = simplex_noise_2d(points[n, 0], points[n, 1], perm)
        else:
            out[n] = simplex_noise_2d(points[n, 0], 0.0, perm)


class SimplexNoise(LatticeNoiseKernel):
    """
    Simplex noise (2-D, with a 3-D extension).

    Example:
        simplex = SimplexNoise(seed=7)
        simplex.noise(12.5, -3.25)
    """

    kind = NoiseKind.SIMPLEX

    def _points_kernel(self, points, out, perm, dims):
        simplex_noise_points_kernel(points, out, perm, dims)
