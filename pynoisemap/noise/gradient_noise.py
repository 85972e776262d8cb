"""
Gradient (Perlin) noise for pynoisemap.

Classic improved Perlin noise: the lattice cell of the sample is found by
flooring, each corner hashes through the permutation table to one of the 12
edge directions (16 hash values, four duplicated), and the corner dot products
are blended with the quintic fade curve, bilinearly in 2-D and trilinearly in
3-D. Output is approximately in [-1, 1].
"""

import taichi as ti

from .. import constants as cte
from .base import LatticeNoiseKernel, NoiseKind


@ti.func
def fade(t: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@ti.func
def lerp(t: cte.FLOAT_TYPE_TI, a: cte.FLOAT_TYPE_TI, b: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


@ti.func
def grad_2d(hash_val: ti.i32, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """Dot product of the hashed gradient with (x, y)"""
    h = hash_val & 15
    u = ti.select(h < 8, x, y)
    v = ti.select(h < 4, y, ti.select((h == 12) | (h == 14), x, 0.0))
    return ti.select((h & 1) == 0, u, -u) + ti.select((h & 2) == 0, v, -v)


@ti.func
def grad_3d(
    hash_val: ti.i32, x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI
) -> cte.FLOAT_TYPE_TI:
    """Dot product of the hashed gradient with (x, y, z)"""
    h = hash_val & 15
    u = ti.select(h < 8, x, y)
    v = ti.select(h < 4, y, ti.select((h == 12) | (h == 14), x, z))
    return ti.select((h & 1) == 0, u, -u) + ti.select((h & 2) == 0, v, -v)


@ti.func
def gradient_noise_2d(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template()) -> cte.FLOAT_TYPE_TI:
    """
    Gradient noise at (x, y).

    Args:
        x, y: Coordinates for noise evaluation
        perm: 512-element permutation table

    Returns:
        Noise value in range approximately [-1, 1]
    """
    # Unit grid cell containing the point
    X = ti.cast(ti.floor(x), ti.i32) & cte.PERMUTATION_MASK
    Y = ti.cast(ti.floor(y), ti.i32) & cte.PERMUTATION_MASK

    # Relative position inside the cell
    xf = x - ti.floor(x)
    yf = y - ti.floor(y)

    u = fade(xf)
    v = fade(yf)

    aa = perm[X + perm[Y]]
    ab = perm[X + perm[Y + 1]]
    ba = perm[X + 1 + perm[Y]]
    bb = perm[X + 1 + perm[Y + 1]]

    x1 = lerp(u, grad_2d(aa, xf, yf), grad_2d(ba, xf - 1.0, yf))
    x2 = lerp(u, grad_2d(ab, xf, yf - 1.0), grad_2d(bb, xf - 1.0, yf - 1.0))
    return lerp(v, x1, x2)


@ti.func
def gradient_noise_3d(
    x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI, perm: ti.template()
) -> cte.FLOAT_TYPE_TI:
    """Gradient noise at (x, y, z), approximately in [-1, 1]."""
    X = ti.cast(ti.floor(x), ti.i32) & cte.PERMUTATION_MASK
    Y = ti.cast(ti.floor(y), ti.i32) & cte.PERMUTATION_MASK
    Z = ti.cast(ti.floor(z), ti.i32) & cte.PERMUTATION_MASK

    xf = x - ti.floor(x)
    yf = y - ti.floor(y)
    zf = z - ti.floor(z)

    u = fade(xf)
    v = fade(yf)
    w = fade(zf)

    # Hash the 8 cube corners
    A = perm[X] + Y
    AA = perm[A] + Z
    AB = perm[A + 1] + Z
    B = perm[X + 1] + Y
    BA = perm[B] + Z
    BB = perm[B + 1] + Z

    near = lerp(
        v,
        lerp(u, grad_3d(perm[AA], xf, yf, zf), grad_3d(perm[BA], xf - 1.0, yf, zf)),
        lerp(u, grad_3d(perm[AB], xf, yf - 1.0, zf), grad_3d(perm[BB], xf - 1.0, yf - 1.0, zf)),
    )
    far = lerp(
        v,
        lerp(u, grad_3d(perm[AA + 1], xf, yf, zf - 1.0), grad_3d(perm[BA + 1], xf - 1.0, yf, zf - 1.0)),
        lerp(
            u,
            grad_3d(perm[AB + 1], xf, yf - 1.0, zf - 1.0),
            grad_3d(perm[BB + 1], xf - 1.0, yf - 1.0, zf - 1.0),
        ),
    )
    return lerp(w, near, far)


@ti.kernel
def gradient_noise_points_kernel(
    points: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
    out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
    perm: ti.types.ndarray(dtype=cte.INT_TYPE_TI, ndim=1),
    dims: ti.template(),
):
    """
    Evaluate gradient noise at a batch of points.

    Args:
        points: (N, dims) coordinates
        out: N output values
        perm: 512-element permutation table
        dims: Number of coordinates per point (1 samples at y = 0)
    """
    for n in range(out.shape[0]):
        if ti.static(dims == 3):
            out[n] = gradient_noise_3d(points[n, 0], points[n, 1], points[n, 2], perm)
        elif ti.static(dims == 2):
            out[n] = gradient_noise_2d(points[n, 0], points[n, 1], perm)
        else:
            out[n] = gradient_noise_2d(points[n, 0], 0.0, perm)


class GradientNoise(LatticeNoiseKernel):
    """
    Improved Perlin gradient noise.

    Example:
        perlin = GradientNoise(seed=42)
        perlin.noise(0.3, 1.7)          # 2-D sample
        perlin.noise(0.3, 1.7, 4.2)     # 3-D sample
    """

    kind = NoiseKind.GRADIENT

    def _points_kernel(self, points, out, perm, dims):
        gradient_noise_points_kernel(points, out, perm, dims)
