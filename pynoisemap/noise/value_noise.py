"""
Value noise for pynoisemap.

Each lattice corner hashes through the permutation table to a value in [0, 1]
(``perm[...] / 255``). Two interpolation policies are available:

- LINEAR: quintic-faded bilinear (2-D) / trilinear (3-D) blend of the cell
  corners, 4 or 8 lookups.
- CUBIC: Catmull-Rom interpolation over the 4x4 (2-D) or 4x4x4 (3-D)
  neighbourhood, applied along z, then y, then x. Removes the grid-aligned
  facets of the linear policy at 16 or 64 lookups. Catmull-Rom overshoots its
  control points, so the result is clamped back to [0, 1].
"""

import taichi as ti

from .. import constants as cte
from .base import LatticeNoiseKernel, NoiseKind, ValueInterpolation
from .gradient_noise import fade, lerp

_LINEAR = int(ValueInterpolation.LINEAR)
_CUBIC = int(ValueInterpolation.CUBIC)


@ti.func
def lattice_value_2d(xi: ti.i32, yi: ti.i32, perm: ti.template()) -> cte.FLOAT_TYPE_TI:
    """Hashed value in [0, 1] of lattice point (xi, yi)"""
    h = perm[perm[xi & cte.PERMUTATION_MASK] + (yi & cte.PERMUTATION_MASK)]
    return ti.cast(h, cte.FLOAT_TYPE_TI) / 255.0


@ti.func
def lattice_value_3d(xi: ti.i32, yi: ti.i32, zi: ti.i32, perm: ti.template()) -> cte.FLOAT_TYPE_TI:
    """Hashed value in [0, 1] of lattice point (xi, yi, zi)"""
    h = perm[
        perm[perm[xi & cte.PERMUTATION_MASK] + (yi & cte.PERMUTATION_MASK)]
        + (zi & cte.PERMUTATION_MASK)
    ]
    return ti.cast(h, cte.FLOAT_TYPE_TI) / 255.0


@ti.func
def cubic(
    p0: cte.FLOAT_TYPE_TI,
    p1: cte.FLOAT_TYPE_TI,
    p2: cte.FLOAT_TYPE_TI,
    p3: cte.FLOAT_TYPE_TI,
    t: cte.FLOAT_TYPE_TI,
) -> cte.FLOAT_TYPE_TI:
    """Catmull-Rom interpolation between p1 (t = 0) and p2 (t = 1)"""
    return p1 + 0.5 * t * (
        p2 - p0 + t * (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3 + t * (3.0 * (p1 - p2) + p3 - p0))
    )


@ti.func
def _clamp01(v: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    return ti.min(ti.max(v, 0.0), 1.0)


@ti.func
def value_noise_linear_2d(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template()) -> cte.FLOAT_TYPE_TI:
    xi = ti.cast(ti.floor(x), ti.i32)
    yi = ti.cast(ti.floor(y), ti.i32)
    u = fade(x - ti.floor(x))
    v = fade(y - ti.floor(y))

    x1 = lerp(u, lattice_value_2d(xi, yi, perm), lattice_value_2d(xi + 1, yi, perm))
    x2 = lerp(u, lattice_value_2d(xi, yi + 1, perm), lattice_value_2d(xi + 1, yi + 1, perm))
    return lerp(v, x1, x2)


@ti.func
def value_noise_linear_3d(
    x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI, perm: ti.template()
) -> cte.FLOAT_TYPE_TI:
    xi = ti.cast(ti.floor(x), ti.i32)
    yi = ti.cast(ti.floor(y), ti.i32)
    zi = ti.cast(ti.floor(z), ti.i32)
    u = fade(x - ti.floor(x))
    v = fade(y - ti.floor(y))
    w = fade(z - ti.floor(z))

    near = lerp(
        v,
        lerp(u, lattice_value_3d(xi, yi, zi, perm), lattice_value_3d(xi + 1, yi, zi, perm)),
        lerp(u, lattice_value_3d(xi, yi + 1, zi, perm), lattice_value_3d(xi + 1, yi + 1, zi, perm)),
    )
    far = lerp(
        v,
        lerp(u, lattice_value_3d(xi, yi, zi + 1, perm), lattice_value_3d(xi + 1, yi, zi + 1, perm)),
        lerp(
            u,
            lattice_value_3d(xi, yi + 1, zi + 1, perm),
            lattice_value_3d(xi + 1, yi + 1, zi + 1, perm),
        ),
    )
    return lerp(w, near, far)


@ti.func
def value_noise_cubic_2d(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template()) -> cte.FLOAT_TYPE_TI:
    xi = ti.cast(ti.floor(x), ti.i32)
    yi = ti.cast(ti.floor(y), ti.i32)
    tx = x - ti.floor(x)
    ty = y - ti.floor(y)

    cols = ti.Vector([0.0, 0.0, 0.0, 0.0], dt=cte.FLOAT_TYPE_TI)
    for a in ti.static(range(4)):
        pts = ti.Vector([0.0, 0.0, 0.0, 0.0], dt=cte.FLOAT_TYPE_TI)
        for b in ti.static(range(4)):
            pts[b] = lattice_value_2d(xi + a - 1, yi + b - 1, perm)
        cols[a] = cubic(pts[0], pts[1], pts[2], pts[3], ty)
    return _clamp01(cubic(cols[0], cols[1], cols[2], cols[3], tx))


@ti.func
def value_noise_cubic_3d(
    x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, z: cte.FLOAT_TYPE_TI, perm: ti.template()
) -> cte.FLOAT_TYPE_TI:
    xi = ti.cast(ti.floor(x), ti.i32)
    yi = ti.cast(ti.floor(y), ti.i32)
    zi = ti.cast(ti.floor(z), ti.i32)
    tx = x - ti.floor(x)
    ty = y - ti.floor(y)
    tz = z - ti.floor(z)

    planes = ti.Vector([0.0, 0.0, 0.0, 0.0], dt=cte.FLOAT_TYPE_TI)
    for a in ti.static(range(4)):
        cols = ti.Vector([0.0, 0.0, 0.0, 0.0], dt=cte.FLOAT_TYPE_TI)
        for b in ti.static(range(4)):
            pts = ti.Vector([0.0, 0.0, 0.0, 0.0], dt=cte.FLOAT_TYPE_TI)
            for c in ti.static(range(4)):
                pts[c] = lattice_value_3d(xi + a - 1, yi + b - 1, zi + c - 1, perm)
            cols[b] = cubic(pts[0], pts[1], pts[2], pts[3], tz)
        planes[a] = cubic(cols[0], cols[1], cols[2], cols[3], ty)
    return _clamp01(cubic(planes[0], planes[1], planes[2], planes[3], tx))


@ti.func
def value_noise_2d(
    x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template(), policy: ti.template()
) -> cte.FLOAT_TYPE_TI:
    res = 0.0
    if ti.static(policy == _CUBIC):
        res = value_noise_cubic_2d(x, y, perm)
    else:
        res = value_noise_linear_2d(x, y, perm)
    return res


@ti.func
def value_noise_3d(
    x: cte.FLOAT_TYPE_TI,
    y: cte.FLOAT_TYPE_TI,
    z: cte.FLOAT_TYPE_TI,
    perm: ti.template(),
    policy: ti.template(),
) -> cte.FLOAT_TYPE_TI:
    res = 0.0
    if ti.static(policy == _CUBIC):
        res = value_noise_cubic_3d(x, y, z, perm)
    else:
        res = value_noise_linear_3d(x, y, z, perm)
    return res


@ti.kernel
def value_noise_points_kernel(
    points: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
    out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
    perm: ti.types.ndarray(dtype=cte.INT_TYPE_TI, ndim=1),
    dims: ti.template(),
    policy: ti.template(),
):
    """Evaluate value noise at a batch of (N, dims) points."""
    for n in range(out.shape[0]):
        if ti.static(dims == 3):
            out[n] = value_noise_3d(points[n, 0], points[n, 1], points[n, 2], perm, policy)
        elif ti.static(dims == 2):
            out[n] = value_noise_2d(points[n, 0], points[n, 1], perm, policy)
        else:
            out[n] = value_noise_2d(points[n, 0], 0.0, perm, policy)


class ValueNoise(LatticeNoiseKernel):
    """
    Hashed-lattice value noise in [0, 1].

    Args:
        seed: Seed of the permutation table
        interpolation: ValueInterpolation.CUBIC (default) or ValueInterpolation.LINEAR
    """

    kind = NoiseKind.VALUE
    native_range = (0.0, 1.0)

    def __init__(self, seed: int, interpolation=ValueInterpolation.CUBIC):
        super().__init__(seed)
        self.interpolation = ValueInterpolation.parse(interpolation)

    def _points_kernel(self, points, out, perm, dims):
        value_noise_points_kernel(points, out, perm, dims, int(self.interpolation))

    def __repr__(self):
        return f"ValueNoise(seed={self.seed}, interpolation={self.interpolation.name.lower()})"
