"""
Fractal octave compositor for pynoisemap.

Fills every lattice coordinate of a NoiseField with a fractal Brownian motion
sum of a noise kernel:

    value(c) = sum_o kernel(c * f_o) * a_o
    f_0 = 1 / scale,  f_{o+1} = f_o * lacunarity
    a_0 = 1,          a_{o+1} = a_o * persistence

By default the sum is divided by the total absolute amplitude so the result
stays in the kernel's native range whatever the octave count or the sign of
the persistence. The raw, unbounded sum is
available with ``normalize_amplitude=False``.

Each coordinate only reads the shared permutation table, so the outermost loop
of every fill kernel is parallelised by taichi. White noise has no lattice and
is composited on the numpy side from the kernel's seeded generator.
"""

import math

import numpy as np
import taichi as ti

from .. import constants as cte
from .. import runtime
from ..errors import InvalidParameterError
from ..noise.base import NoiseKernel, NoiseKind, ValueInterpolation
from ..noise.gradient_noise import gradient_noise_2d, gradient_noise_3d
from ..noise.simplex_noise import simplex_noise_2d, simplex_noise_3d
from ..noise.value_noise import value_noise_2d, value_noise_3d

_GRADIENT = int(NoiseKind.GRADIENT)
_SIMPLEX = int(NoiseKind.SIMPLEX)
_VALUE = int(NoiseKind.VALUE)


@ti.func
def sample_kernel(
    kind: ti.template(),
    policy: ti.template(),
    rank: ti.template(),
    x: cte.FLOAT_TYPE_TI,
    y: cte.FLOAT_TYPE_TI,
    z: cte.FLOAT_TYPE_TI,
    perm: ti.template(),
) -> cte.FLOAT_TYPE_TI:
    """Evaluate the kernel selected at compile time by ``kind``."""
    n = 0.0
    if ti.static(kind == _GRADIENT):
        if ti.static(rank == 3):
            n = gradient_noise_3d(x, y, z, perm)
        else:
            n = gradient_noise_2d(x, y, perm)
    elif ti.static(kind == _SIMPLEX):
        if ti.static(rank == 3):
            n = simplex_noise_3d(x, y, z, perm)
        else:
            n = simplex_noise_2d(x, y, perm)
    else:
        if ti.static(rank == 3):
            n = value_noise_3d(x, y, z, perm, policy)
        else:
            n = value_noise_2d(x, y, perm, policy)
    return n


@ti.func
def fbm(
    kind: ti.template(),
    policy: ti.template(),
    rank: ti.template(),
    x: cte.FLOAT_TYPE_TI,
    y: cte.FLOAT_TYPE_TI,
    z: cte.FLOAT_TYPE_TI,
    perm: ti.template(),
    frequency: cte.FLOAT_TYPE_TI,
    octaves: ti.i32,
    lacunarity: cte.FLOAT_TYPE_TI,
    persistence: cte.FLOAT_TYPE_TI,
    amp_total: cte.FLOAT_TYPE_TI,
) -> cte.FLOAT_TYPE_TI:
    """Octave sum at one lattice coordinate, divided by ``amp_total``."""
    total = 0.0
    freq = frequency
    amp = 1.0
    for _ in range(octaves):
        total += sample_kernel(kind, policy, rank, x * freq, y * freq, z * freq, perm) * amp
        freq *= lacunarity
        amp *= persistence
    return total / amp_total


@ti.kernel
def fractal_fill_1d_kernel(
    out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
    perm: ti.types.ndarray(dtype=cte.INT_TYPE_TI, ndim=1),
    kind: ti.template(),
    policy: ti.template(),
    frequency: cte.FLOAT_TYPE_TI,
    octaves: ti.i32,
    lacunarity: cte.FLOAT_TYPE_TI,
    persistence: cte.FLOAT_TYPE_TI,
    amp_total: cte.FLOAT_TYPE_TI,
):
    """Fill a 1-D field, sampling the kernel along y = 0."""
    for i in range(out.shape[0]):
        out[i] = fbm(
            kind, policy, 1,
            ti.cast(i, cte.FLOAT_TYPE_TI), 0.0, 0.0,
            perm, frequency, octaves, lacunarity, persistence, amp_total,
        )


@ti.kernel
def fractal_fill_2d_kernel(
    out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2),
    perm: ti.types.ndarray(dtype=cte.INT_TYPE_TI, ndim=1),
    kind: ti.template(),
    policy: ti.template(),
    frequency: cte.FLOAT_TYPE_TI,
    octaves: ti.i32,
    lacunarity: cte.FLOAT_TYPE_TI,
    persistence: cte.FLOAT_TYPE_TI,
    amp_total: cte.FLOAT_TYPE_TI,
):
    """Fill a 2-D field; out[i, j] samples the kernel at (i, j)."""
    for i, j in ti.ndrange(out.shape[0], out.shape[1]):
        out[i, j] = fbm(
            kind, policy, 2,
            ti.cast(i, cte.FLOAT_TYPE_TI), ti.cast(j, cte.FLOAT_TYPE_TI), 0.0,
            perm, frequency, octaves, lacunarity, persistence, amp_total,
        )


@ti.kernel
def fractal_fill_3d_kernel(
    out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=3),
    perm: ti.types.ndarray(dtype=cte.INT_TYPE_TI, ndim=1),
    kind: ti.template(),
    policy: ti.template(),
    frequency: cte.FLOAT_TYPE_TI,
    octaves: ti.i32,
    lacunarity: cte.FLOAT_TYPE_TI,
    persistence: cte.FLOAT_TYPE_TI,
    amp_total: cte.FLOAT_TYPE_TI,
):
    """Fill a 3-D field; out[i, j, k] samples the kernel at (i, j, k)."""
    for i, j, k in ti.ndrange(out.shape[0], out.shape[1], out.shape[2]):
        out[i, j, k] = fbm(
            kind, policy, 3,
            ti.cast(i, cte.FLOAT_TYPE_TI), ti.cast(j, cte.FLOAT_TYPE_TI), ti.cast(k, cte.FLOAT_TYPE_TI),
            perm, frequency, octaves, lacunarity, persistence, amp_total,
        )


_FILL_KERNELS = {
    1: fractal_fill_1d_kernel,
    2: fractal_fill_2d_kernel,
    3: fractal_fill_3d_kernel,
}


def validate_fractal_parameters(scale, octaves, lacunarity, persistence):
    """
    Check fractal parameters.

    Raises:
        InvalidParameterError: If scale or lacunarity is not a positive finite
            number, octaves is not an integer >= 1, or persistence is not finite
    """
    if isinstance(octaves, bool) or not isinstance(octaves, (int, np.integer)):
        raise InvalidParameterError(f"octaves must be an integer, got {octaves!r}")
    if octaves < 1:
        raise InvalidParameterError(f"octaves must be >= 1, got {octaves}")
    for name, value in (("scale", scale), ("lacunarity", lacunarity)):
        if not math.isfinite(value) or value <= 0:
            raise InvalidParameterError(f"{name} must be a positive finite number, got {value}")
    if not math.isfinite(persistence):
        raise InvalidParameterError(f"persistence must be finite, got {persistence}")


def octave_amplitudes(octaves: int, persistence: float) -> np.ndarray:
    """Amplitude of every octave: 1, p, p*p, ... accumulated in octave order."""
    amps = np.empty(octaves, dtype=cte.FLOAT_TYPE_NP)
    amp = 1.0
    for o in range(octaves):
        amps[o] = amp
        amp *= persistence
    return amps


def amplitude_sum(octaves: int, persistence: float, normalize_amplitude: bool = True) -> float:
    """
    Divisor applied to the octave sum.

    Under normalisation this is the sum of absolute amplitudes, so a negative
    persistence cannot cancel the divisor and the result stays in the kernel's
    native range. It is at least 1 since the first amplitude is 1.
    """
    if not normalize_amplitude:
        return 1.0
    total = 0.0
    for amp in octave_amplitudes(octaves, persistence):
        total += abs(amp)
    return total


def fractal_fill(
    kernel: NoiseKernel,
    field,
    scale: float = cte.DEFAULT_SCALE,
    octaves: int = cte.DEFAULT_OCTAVES,
    lacunarity: float = cte.DEFAULT_LACUNARITY,
    persistence: float = cte.DEFAULT_PERSISTENCE,
    normalize_amplitude: bool = True,
):
    """
    Fill a NoiseField in place with fractal noise from ``kernel``.

    Args:
        kernel: GradientNoise, SimplexNoise, ValueNoise or WhiteNoise instance
        field: NoiseField to overwrite
        scale: Frequency divisor of the first octave (default: 16)
        octaves: Number of layered octaves, >= 1 (default: 3)
        lacunarity: Frequency multiplier between octaves (default: 2.0)
        persistence: Amplitude multiplier between octaves (default: 0.5)
        normalize_amplitude: Divide by the total absolute amplitude so values stay in the
                             kernel's native range (default: True)

    Raises:
        InvalidParameterError: If the fractal parameters are invalid
        TypeError: If kernel is not a noise kernel

    Example:
        field = NoiseField(2, 128)
        fractal_fill(GradientNoise(42), field, scale=32, octaves=5)
        field.normalize(0.0, 1.0)
    """
    if not isinstance(kernel, NoiseKernel):
        raise TypeError(f"Expected a noise kernel, got {type(kernel).__name__}")
    validate_fractal_parameters(scale, octaves, lacunarity, persistence)
    norm = amplitude_sum(octaves, persistence, normalize_amplitude)

    if kernel.kind == NoiseKind.WHITE:
        _white_fill(kernel, field, octaves, persistence, norm)
        return

    runtime.ensure_initialized()
    policy = int(getattr(kernel, "interpolation", ValueInterpolation.CUBIC))
    _FILL_KERNELS[field.rank](
        field.values,
        kernel.permutation.data,
        int(kernel.kind),
        policy,
        1.0 / float(scale),
        int(octaves),
        float(lacunarity),
        float(persistence),
        norm,
    )


def _white_fill(kernel, field, octaves, persistence, norm):
    # frequency is meaningless without a lattice: one independent layer per octave,
    # drawn in order from a generator restarted at the kernel seed
    rng = kernel.fresh_generator()
    total = np.zeros(field.shape, dtype=cte.FLOAT_TYPE_NP)
    for amp in octave_amplitudes(octaves, persistence):
        total += rng.uniform(-1.0, 1.0, size=field.shape) * amp
    field.values[...] = total / norm
