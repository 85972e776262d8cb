"""
Noise generation entry points for pynoisemap.

Maps a NoiseParams object to its kernel through the closed NoiseKind tag and
runs the fractal fill, optionally followed by a normalisation onto
[lower_bound, upper_bound].
"""

from .. import constants as cte
from ..errors import InvalidBoundsError, InvalidParameterError
from ..field import NoiseField
from ..fractal import fractal_fill
from ..noise import GradientNoise, NoiseKind, SimplexNoise, ValueNoise, WhiteNoise
from .params import NoiseParams


def make_kernel(params: NoiseParams):
    """
    Build the kernel described by ``params``.

    Returns:
        GradientNoise, SimplexNoise, ValueNoise or WhiteNoise seeded with params.seed
    """
    if params.kind == NoiseKind.GRADIENT:
        return GradientNoise(params.seed)
    if params.kind == NoiseKind.SIMPLEX:
        return SimplexNoise(params.seed)
    if params.kind == NoiseKind.VALUE:
        return ValueNoise(params.seed, interpolation=params.interpolation)
    return WhiteNoise(params.seed)


def _check_bounds(lower_bound, upper_bound):
    if (lower_bound is None) != (upper_bound is None):
        raise InvalidBoundsError("Both lower_bound and upper_bound must be given, or neither.")
    if lower_bound is not None and lower_bound > upper_bound:
        raise InvalidBoundsError(
            f"Lower bound ({lower_bound}) cannot be greater than upper bound ({upper_bound})."
        )


def generate_for_field(field: NoiseField, params: NoiseParams, lower_bound=None, upper_bound=None):
    """
    Fill ``field`` with the noise described by ``params``.

    Args:
        field: NoiseField to overwrite
        params: NoiseParams of the fill
        lower_bound, upper_bound: Optional normalisation range, both or neither

    Returns:
        NoiseField: the filled field

    Raises:
        InvalidBoundsError: If only one bound is given or lower_bound > upper_bound
    """
    if params is None:
        raise InvalidParameterError("Noise parameters cannot be None.")
    _check_bounds(lower_bound, upper_bound)

    kernel = make_kernel(params)
    fractal_fill(
        kernel,
        field,
        scale=params.scale,
        octaves=params.octaves,
        lacunarity=params.lacunarity,
        persistence=params.persistence,
        normalize_amplitude=params.normalize_amplitude,
    )
    if lower_bound is not None:
        field.normalize(lower_bound, upper_bound)
    return field


def generate_field(rank: int, size: int, params: NoiseParams, lower_bound=None, upper_bound=None):
    """Create a NoiseField of the given rank and size and fill it."""
    _check_bounds(lower_bound, upper_bound)
    field = NoiseField(rank, size)
    return generate_for_field(field, params, lower_bound, upper_bound)


class NoiseGenerator:
    """
    Generator holding default parameters and output bounds.

    Every ``generate`` call fills the field and normalises it onto the
    generator's bounds (or the bounds passed to the call).

    Args:
        default_params: NoiseParams used when a call does not pass its own
        lower_bound: Default lower bound (default: 0)
        upper_bound: Default upper bound (default: 128)

    Example:
        gen = NoiseGenerator(NoiseParams(kind="simplex", seed=9))
        field = gen.generate(NoiseField(2, 64))
    """

    def __init__(
        self,
        default_params: NoiseParams = None,
        lower_bound: float = cte.DEFAULT_LOWER_BOUND,
        upper_bound: float = cte.DEFAULT_UPPER_BOUND,
    ):
        _check_bounds(lower_bound, upper_bound)
        self.default_params = default_params
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def generate(self, field: NoiseField, params: NoiseParams = None, lower_bound=None, upper_bound=None):
        """
        Fill and normalise ``field``.

        Raises:
            InvalidParameterError: If neither params nor default_params is set
            InvalidBoundsError: If the bounds are inconsistent
        """
        params = params if params is not None else self.default_params
        if params is None:
            raise InvalidParameterError("Default noise parameters are not set.")
        if lower_bound is None and upper_bound is None:
            lower_bound, upper_bound = self.lower_bound, self.upper_bound
        return generate_for_field(field, params, lower_bound, upper_bound)
