"""
Exceptions raised by pynoisemap.

All errors are precondition violations detected before any work is done. They
derive from ValueError so callers can catch them generically.
"""


class NoiseMapError(ValueError):
    """Base class for every pynoisemap error."""


class InvalidDimensionError(NoiseMapError):
    """Field rank outside {1, 2, 3} or a non-cubic array."""


class InvalidSizeError(NoiseMapError):
    """Field extent below the minimum map size."""


class InvalidBoundsError(NoiseMapError):
    """Lower bound greater than upper bound."""


class ShapeMismatchError(NoiseMapError):
    """Two fields with different rank or extent."""


class UnsupportedInputError(NoiseMapError):
    """Coordinates outside the rank a noise kernel can evaluate."""


class InvalidParameterError(NoiseMapError):
    """Scale, octaves, lacunarity or persistence out of their domain."""


__all__ = [
    "NoiseMapError",
    "InvalidDimensionError",
    "InvalidSizeError",
    "InvalidBoundsError",
    "ShapeMismatchError",
    "UnsupportedInputError",
    "InvalidParameterError",
]
