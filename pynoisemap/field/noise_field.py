"""
NoiseField: dense 1-, 2- or 3-D container of noise values.

A field has a fixed rank and the same extent on every axis. Values are written
once by a fractal fill and can then be rescaled (``normalize``) or blended with
another field of the same shape (``combine``) any number of times, in place.
"""

import numpy as np

from .. import constants as cte
from ..errors import (
    InvalidBoundsError,
    InvalidDimensionError,
    InvalidSizeError,
    ShapeMismatchError,
)


def _check_rank_and_size(rank, size):
    if isinstance(rank, bool) or not isinstance(rank, (int, np.integer)):
        raise InvalidDimensionError(f"Invalid map dimension: {rank!r}. Dimension must be 1, 2 or 3.")
    if not 1 <= rank <= cte.MAX_RANK:
        raise InvalidDimensionError(f"Invalid map dimension: {rank}. Dimension must be 1, 2 or 3.")
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidSizeError(f"Invalid map size: {size!r}. Map size must be an integer.")
    if size < cte.MIN_MAP_SIZE:
        raise InvalidSizeError(
            f"Invalid map size: {size}. Map size must be {cte.MIN_MAP_SIZE} or more."
        )


class NoiseField:
    """
    Dense noise map of rank 1, 2 or 3 with ``size`` cells per axis.

    Args:
        rank: Number of axes (1, 2 or 3)
        size: Extent of every axis (>= 32)

    Raises:
        InvalidDimensionError: If rank is not 1, 2 or 3
        InvalidSizeError: If size is below 32

    Example:
        field = NoiseField(2, 256)
        pnm.fractal.fractal_fill(pnm.noise.GradientNoise(1), field)
        field.normalize(0.0, 255.0)
    """

    def __init__(self, rank: int, size: int):
        _check_rank_and_size(rank, size)
        self._rank = int(rank)
        self._size = int(size)
        self._values = np.zeros((self._size,) * self._rank, dtype=cte.FLOAT_TYPE_NP)

    @classmethod
    def from_array(cls, array) -> "NoiseField":
        """
        Build a field holding a copy of an existing 1-, 2- or 3-D array.

        Raises:
            InvalidDimensionError: If the array is not 1-3 dimensional or its axes differ
            InvalidSizeError: If its extent is below 32
        """
        array = np.asarray(array, dtype=cte.FLOAT_TYPE_NP)
        if array.ndim < 1 or array.ndim > cte.MAX_RANK:
            raise InvalidDimensionError(
                f"Invalid map dimension: {array.ndim}. Dimension must be 1, 2 or 3."
            )
        if len(set(array.shape)) != 1:
            raise InvalidDimensionError(
                f"Every axis of a noise map must have the same extent, got shape {array.shape}"
            )
        field = cls(array.ndim, array.shape[0])
        field._values[...] = array
        return field

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def size(self) -> int:
        return self._size

    @property
    def shape(self) -> tuple:
        return self._values.shape

    @property
    def values(self) -> np.ndarray:
        """The backing array itself (writes go straight into the field)."""
        return self._values

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the values."""
        return self._values.copy()

    def copy(self) -> "NoiseField":
        return NoiseField.from_array(self._values)

    def min(self) -> float:
        return float(self._values.min())

    def max(self) -> float:
        return float(self._values.max())

    def __getitem__(self, idx):
        return self._values[idx]

    def __repr__(self):
        return f"NoiseField(rank={self._rank}, size={self._size})"

    def normalize(self, lower_bound: float, upper_bound: float):
        """
        Affinely rescale the values onto [lower_bound, upper_bound].

        The current minimum maps to lower_bound and the maximum to upper_bound.
        A constant field is filled with lower_bound.

        Raises:
            InvalidBoundsError: If lower_bound > upper_bound
        """
        if lower_bound > upper_bound:
            raise InvalidBoundsError(
                f"Lower bound ({lower_bound}) must not exceed upper bound ({upper_bound})."
            )

        vmin = self._values.min()
        vmax = self._values.max()

        if vmin == vmax:
            self._values.fill(lower_bound)
            return

        # lower + (v - min) / (max - min) * (upper - lower), in place
        self._values -= vmin
        self._values /= vmax - vmin
        self._values *= upper_bound - lower_bound
        self._values += lower_bound

    def combine(self, other: "NoiseField", weight: float):
        """
        Add ``other * weight`` to this field, element by element.

        The result is not renormalised; call ``normalize`` afterwards if bounded
        output is needed. Negative weights subtract.

        Raises:
            ShapeMismatchError: If rank or extent differ
        """
        if not isinstance(other, NoiseField):
            raise TypeError(f"Can only combine with a NoiseField, got {type(other).__name__}")
        if other.rank != self._rank or other.size != self._size:
            raise ShapeMismatchError(
                "Noise maps must have the same dimensions and size to combine: "
                f"{self.rank}D/{self.size} vs {other.rank}D/{other.size}"
            )
        self._values += other.values * weight
