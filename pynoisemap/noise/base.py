"""
Common interface of the noise kernels.

A kernel is built from a seed and evaluates a scalar at 1-, 2- or 3-D
coordinates. The set of kernels is closed and tagged by ``NoiseKind``; the
fractal compositor dispatches on that tag at taichi compile time.
"""

import enum

import numpy as np

from .. import constants as cte
from .. import runtime
from ..errors import UnsupportedInputError
from .permutation import PermutationTable


class NoiseKind(enum.IntEnum):
    """Closed set of noise kernels."""

    GRADIENT = 0
    SIMPLEX = 1
    VALUE = 2
    WHITE = 3

    @classmethod
    def parse(cls, value):
        """Accept a NoiseKind, its integer tag, or its case-insensitive name."""
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown noise kind '{value}'. Expected one of "
                    f"{[k.name.lower() for k in cls]}"
                )
        return cls(value)


class ValueInterpolation(enum.IntEnum):
    """Interpolation policy of value noise."""

    LINEAR = 0  # quintic-faded bilinear / trilinear
    CUBIC = 1  # Catmull-Rom bicubic / tricubic

    @classmethod
    def parse(cls, value):
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown interpolation '{value}'. Expected 'linear' or 'cubic'"
                )
        return cls(value)


class NoiseKernel:
    """
    Base class of every noise kernel.

    Subclasses set ``kind`` and ``dims`` (accepted coordinate counts) and
    implement ``_sample_points``.
    """

    kind = None
    dims = (1, 2, 3)
    native_range = (-1.0, 1.0)

    def __init__(self, seed: int):
        self.seed = int(seed)

    def noise(self, *coords) -> float:
        """Evaluate the kernel at a single point."""
        if len(coords) not in self.dims:
            raise UnsupportedInputError(
                f"{type(self).__name__} accepts {self._dims_text()} coordinates, "
                f"got {len(coords)}"
            )
        points = np.asarray([coords], dtype=cte.FLOAT_TYPE_NP).reshape(1, len(coords))
        return float(self.noise_many(points)[0])

    def noise_many(self, points) -> np.ndarray:
        """
        Evaluate the kernel at many points.

        Args:
            points: Array of shape (N, d) with d coordinates per point, or (N,)
                    for 1-D sampling

        Returns:
            numpy.ndarray: N float64 noise values
        """
        points = np.asarray(points, dtype=cte.FLOAT_TYPE_NP)
        if points.ndim == 1:
            points = points.reshape(-1, 1)
        if points.ndim != 2 or points.shape[1] not in self.dims:
            raise UnsupportedInputError(
                f"{type(self).__name__} accepts {self._dims_text()} coordinates, "
                f"got points of shape {points.shape}"
            )
        if not np.all(np.isfinite(points)):
            raise UnsupportedInputError("Noise coordinates must be finite")

        points = np.ascontiguousarray(points)
        out = np.zeros(points.shape[0], dtype=cte.FLOAT_TYPE_NP)
        if points.shape[0] > 0:
            self._sample_points(points, out)
        return out

    def _sample_points(self, points, out):
        raise NotImplementedError

    def _dims_text(self):
        return " or ".join(str(d) for d in self.dims)

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed})"


class LatticeNoiseKernel(NoiseKernel):
    """Kernel hashing lattice cells through its own PermutationTable."""

    def __init__(self, seed: int):
        super().__init__(seed)
        self.permutation = PermutationTable(self.seed)

    def _sample_points(self, points, out):
        runtime.ensure_initialized()
        self._points_kernel(points, out, self.permutation.data, points.shape[1])

    def _points_kernel(self, points, out, perm, dims):
        raise NotImplementedError
