"""
White noise generation for pynoisemap.

White noise has no lattice and no spatial coherence: every sample is an
independent uniform draw in [-1, 1) from the kernel's seeded generator.
Coordinates are accepted for interface uniformity and ignored. Scalar calls
advance a live stream; a fresh kernel built from the same seed replays it.
Fractal fills restart from the seed on every call, so repeated fills with one
kernel are identical.
"""

import numpy as np

from .. import constants as cte
from .base import NoiseKernel, NoiseKind
from .permutation import seeded_generator


class WhiteNoise(NoiseKernel):
    """
    Seeded white noise.

    Example:
        white = WhiteNoise(seed=123)
        white.noise()                  # one draw
        white.draw((4, 64, 64))        # a block of draws
    """

    kind = NoiseKind.WHITE
    dims = (0, 1, 2, 3)

    def __init__(self, seed: int):
        super().__init__(seed)
        self.rng = seeded_generator(self.seed)

    def fresh_generator(self):
        """A generator restarted at the kernel seed, independent of the scalar stream."""
        return seeded_generator(self.seed)

    def draw(self, shape) -> np.ndarray:
        """Draw the next uniform samples in [-1, 1) of the scalar stream."""
        return self.rng.uniform(-1.0, 1.0, size=shape).astype(cte.FLOAT_TYPE_NP, copy=False)

    def _sample_points(self, points, out):
        out[:] = self.draw(out.shape[0])

    def noise_many(self, points) -> np.ndarray:
        points = np.asarray(points, dtype=cte.FLOAT_TYPE_NP)
        if points.ndim == 2 and points.shape[1] == 0:
            out = np.zeros(points.shape[0], dtype=cte.FLOAT_TYPE_NP)
            self._sample_points(points, out)
            return out
        return super().noise_many(points)
