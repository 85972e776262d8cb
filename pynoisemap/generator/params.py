"""
Noise parameter objects for pynoisemap.

NoiseParams gathers everything a fill needs: the kernel tag, the seed and the
fractal parameters. Parameters are immutable; a missing seed is drawn once from
system entropy when the object is created.
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .. import constants as cte
from ..fractal import validate_fractal_parameters
from ..noise import NoiseKind, ValueInterpolation


def random_seed() -> int:
    """Draw a non-negative 31-bit seed from system entropy."""
    return int(np.random.SeedSequence().entropy) & 0x7FFFFFFF


@dataclass(frozen=True)
class NoiseParams:
    """
    Parameters of a noise fill.

    Attributes:
        kind: Noise kernel (NoiseKind or its name, default: gradient)
        seed: Kernel seed (default: drawn from system entropy)
        scale: Frequency divisor of the first octave (default: 16)
        octaves: Number of octaves (default: 3)
        lacunarity: Frequency multiplier per octave (default: 2.0)
        persistence: Amplitude multiplier per octave (default: 0.5)
        interpolation: Value noise interpolation policy (default: cubic)
        normalize_amplitude: Divide the octave sum by the total absolute amplitude (default: True)
    """

    kind: NoiseKind = NoiseKind.GRADIENT
    seed: Optional[int] = None
    scale: float = cte.DEFAULT_SCALE
    octaves: int = cte.DEFAULT_OCTAVES
    lacunarity: float = cte.DEFAULT_LACUNARITY
    persistence: float = cte.DEFAULT_PERSISTENCE
    interpolation: ValueInterpolation = ValueInterpolation.CUBIC
    normalize_amplitude: bool = True

    def __post_init__(self):
        object.__setattr__(self, "kind", NoiseKind.parse(self.kind))
        object.__setattr__(self, "interpolation", ValueInterpolation.parse(self.interpolation))
        if self.seed is None:
            object.__setattr__(self, "seed", random_seed())
        else:
            object.__setattr__(self, "seed", int(self.seed))
        validate_fractal_parameters(self.scale, self.octaves, self.lacunarity, self.persistence)

    def replace(self, **changes) -> "NoiseParams":
        """Return a copy with some fields changed."""
        return dataclasses.replace(self, **changes)

    def reset_defaults(self) -> "NoiseParams":
        """Return default parameters of the same kind with a fresh random seed."""
        return NoiseParams(kind=self.kind)
