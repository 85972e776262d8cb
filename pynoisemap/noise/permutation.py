"""
Seeded permutation tables for lattice hashing.

Every lattice kernel hashes integer cell coordinates through a 512-entry table
holding two back-to-back copies of a shuffled 0..255 sequence, so lookups such
as ``perm[perm[i] + j]`` never need a modulo.

The shuffle is a reverse Fisher-Yates pass driven by numpy's PCG64 bit
generator: for i from 255 down to 1, one ``integers(0, i + 1)`` draw picks the
swap partner. The PCG64 stream is part of the reproducibility contract, so the
construction is strictly sequential.
"""

import numpy as np

from .. import constants as cte

_SEED_MODULUS = 2**64


def seeded_generator(seed: int) -> np.random.Generator:
    """
    Build the PCG64 generator used for a given seed.

    Negative seeds are reduced modulo 2**64 so any Python integer is accepted.
    """
    return np.random.Generator(np.random.PCG64(int(seed) % _SEED_MODULUS))


def fisher_yates_permutation(seed: int) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    Args:
        seed: Random seed for reproducible permutation

    Returns:
        512-element int32 permutation array (256 values duplicated)
    """
    rng = seeded_generator(seed)

    perm = np.arange(cte.PERMUTATION_SIZE, dtype=cte.INT_TYPE_NP)

    for i in range(cte.PERMUTATION_SIZE - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    return np.concatenate([perm, perm])


class PermutationTable:
    """
    Immutable 512-entry lattice hash table built from a seed.

    Attributes:
        seed: Seed the table was built from
        table: Read-only view of the 512 entries
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        # kept writable: taichi ndarray arguments bind to the buffer directly
        self._table = fisher_yates_permutation(self.seed)

    @classmethod
    def build(cls, seed: int) -> "PermutationTable":
        return cls(seed)

    @property
    def table(self) -> np.ndarray:
        view = self._table.view()
        view.flags.writeable = False
        return view

    @property
    def data(self) -> np.ndarray:
        """Backing buffer handed to taichi kernels. Never mutate it."""
        return self._table

    def __len__(self):
        return len(self._table)

    def __getitem__(self, idx):
        return self.table[idx]

    def __eq__(self, other):
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self._table, other._table)

    def __hash__(self):
        return hash(self._table.tobytes())

    def __repr__(self):
        return f"PermutationTable(seed={self.seed})"
