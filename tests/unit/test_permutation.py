"""
Unit tests for the seeded permutation table.
"""
import numpy as np
import pytest

from pynoisemap.noise import PermutationTable, fisher_yates_permutation, seeded_generator


@pytest.mark.unit
def test_table_layout():
    """Two back-to-back copies of a permutation of 0..255."""
    table = fisher_yates_permutation(42)
    assert table.shape == (512,)
    assert table.dtype == np.int32
    assert np.array_equal(np.sort(table[:256]), np.arange(256))
    assert np.array_equal(table[:256], table[256:])


@pytest.mark.unit
def test_same_seed_same_table():
    assert PermutationTable(42) == PermutationTable(42)
    assert np.array_equal(PermutationTable(42).table, PermutationTable.build(42).table)


@pytest.mark.unit
def test_different_seed_different_table():
    assert PermutationTable(42) != PermutationTable(43)
    assert np.any(PermutationTable(42).table != PermutationTable(43).table)


@pytest.mark.unit
def test_reverse_fisher_yates_draw_order():
    """One integers(0, i + 1) draw per step, i from 255 down to 1."""
    rng = seeded_generator(7)
    expected = list(range(256))
    for i in range(255, 0, -1):
        j = int(rng.integers(0, i + 1))
        expected[i], expected[j] = expected[j], expected[i]
    assert PermutationTable(7).table[:256].tolist() == expected


@pytest.mark.unit
def test_table_is_read_only():
    perm = PermutationTable(3)
    with pytest.raises(ValueError):
        perm.table[0] = 1


@pytest.mark.unit
def test_negative_and_large_seeds():
    for seed in (-1, -123456789, 2**40, 0):
        table = PermutationTable(seed).table
        assert np.array_equal(np.sort(table[:256]), np.arange(256))
    assert PermutationTable(-5) == PermutationTable(-5)


@pytest.mark.unit
def test_indexing_and_len():
    perm = PermutationTable(11)
    assert len(perm) == 512
    assert perm[0] == perm[256]
    assert perm[10:12].tolist() == perm.table[10:12].tolist()
    assert repr(perm) == "PermutationTable(seed=11)"
