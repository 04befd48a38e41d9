from __future__ import annotations

from itertools import combinations
from math import comb

import numpy as np
import pytest

from csf2det.errors import InvalidAlphaCount
from csf2det.guga.combinations import first_combination, iter_alpha_subsets, next_combination


@pytest.mark.parametrize("n,k", [(0, 0), (1, 0), (1, 1), (4, 2), (5, 3), (6, 1), (6, 6), (7, 4)])
def test_enumerates_all_subsets_in_lexicographic_order(n, k):
    subsets = [tuple(int(x) for x in s) for s in iter_alpha_subsets(n, k)]
    assert len(subsets) == comb(n, k)
    assert subsets == list(combinations(range(n), k))
    assert subsets[0] == tuple(range(k))
    assert subsets[-1] == tuple(range(n - k, n))
    for s in subsets:
        assert all(x < y for x, y in zip(s, s[1:]))


@pytest.mark.parametrize("n,k", [(0, 0), (3, 0), (3, 3)])
def test_boundary_yields_single_subset(n, k):
    assert len(list(iter_alpha_subsets(n, k))) == 1


def test_same_buffer_is_reused():
    seen = {id(s) for s in iter_alpha_subsets(4, 2)}
    assert len(seen) == 1


def test_next_combination_in_place():
    lex = first_combination(5, 3)
    assert lex.tolist() == [0, 1, 2]
    assert next_combination(lex, 5)
    assert lex.tolist() == [0, 1, 3]
    lex[:] = [0, 3, 4]
    assert next_combination(lex, 5)
    assert lex.tolist() == [1, 2, 3]


def test_next_combination_exhausted():
    lex = np.array([2, 3, 4], dtype=np.int64)
    assert not next_combination(lex, 5)
    assert lex.tolist() == [2, 3, 4]


@pytest.mark.parametrize("n,k", [(2, 3), (2, -1), (-1, 0)])
def test_invalid_alpha_count(n, k):
    with pytest.raises(InvalidAlphaCount):
        list(iter_alpha_subsets(n, k))
    with pytest.raises(InvalidAlphaCount):
        first_combination(n, k)
