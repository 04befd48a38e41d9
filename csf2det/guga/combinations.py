from __future__ import annotations

from typing import Iterator

import numpy as np

from csf2det.errors import InvalidAlphaCount


def _check_counts(n: int, k: int) -> tuple[int, int]:
    n = int(n)
    k = int(k)
    if n < 0 or k < 0 or k > n:
        raise InvalidAlphaCount(k, n)
    return n, k


def first_combination(n: int, k: int) -> np.ndarray:
    """Return the lexicographically first ``k``-subset ``[0, 1, ..., k-1]``."""
    _n, k = _check_counts(n, k)
    return np.arange(k, dtype=np.int64)


def next_combination(lex: np.ndarray, n: int) -> bool:
    """Advance ``lex`` in place to the next ``k``-subset of ``range(n)``.

    Returns ``False`` (leaving ``lex`` untouched) once the last subset
    ``[n-k, ..., n-1]`` has been reached.
    """
    n = int(n)
    k = int(lex.size)
    ptr = k - 1
    while ptr >= 0 and int(lex[ptr]) == n - k + ptr:
        ptr -= 1
    if ptr < 0:
        return False
    lex[ptr] += 1
    lex[ptr + 1 :] = int(lex[ptr]) + np.arange(1, k - ptr, dtype=np.int64)
    return True


def iter_alpha_subsets(n_somo: int, n_alpha: int) -> Iterator[np.ndarray]:
    """Yield every ``n_alpha``-subset of ``range(n_somo)`` in lexicographic order.

    The same array is yielded each time and advanced in place after the
    consumer resumes the generator; copy it to keep a subset.

    Raises
    ------
    InvalidAlphaCount
        If ``n_alpha`` is outside ``[0, n_somo]``.
    """
    lex = first_combination(n_somo, n_alpha)
    n_somo = int(n_somo)
    while True:
        yield lex
        if not next_combination(lex, n_somo):
            return
