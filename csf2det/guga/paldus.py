from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from csf2det.errors import NegativeSpinCounter
from csf2det.guga.stepvec import StepVector

# (da, db, dc) applied for step codes 0 (empty), 1 (up), 2 (down), 3 (double).
_PALDUS_DELTA: tuple[tuple[int, int, int], ...] = (
    (0, 0, 1),
    (0, 1, 0),
    (1, -1, 1),
    (1, 0, 0),
)


@dataclass(frozen=True)
class PaldusTable:
    """Paldus ``(a, b, c)`` prefix counters along one step-vector.

    Entry ``i`` holds the state after orbital ``i``: ``a`` counts doubly
    occupied orbitals plus coupled ``ud`` pairs, ``b`` is the running total
    spin in half units and ``c`` counts holes.

    Attributes
    ----------
    a, b, c : np.ndarray
        int64 arrays of length ``n_mo``.
    """

    a: np.ndarray
    b: np.ndarray
    c: np.ndarray

    def __post_init__(self) -> None:
        if self.a.shape != self.b.shape or self.a.shape != self.c.shape:
            raise ValueError("a/b/c arrays have incompatible shapes")
        for arr in (self.a, self.b, self.c):
            arr.setflags(write=False)

    @property
    def n_mo(self) -> int:
        return int(self.a.size)

    @property
    def nelec(self) -> int:
        """Number of electrons: doubly occupied + ud couples + excess alpha."""
        return 2 * int(self.a[-1]) + int(self.b[-1])

    @property
    def twos(self) -> int:
        """Total spin in half-integer units (2S)."""
        return int(self.b[-1])

    def rows(self) -> Iterator[tuple[int, int, int, int]]:
        for i in range(self.n_mo):
            yield i, int(self.a[i]), int(self.b[i]), int(self.c[i])


def build_paldus_table(stepvec: StepVector) -> PaldusTable:
    """Build the Paldus ``(a, b, c)`` counters for a parsed step-vector.

    Raises
    ------
    NegativeSpinCounter
        If ``b`` becomes negative anywhere, i.e. a ``d`` step appears
        without enough preceding ``u`` steps to couple to. The check runs
        after the full table is built and reports the first such orbital.
    """
    n_mo = int(stepvec.n_mo)
    a = np.zeros(n_mo, dtype=np.int64)
    b = np.zeros(n_mo, dtype=np.int64)
    c = np.zeros(n_mo, dtype=np.int64)

    ca = cb = cc = 0
    for i, step in enumerate(stepvec.steps):
        da, db, dc = _PALDUS_DELTA[int(step)]
        ca += da
        cb += db
        cc += dc
        a[i] = ca
        b[i] = cb
        c[i] = cc

    bad = np.flatnonzero(b < 0)
    if bad.size:
        raise NegativeSpinCounter(int(bad[0]))
    return PaldusTable(a=a, b=b, c=c)
