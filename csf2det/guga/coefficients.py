"""Determinant coefficients of a CSF from the GUGA step-vector recurrence.

For a fixed alpha/beta assignment of the singly occupied orbitals, the
squared coefficient of the determinant in the CSF is a product of one
factor per orbital, built from the Paldus counters ``a[i]``, ``b[i]`` and
the number of alpha/beta electrons placed so far (Shavitt, Lecture Notes
in Chemistry 22, p. 55):

====== ============ ======================= ========= ===============
step   spin         numerator               denom.    phase flip if
====== ============ ======================= ========= ===============
``u``  alpha        ``a + b - n_beta``      ``b``     never
``u``  beta         ``a + b - n_alpha``     ``b``     never
``d``  alpha        ``n_beta - a + 1``      ``b + 2`` ``b`` even
``d``  beta         ``n_alpha - a + 1``     ``b + 2`` ``b`` odd
``2``  both         1                       1         ``b`` odd
====== ============ ======================= ========= ===============

The fraction is reduced after every orbital so the intermediate integers
stay small.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

import numpy as np

from csf2det.guga.paldus import PaldusTable
from csf2det.guga.stepvec import STEP_DOUBLE, STEP_DOWN, STEP_EMPTY, STEP_UP, StepVector

DET_SYMBOLS: dict[str, str] = {"empty": "0", "alpha": "a", "beta": "b", "double": "2"}


@dataclass(frozen=True)
class Determinant:
    """One Slater determinant of a CSF expansion.

    Attributes
    ----------
    phase : int
        ``+1`` or ``-1``.
    numerator, denominator : int
        Squared coefficient ``C^2 = numerator / denominator`` in lowest terms.
    occupation : str
        One symbol per orbital: ``0`` empty, ``a`` alpha, ``b`` beta,
        ``2`` doubly occupied.
    """

    phase: int
    numerator: int
    denominator: int
    occupation: str

    @property
    def sign(self) -> str:
        return "+" if self.phase > 0 else "-"

    @property
    def weight(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @property
    def coefficient(self) -> float:
        """Signed CI coefficient ``phase * sqrt(C^2)``."""
        return float(self.phase) * math.sqrt(self.numerator / self.denominator)

    def spin_occupations(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(alpha_occ, beta_occ)`` as int8 arrays of 0/1 per orbital."""
        occ = np.frombuffer(self.occupation.encode("ascii"), dtype=np.uint8)
        alpha = np.isin(occ, (ord("a"), ord("2"))).astype(np.int8)
        beta = np.isin(occ, (ord("b"), ord("2"))).astype(np.int8)
        return alpha, beta


def _simplify(num: int, den: int) -> tuple[int, int]:
    if num == 0:
        return 0, den
    div = math.gcd(num, den)
    return num // div, den // div


def spin_eigenvalues(n_somo: int, alpha_subset: np.ndarray) -> np.ndarray:
    """Return a boolean mask over singly occupied orbitals, ``True`` for alpha."""
    is_alpha = np.zeros(int(n_somo), dtype=bool)
    is_alpha[np.asarray(alpha_subset, dtype=np.int64)] = True
    return is_alpha


def csf_coefficient(stepvec: StepVector, table: PaldusTable, alpha_subset: np.ndarray) -> Determinant | None:
    """Evaluate phase and squared coefficient for one alpha/beta assignment.

    Parameters
    ----------
    stepvec : StepVector
        Parsed CSF step-vector.
    table : PaldusTable
        Paldus counters of ``stepvec``.
    alpha_subset : np.ndarray
        Strictly increasing indices (into the singly occupied orbitals) that
        carry alpha spin; all others carry beta spin.

    Returns
    -------
    Determinant or None
        ``None`` if the coefficient is exactly zero.
    """
    is_alpha = spin_eigenvalues(stepvec.n_somo, alpha_subset)

    phase = 1
    num = 1
    den = 1
    i_somo = 0
    i_alpha = 0
    i_beta = 0
    det: list[str] = []

    for i, step in enumerate(stepvec.steps):
        step = int(step)
        a = int(table.a[i])
        b = int(table.b[i])
        if step == STEP_EMPTY:
            det.append(DET_SYMBOLS["empty"])
        elif step == STEP_UP:
            if is_alpha[i_somo]:
                det.append(DET_SYMBOLS["alpha"])
                num *= a + b - i_beta
                i_alpha += 1
            else:
                det.append(DET_SYMBOLS["beta"])
                num *= a + b - i_alpha
                i_beta += 1
            den *= b
            i_somo += 1
        elif step == STEP_DOWN:
            if is_alpha[i_somo]:
                det.append(DET_SYMBOLS["alpha"])
                num *= i_beta - a + 1
                i_alpha += 1
                if b % 2 == 0:
                    phase = -phase
            else:
                det.append(DET_SYMBOLS["beta"])
                num *= i_alpha - a + 1
                i_beta += 1
                if b % 2 == 1:
                    phase = -phase
            den *= b + 2
            i_somo += 1
        elif step == STEP_DOUBLE:
            det.append(DET_SYMBOLS["double"])
            i_alpha += 1
            i_beta += 1
            if b % 2 == 1:
                phase = -phase
        else:
            raise ValueError(f"invalid step code {step} at orbital {i}")
        num, den = _simplify(num, den)

    if num == 0:
        return None
    return Determinant(phase=phase, numerator=num, denominator=den, occupation="".join(det))
