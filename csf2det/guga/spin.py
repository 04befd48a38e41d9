from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from csf2det.errors import InvalidAlphaCount, SpinProjectionOutOfRange, SpinProjectionParityMismatch
from csf2det.guga.paldus import PaldusTable
from csf2det.guga.stepvec import StepVector


@dataclass(frozen=True)
class SpinParameters:
    """Electron and spin bookkeeping for one ``(CSF, Ms)`` pair."""

    nelec: int
    twos: int
    twoms: int
    n_somo: int
    n_domo: int
    n_alpha: int

    @property
    def n_beta(self) -> int:
        return int(self.n_somo - self.n_alpha)

    @property
    def ms_label(self) -> str:
        return str(Fraction(int(self.twoms), 2))

    @property
    def s_label(self) -> str:
        return str(Fraction(int(self.twos), 2))


def validate_spin_projection(table: PaldusTable, stepvec: StepVector, twoms: int) -> SpinParameters:
    """Check that ``twoms`` is reachable for this CSF and count alpha spins.

    ``Ms`` runs over ``-S, -S+1, ..., S``, so in half-integer units ``twoms``
    must satisfy ``|twoms| <= 2S`` and share the parity of ``2S``.

    Returns
    -------
    SpinParameters
        With ``n_alpha = (n_somo + twoms) / 2`` singly occupied orbitals
        carrying alpha spin.

    Raises
    ------
    SpinProjectionOutOfRange
        If ``|twoms|`` exceeds the total spin.
    SpinProjectionParityMismatch
        If ``twoms`` and ``2S`` differ in parity.
    """
    twoms = int(twoms)
    twos = table.twos
    if abs(twoms) > twos:
        raise SpinProjectionOutOfRange(twoms, twos)
    if (twos + twoms) % 2:
        raise SpinProjectionParityMismatch(twoms, twos)

    n_somo = int(stepvec.n_somo)
    # n_somo and 2S share parity: each u/d step moves b by exactly one.
    n_alpha = (n_somo + twoms) // 2
    if (n_somo + twoms) % 2:
        raise InvalidAlphaCount(n_alpha, n_somo, f"n_somo + twoms = {n_somo + twoms} is odd")
    if n_alpha < 0 or n_alpha > n_somo:
        raise InvalidAlphaCount(n_alpha, n_somo)

    return SpinParameters(
        nelec=table.nelec,
        twos=twos,
        twoms=twoms,
        n_somo=n_somo,
        n_domo=int(stepvec.n_domo),
        n_alpha=int(n_alpha),
    )
