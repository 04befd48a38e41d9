"""High-level entry points for expanding a CSF into Slater determinants.

Example Usage
-------------
>>> from csf2det import drivers
>>> res = drivers.expand_csf("ud", 0)
>>> for line in res.to_lines():
...     print(line)
2 electrons in 2 orbitals
output = phase * C^2 * SD
   +   1/2        | a b |
   -   1/2        | b a |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Iterator, Sequence

from csf2det.config import ExpansionConfig
from csf2det.errors import DeterminantLimitExceeded
from csf2det.guga.coefficients import Determinant, csf_coefficient
from csf2det.guga.combinations import iter_alpha_subsets
from csf2det.guga.paldus import PaldusTable, build_paldus_table
from csf2det.guga.spin import SpinParameters, validate_spin_projection
from csf2det.guga.stepvec import StepVector, parse_stepvec
from csf2det.utils.logger import Logger, new_logger

LEGEND = "output = phase * C^2 * SD"


def header_line(spin: SpinParameters, n_mo: int) -> str:
    return f"{int(spin.nelec)} electrons in {int(n_mo)} orbitals"


def format_determinant_line(det: Determinant) -> str:
    """Render one determinant as ``   +   1/2        | a b |``."""
    body = "".join(f" {ch}" for ch in det.occupation)
    return f" {det.sign:>3} {det.numerator:>3}/{det.denominator:<8} |{body} |"


@dataclass(frozen=True)
class CSFExpansion:
    """Determinant expansion of one CSF at a fixed ``Ms``."""

    stepvec: StepVector
    table: PaldusTable
    spin: SpinParameters
    determinants: list[Determinant] = field(default_factory=list)
    n_suppressed: int = 0

    @property
    def ndet(self) -> int:
        return len(self.determinants)

    def norm(self) -> Fraction:
        """Sum of squared coefficients; exactly 1 for a valid CSF."""
        return sum((d.weight for d in self.determinants), Fraction(0))

    def to_lines(self) -> list[str]:
        lines = [header_line(self.spin, self.stepvec.n_mo), LEGEND]
        lines.extend(format_determinant_line(d) for d in self.determinants)
        return lines


def prepare_csf(stepvec: str | Sequence[int | str], twoms: int, *, verbose: Any | None = None) -> tuple[StepVector, PaldusTable, SpinParameters]:
    """Parse and validate a ``(step-vector, 2Ms)`` pair.

    Raises the matching :class:`csf2det.errors.CSFExpansionError` subclass
    on invalid input.
    """
    log = new_logger(verbose)
    sv = parse_stepvec(stepvec)
    table = build_paldus_table(sv)
    spin = validate_spin_projection(table, sv, twoms)

    log.info("CSF: %s, Ms: %s", sv.as_str(), spin.ms_label)
    log.info(
        "nelec=%d  norb=%d  n_somo=%d  n_domo=%d  S=%s",
        spin.nelec,
        sv.n_mo,
        spin.n_somo,
        spin.n_domo,
        spin.s_label,
    )
    log.info("n_alpha=%d  n_beta=%d", spin.n_alpha, spin.n_beta)
    if log.verbose >= Logger.DEBUG:
        symbols = sv.as_str()
        log.debug("Paldus table:")
        log.debug("  %4s %4s %4s %4s %4s", "orb", "step", "a", "b", "c")
        for i, a, b, c in table.rows():
            log.debug("  %4d %4s %4d %4d %4d", i, symbols[i], a, b, c)
    return sv, table, spin


def _iter_nonzero(
    sv: StepVector,
    table: PaldusTable,
    spin: SpinParameters,
    max_determinants: int | None,
    counts: dict[str, int] | None,
) -> Iterator[Determinant]:
    visits = 0
    for subset in iter_alpha_subsets(spin.n_somo, spin.n_alpha):
        visits += 1
        if max_determinants is not None and visits > int(max_determinants):
            raise DeterminantLimitExceeded(int(max_determinants))
        det = csf_coefficient(sv, table, subset)
        if det is None:
            if counts is not None:
                counts["suppressed"] += 1
            continue
        yield det


def iter_determinants(
    stepvec: str | Sequence[int | str],
    twoms: int,
    *,
    max_determinants: int | None = None,
    verbose: Any | None = None,
) -> Iterator[Determinant]:
    """Lazily yield the non-zero determinants of a CSF.

    Input is validated before this function returns; determinants are then
    produced one subset at a time in lexicographic order of the alpha
    assignment.

    Parameters
    ----------
    stepvec : str or sequence
        Step-vector, e.g. ``"2udu u0"``.
    twoms : int
        Twice the spin projection, ``2 * Ms``.
    max_determinants : int, optional
        Cap on the number of alpha/beta assignments visited. If exceeded,
        iteration raises :class:`DeterminantLimitExceeded`.
    verbose : int or Logger, optional
        Verbosity level.
    """
    sv, table, spin = prepare_csf(stepvec, twoms, verbose=verbose)
    return _iter_nonzero(sv, table, spin, max_determinants, None)


def expand_csf(
    stepvec: str | Sequence[int | str],
    twoms: int,
    *,
    max_determinants: int | None = None,
    verbose: Any | None = None,
) -> CSFExpansion:
    """Expand a CSF into all determinants with non-zero weight.

    Examples
    --------
    >>> res = expand_csf("uu", 0)
    >>> [(d.occupation, d.weight) for d in res.determinants]
    [('ab', Fraction(1, 2)), ('ba', Fraction(1, 2))]
    """
    log = new_logger(verbose)
    sv, table, spin = prepare_csf(stepvec, twoms, verbose=log)
    counts = {"suppressed": 0}
    dets = list(_iter_nonzero(sv, table, spin, max_determinants, counts))
    log.info("%d determinants (%d zero-weight suppressed)", len(dets), counts["suppressed"])
    return CSFExpansion(
        stepvec=sv,
        table=table,
        spin=spin,
        determinants=dets,
        n_suppressed=int(counts["suppressed"]),
    )


def expand_from_config(config: ExpansionConfig) -> CSFExpansion:
    return expand_csf(
        config.stepvec,
        config.twoms,
        max_determinants=config.max_determinants,
        verbose=config.verbose,
    )
