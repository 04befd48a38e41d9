from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from csf2det.errors import EmptyStepVector, InvalidStepVectorSymbol

# Step codes shared by the occupation symbols and the GUGA step letters.
STEP_EMPTY = 0
STEP_UP = 1
STEP_DOWN = 2
STEP_DOUBLE = 3

STEP_ORDER: tuple[str, ...] = ("E", "U", "L", "D")
STEP_TO_INDEX: dict[str, int] = {s: i for i, s in enumerate(STEP_ORDER)}

OCC_SYMBOLS: tuple[str, ...] = ("0", "u", "d", "2")
SYMBOL_TO_CODE: dict[str, int] = {s: i for i, s in enumerate(OCC_SYMBOLS)}

# Per-code spatial occupancy.
STEP_OCC: tuple[int, ...] = (0, 1, 1, 2)


@dataclass(frozen=True)
class StepVector:
    """Parsed GUGA step-vector of a single CSF.

    Attributes
    ----------
    steps : np.ndarray
        int8 array of length ``n_mo`` with step codes
        (0=unoccupied, 1=up, 2=down, 3=double).
    n_mo : int
        Number of orbitals.
    n_somo : int
        Number of singly occupied orbitals (``u`` and ``d``).
    n_domo : int
        Number of doubly occupied orbitals.
    """

    steps: np.ndarray
    n_mo: int
    n_somo: int
    n_domo: int

    def __post_init__(self) -> None:
        if self.steps.ndim != 1 or int(self.steps.size) != int(self.n_mo):
            raise ValueError("steps has incompatible shape")
        self.steps.setflags(write=False)

    def __len__(self) -> int:
        return int(self.n_mo)

    def as_str(self) -> str:
        """Render as a compact ``"0ud2"`` string."""
        return "".join(OCC_SYMBOLS[int(s)] for s in self.steps)

    def as_letters(self) -> str:
        """Render with the GUGA step letters, e.g. ``"DULU"``."""
        return "".join(STEP_ORDER[int(s)] for s in self.steps)

    def occupancies(self) -> np.ndarray:
        """Return the spatial occupancy (0, 1, or 2) of each orbital."""
        return np.asarray(STEP_OCC, dtype=np.int8)[self.steps]

    def somo_positions(self) -> np.ndarray:
        """Orbital indices of the singly occupied orbitals, in order."""
        return np.flatnonzero((self.steps == STEP_UP) | (self.steps == STEP_DOWN))


def _code_from_item(step: int | str, position: int) -> int:
    if isinstance(step, str):
        code = SYMBOL_TO_CODE.get(step)
        if code is None:
            code = STEP_TO_INDEX.get(step)
        if code is None:
            raise InvalidStepVectorSymbol(step, position)
        return code
    code = int(step)
    if code < 0 or code >= len(STEP_ORDER):
        raise InvalidStepVectorSymbol(str(step), position)
    return code


def parse_stepvec(stepvec: str | Sequence[int | str]) -> StepVector:
    """Decode an orbital occupation string into step codes.

    Parameters
    ----------
    stepvec : str or sequence of int or str
        Occupation string over ``'0'``, ``'u'``, ``'d'``, ``'2'``; spaces are
        visual separators and are skipped. A sequence of step codes (0-3) or
        step letters (``"E"``, ``"U"``, ``"L"``, ``"D"``) is also accepted.

    Returns
    -------
    StepVector
        Parsed step-vector with orbital counts.

    Raises
    ------
    InvalidStepVectorSymbol
        If a character is not a valid symbol. ``position`` is the index in
        the raw input.
    EmptyStepVector
        If no orbital symbol is present.

    Examples
    --------
    >>> sv = parse_stepvec("2udu u0")
    >>> sv.n_mo, sv.n_somo, sv.n_domo
    (6, 4, 1)
    """
    codes: list[int] = []
    if isinstance(stepvec, str):
        for pos, ch in enumerate(stepvec):
            if ch == " ":
                continue
            code = SYMBOL_TO_CODE.get(ch)
            if code is None:
                raise InvalidStepVectorSymbol(ch, pos)
            codes.append(code)
    else:
        for pos, step in enumerate(stepvec):
            codes.append(_code_from_item(step, pos))

    if not codes:
        raise EmptyStepVector()

    steps = np.asarray(codes, dtype=np.int8)
    n_somo = int(np.count_nonzero((steps == STEP_UP) | (steps == STEP_DOWN)))
    n_domo = int(np.count_nonzero(steps == STEP_DOUBLE))
    return StepVector(steps=steps, n_mo=int(steps.size), n_somo=n_somo, n_domo=n_domo)
