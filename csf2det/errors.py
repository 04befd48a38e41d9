"""Errors raised while expanding a CSF into determinants.

Every error carries the offending input values as attributes and names the
command-line option (``option``) a user should check.
"""

from __future__ import annotations

STEPVEC_OPTION = "-s or --stepvec input string"
TWOMS_OPTION = "-m or --twoms input value"


class CSFExpansionError(ValueError):
    """Base class for all CSF expansion failures."""

    option: str | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = str(message)

    def diagnostic_lines(self) -> list[str]:
        lines = [f"input error: {self.message}"]
        if self.option is not None:
            lines.append(f"             check the {self.option}")
        return lines


class InvalidStepVectorSymbol(CSFExpansionError):
    option = STEPVEC_OPTION

    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        self.position = int(position)
        super().__init__(f"illegal character {symbol!r} in stepvector at position {self.position}")


class EmptyStepVector(CSFExpansionError):
    option = STEPVEC_OPTION

    def __init__(self) -> None:
        super().__init__("stepvector contains no orbitals")


class NegativeSpinCounter(CSFExpansionError):
    option = STEPVEC_OPTION

    def __init__(self, position: int) -> None:
        self.position = int(position)
        super().__init__(f"invalid ud ordering in stepvector (orbital {self.position})")


class SpinProjectionOutOfRange(CSFExpansionError):
    option = TWOMS_OPTION

    def __init__(self, twoms: int, twos: int) -> None:
        self.twoms = int(twoms)
        self.twos = int(twos)
        super().__init__(f"twoms={self.twoms} exceeded maximum Ms value of -/+ {self.twos} half integer units")

    def diagnostic_lines(self) -> list[str]:
        return [
            "input error: exceeded maximum Ms value of",
            f"             -/+ {self.twos} half integer units",
            f"             check the {self.option}",
        ]


class SpinProjectionParityMismatch(CSFExpansionError):
    option = TWOMS_OPTION

    def __init__(self, twoms: int, twos: int) -> None:
        self.twoms = int(twoms)
        self.twos = int(twos)
        self.parity = "ODD" if self.twos % 2 else "EVEN"
        super().__init__(f"Ms should be an {self.parity} number of half integers")


class InvalidAlphaCount(CSFExpansionError):
    def __init__(self, n_alpha: int, n_somo: int, detail: str | None = None) -> None:
        self.n_alpha = int(n_alpha)
        self.n_somo = int(n_somo)
        if detail is None:
            detail = f"alpha count {self.n_alpha} is outside [0, {self.n_somo}]"
        super().__init__(detail)

    def diagnostic_lines(self) -> list[str]:
        return [f"internal error: {self.message}"]


class DeterminantLimitExceeded(CSFExpansionError):
    def __init__(self, limit: int) -> None:
        self.limit = int(limit)
        super().__init__(f"determinant enumeration exceeded max_determinants={self.limit}")

    def diagnostic_lines(self) -> list[str]:
        return [
            f"input error: {self.message}",
            "             raise or unset CSF2DET_MAX_DETERMINANTS",
        ]
