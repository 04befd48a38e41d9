from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from csf2det.utils.logger import Logger


def _int_env(key: str, default: int) -> int:
    raw = os.environ.get(key, "").strip()
    if raw == "":
        return int(default)
    try:
        out = int(raw)
    except ValueError as e:
        raise SystemExit(f"{key} must be an integer, got: {raw!r}") from e
    if out < 0:
        raise SystemExit(f"{key} must be >= 0, got: {out}")
    return out


def default_verbose() -> int:
    return _int_env("CSF2DET_VERBOSE", Logger.QUIET)


def default_max_determinants() -> int | None:
    # 0 means unlimited.
    limit = _int_env("CSF2DET_MAX_DETERMINANTS", 0)
    return limit if limit > 0 else None


def verbose_from_count(count: int) -> int:
    """Map a repeated ``-v`` flag count onto a logger level."""
    count = int(count)
    if count <= 0:
        return Logger.QUIET
    if count == 1:
        return Logger.INFO
    return Logger.DEBUG


@dataclass(frozen=True)
class ExpansionConfig:
    """Inputs and options for one CSF expansion."""

    stepvec: str
    twoms: int
    verbose: int = Logger.QUIET
    max_determinants: int | None = None

    def __post_init__(self) -> None:
        if self.max_determinants is not None and int(self.max_determinants) <= 0:
            raise ValueError("max_determinants must be > 0 or None")

    @classmethod
    def from_args(cls, args: Any) -> ExpansionConfig:
        """Build a config from parsed command-line arguments.

        ``CSF2DET_VERBOSE`` supplies the verbosity when no ``-v`` flag was
        given; ``CSF2DET_MAX_DETERMINANTS`` caps the enumeration.
        """
        count = int(getattr(args, "verbose", 0) or 0)
        verbose = verbose_from_count(count) if count else default_verbose()
        return cls(
            stepvec=str(args.stepvec),
            twoms=int(args.twoms),
            verbose=int(verbose),
            max_determinants=default_max_determinants(),
        )
