from __future__ import annotations

from typing import Any


class Logger:
    """Tiny verbosity-level logger printing to stdout.

    Attributes
    ----------
    verbose : int
        Verbosity level.
    """

    QUIET = 0
    WARN = 2
    INFO = 4
    DEBUG = 5

    def __init__(self, verbose: int = QUIET):
        self.verbose = int(verbose)

    @staticmethod
    def _fmt(msg: str, args: tuple[Any, ...]) -> str:
        if not args:
            return str(msg)
        try:
            return str(msg) % args
        except (TypeError, ValueError):
            return f"{msg} {' '.join(str(x) for x in args)}"

    def debug(self, msg: str, *args: Any) -> None:
        if self.verbose >= self.DEBUG:
            print(self._fmt(msg, args))

    def info(self, msg: str, *args: Any) -> None:
        if self.verbose >= self.INFO:
            print(self._fmt(msg, args))

    def warn(self, msg: str, *args: Any) -> None:
        if self.verbose >= self.WARN:
            print(self._fmt(msg, args))


def new_logger(verbose: Any | None = None) -> Logger:
    if isinstance(verbose, Logger):
        return verbose
    if verbose is None:
        verbose = Logger.QUIET
    return Logger(int(verbose))
