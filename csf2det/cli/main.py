from __future__ import annotations

import argparse
import sys
from typing import Sequence

from csf2det.config import ExpansionConfig
from csf2det.drivers import expand_from_config
from csf2det.errors import CSFExpansionError

PROG = "csf2det"
HINT = f"Try '{PROG} --help' for more information."


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog=PROG,
        description="Expand a configuration state function (CSF) into Slater determinants using GUGA.",
        add_help=False,
    )
    ap.add_argument("--help", action="help", help="display this help and exit")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="print extra information (repeat for the Paldus table)")
    ap.add_argument(
        "-s",
        "--stepvec",
        required=True,
        metavar="STEPVEC",
        help='string with spin coupling over {0,u,d,2}, e.g. "2udu u0"',
    )
    ap.add_argument("-m", "--twoms", required=True, type=int, metavar="2*Ms", help="Ms in units of one half")
    return ap


def run(config: ExpansionConfig) -> int:
    """Expand one CSF and print the determinant table to stdout."""
    try:
        res = expand_from_config(config)
    except CSFExpansionError as e:
        for line in e.diagnostic_lines():
            print(line)
        return 1

    for line in res.to_lines():
        print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print(HINT)
        return 0

    ap = build_parser()
    try:
        args = ap.parse_args(argv)
    except _UsageError as e:
        print(f"{PROG}: {e}")
        print(HINT)
        return 1

    return run(ExpansionConfig.from_args(args))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
