"""Command line interface.

Reads a problem file and prints the number of solutions followed by an example bitstring,
or a single :code:`0` if there is none.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from xorscript import _common, parse, system

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("xorscript")


def _level(verbose: int, quiet: bool) -> int:  # noqa: FBT001
    if quiet:
        return logging.ERROR
    if verbose >= 2:  # noqa: PLR2004
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line program and return the exit status."""
    parser = argparse.ArgumentParser(prog="xorscript", description="Count solutions of an XOR script system")
    parser.add_argument("path", help="Problem file, or - to read stdin")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=_level(args.verbose, args.quiet),
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        problem = parse.parse(sys.stdin.read()) if args.path == "-" else parse.load(args.path)
    except (OSError, ValueError) as e:
        logger.error("Cannot load %s: %s", args.path, e)  # noqa: TRY400
        return 1
    logger.info("Loaded %d variables and %d scripts", problem.variable_count, problem.script_count)

    if ret := system.solve_matrix(problem.incidence):
        count, bits = ret
        print(count)
        print(_common.encode_bits(bits))
    else:
        print(0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
