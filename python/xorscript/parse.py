"""Text input format.

The first line holds the number of variables :code:`N` and the number of scripts :code:`M`.
Each of the following :code:`N` lines describes one variable in id order:
its first token is skipped, the remaining tokens are the 1-based indices of the scripts referencing it.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import numpy as np
import numpy.typing as npt


@dataclasses.dataclass(frozen=True)
class Problem:
    """Parsed input."""

    variable_count: int
    script_count: int
    incidence: npt.NDArray[np.bool_]
    """Boolean matrix of shape :code:`(variable_count, script_count)`."""


def _parse_int(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        msg = f"Line {lineno}: {token!r} is not an integer."
        raise ValueError(msg) from None


def parse(text: str) -> Problem:
    """Parse problem text.

    Raises
    ------
    ValueError
        If the text is malformed or refers to a script out of range.
    """
    lines = text.splitlines()
    if not lines:
        msg = "Input is empty."
        raise ValueError(msg)
    header = lines[0].split()
    if len(header) < 2:  # noqa: PLR2004
        msg = "Line 1: expected the numbers of variables and scripts."
        raise ValueError(msg)
    n, m = (_parse_int(t, 1) for t in header[:2])
    if n < 0 or m < 0:
        msg = "Line 1: counts must be non-negative."
        raise ValueError(msg)
    body = lines[1 : 1 + n]
    if len(body) < n:
        msg = f"Expected {n} variable lines, got {len(body)}."
        raise ValueError(msg)
    incidence = np.zeros((n, m), dtype=np.bool_)
    for i, line in enumerate(body):
        lineno = i + 2
        for token in line.split()[1:]:
            j = _parse_int(token, lineno)
            if not 1 <= j <= m:
                msg = f"Line {lineno}: script {j} out of range."
                raise ValueError(msg)
            incidence[i, j - 1] = True
    return Problem(n, m, incidence)


def load(path: str | Path) -> Problem:
    """Read and parse the problem stored at `path`."""
    return parse(Path(path).read_text(encoding="utf-8"))
