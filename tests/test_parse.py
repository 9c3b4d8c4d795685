from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest
from xorscript import parse

from tests.assets import CASES, SystemTestCase

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize("c", CASES)
def test_parse(c: SystemTestCase) -> None:
    problem = parse.parse(c.text)
    assert (problem.variable_count, problem.script_count) == c.incidence.shape
    np.testing.assert_array_equal(problem.incidence, c.incidence)


def test_load(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("2 1\n1 1\n0\n", encoding="utf-8")
    problem = parse.load(path)
    assert problem.variable_count == 2
    assert problem.script_count == 1
    np.testing.assert_array_equal(problem.incidence, [[True], [False]])


def test_blank_line() -> None:
    problem = parse.parse("2 1\n\n1 1")
    np.testing.assert_array_equal(problem.incidence, [[False], [True]])


def test_trailing_lines_ignored() -> None:
    problem = parse.parse("1 1\n1 1\n1 1\n")
    np.testing.assert_array_equal(problem.incidence, [[True]])


@pytest.mark.parametrize(
    ("text", "pattern"),
    [
        ("", r"Input is empty\."),
        ("3\n", r"Line 1: expected the numbers of variables and scripts\."),
        ("x 1\n", r"Line 1: 'x' is not an integer\."),
        ("-1 1\n", r"Line 1: counts must be non-negative\."),
        ("2 1\n1 1\n", r"Expected 2 variable lines, got 1\."),
        ("1 1\n1 y\n", r"Line 2: 'y' is not an integer\."),
        ("1 1\n1 2\n", r"Line 2: script 2 out of range\."),
        ("1 1\n1 0\n", r"Line 2: script 0 out of range\."),
    ],
)
def test_parse_ng(text: str, pattern: str) -> None:
    with pytest.raises(ValueError, match=pattern):
        parse.parse(text)
