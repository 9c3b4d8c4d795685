from __future__ import annotations

import logging

import numpy as np
import pytest
from xorscript import extract, solver
from xorscript.common import UnsatisfiableError, VariableNotFoundError
from xorscript.equation import Equation
from xorscript.expression import FALSE, TRUE, Single, Var, Xor

from tests import utils


def test_from_scripts() -> None:
    eqs = extract.from_scripts([[3, 1, 2], [2], []])
    assert eqs == [
        Equation.from_script([]),
        Equation.from_script([2]),
        Equation.from_script([1, 2, 3]),
    ]


def test_from_scripts_stable() -> None:
    eqs = extract.from_scripts([[2, 3], [1, 2]])
    assert eqs == [Equation.from_script([2, 3]), Equation.from_script([1, 2])]


def test_find_substitution() -> None:
    extracted = {
        0: [Equation(Single(Var(1)), Single(TRUE))],
        1: [Equation(Single(Var(2)), Xor((TRUE, Var(3))))],
    }
    assert extract.find_substitution(extracted, [1, 2], 1) == (2, (TRUE, Var(3)))
    assert extract.find_substitution(extracted, [1, 2], 2) == (1, (TRUE,))
    with pytest.raises(VariableNotFoundError):
        extract.find_substitution(extracted, [3, 4], 3)
    with pytest.raises(VariableNotFoundError):
        extract.find_substitution({}, [1], 2)


def test_single_script() -> None:
    constants, partials = extract.extract(extract.from_scripts([[1, 2, 3]]))
    assert constants == []
    assert partials == [
        Equation(Single(Var(1)), Xor((TRUE, Var(2), Var(3)))),
        Equation(Single(Var(2)), Xor((TRUE, Var(1), Var(3)))),
        Equation(Single(Var(3)), Xor((TRUE, Var(1), Var(2)))),
    ]


def test_substituted_constants() -> None:
    constants, partials = extract.extract(extract.from_scripts([[1, 2], [1], [2]]))
    assert constants == [
        Equation(Single(Var(1)), Single(FALSE)),
        Equation(Single(Var(1)), Single(TRUE)),
        Equation(Single(Var(2)), Single(FALSE)),
        Equation(Single(Var(2)), Single(TRUE)),
    ]
    assert partials == []


def test_mixed() -> None:
    constants, partials = extract.extract(extract.from_scripts([[1, 2, 3], [2]]))
    assert constants == [Equation(Single(Var(2)), Single(TRUE))]
    assert partials == [
        Equation(Single(Var(1)), Xor((FALSE, Var(3)))),
        Equation(Single(Var(2)), Xor((TRUE, Var(1), Var(3)))),
        Equation(Single(Var(3)), Xor((FALSE, Var(1)))),
    ]


def test_duplicate_script(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="xorscript.extract"):
        constants, partials = extract.extract(extract.from_scripts([[1, 2], [1, 2]]))
    assert constants == []
    assert partials == [
        Equation(Single(Var(1)), Xor((TRUE, Var(2)))),
        Equation(Single(Var(2)), Xor((TRUE, Var(1)))),
    ]
    assert "Cannot evaluate" in caplog.text
    assert "unsubstituted" in caplog.text


def test_empty_equation() -> None:
    with pytest.raises(UnsatisfiableError, match=r"Contradictory equation"):
        extract.extract([Equation.from_script([])])

    assert extract.extract([Equation(Xor(()), Single(FALSE))]) == ([], [])


def test_empty() -> None:
    assert extract.extract([]) == ([], [])


@pytest.mark.parametrize("seed", range(8))
def test_idempotent(seed: int) -> None:
    rng = np.random.default_rng(seed)
    a = utils.random_incidence(rng, 5, 4)
    scripts = [(np.flatnonzero(a[:, j]) + 1).tolist() for j in range(4)]
    assert all(scripts)
    constants, partials = extract.extract(extract.from_scripts(scripts))
    assert extract.extract([*constants, *partials]) == (constants, partials)


@pytest.mark.parametrize("seed", range(8))
def test_order_invariant(seed: int) -> None:
    rng = np.random.default_rng(seed)
    rows, cols = 6, 5
    a = utils.random_incidence(rng, rows, cols)
    variables = list(range(1, rows + 1))
    scripts = [(np.flatnonzero(a[:, j]) + 1).tolist() for j in range(cols)]
    assert all(scripts)
    expected = [x.tolist() for x in utils.iter_brute_force(a)]
    for _ in range(4):
        perm = rng.permutation(cols)
        equations = [Equation.from_script(scripts[j]) for j in perm]
        constants, partials = extract.extract(equations)
        assert list(solver.iter_solutions(variables, constants, partials)) == expected
