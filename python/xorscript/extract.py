"""Symbolic extraction of constants and partial equations.

Each source equation is visited once, in order.
For every variable it references, an equation extracted from an earlier source is substituted
(if one exists for another referenced variable) and the variable is isolated on the left.
The pass is not iterated to a fixed point, so the result may leave variables under-constrained;
the solver explores whatever freedom remains.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xorscript.common import UnsatisfiableError, UnsolvableEquationError, VariableNotFoundError
from xorscript.equation import Equation
from xorscript.expression import terms

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping

    from xorscript.expression import Value

logger = logging.getLogger(__name__)


def from_scripts(scripts: Iterable[Collection[int]]) -> list[Equation]:
    """Build one raw equation per script, smaller scripts first.

    Parameters
    ----------
    scripts : `collections.abc.Iterable`
        Variable ids referenced by each script.

    Returns
    -------
    `list`
        :code:`XOR(script) = 1` for each script, stably sorted by size.
    """
    return [Equation.from_script(sorted(s)) for s in sorted(scripts, key=len)]


def find_substitution(
    extracted: Mapping[int, list[Equation]], candidates: Collection[int], var: int
) -> tuple[int, tuple[Value, ...]]:
    """Find an extracted equation for a variable in `candidates` other than `var`.

    Returns
    -------
    `tuple`
        The variable and the terms it equals.

    Raises
    ------
    VariableNotFoundError
        If no such equation has been extracted yet.
    """
    for eqs in extracted.values():
        for eq in eqs:
            (u,) = eq.variables_on_left()
            if u != var and u in candidates:
                return u, terms(eq.right)
    msg = f"No extracted equation for {sorted(set(candidates) - {var})}."
    raise VariableNotFoundError(msg)


def _derive(
    eq: Equation, var: int, constants: Mapping[int, list[Equation]], partials: Mapping[int, list[Equation]]
) -> Equation:
    candidates = eq.variables_on_left()
    try:
        replace, replacement = find_substitution(constants, candidates, var)
    except VariableNotFoundError:
        try:
            replace, replacement = find_substitution(partials, candidates, var)
        except VariableNotFoundError:
            return eq.substitute(var)
    return eq.substitute(var, replace, replacement)


def _fallback(eq: Equation) -> Equation | None:
    # Keep the source constraint when every substitution failed
    for var in sorted(eq.variables()):
        try:
            return eq.substitute(var)
        except (UnsolvableEquationError, VariableNotFoundError):
            continue
    return None


def _flatten(extracted: Mapping[int, list[Equation]]) -> list[Equation]:
    return sorted({eq for eqs in extracted.values() for eq in eqs}, key=Equation.key)


def extract(equations: Iterable[Equation]) -> tuple[list[Equation], list[Equation]]:
    """Extract constants and partial equations.

    Parameters
    ----------
    equations : `collections.abc.Iterable`
        Source equations, typically from `from_scripts`.

    Returns
    -------
    `tuple`
        Deduplicated and sorted constant equations (:code:`v = const`) and partial equations.

    Raises
    ------
    UnsatisfiableError
        If a source equation without variables is contradictory.

    Notes
    -----
    A script referencing no variable yields :code:`0 = 1`, which makes the whole system unsatisfiable
    instead of being skipped as if the script were absent.
    A source equation whose every substitution fails is kept in its unsubstituted form,
    so the extracted equations always describe the same solution set as the sources.
    """
    constants: dict[int, list[Equation]] = {}
    partials: dict[int, list[Equation]] = {}
    for index, eq in enumerate(equations):
        if not eq.variables():
            if eq.is_satisfied({}):
                continue
            msg = f"Contradictory equation {eq}."
            raise UnsatisfiableError(msg)
        found_c: list[Equation] = []
        found_p: list[Equation] = []
        for var in eq.variables_on_left():
            try:
                derived = _derive(eq, var, constants, partials)
            except (UnsolvableEquationError, VariableNotFoundError) as e:
                logger.debug("Cannot evaluate %s for %d: %s", eq, var, e)
                continue
            (found_c if derived.count_members() == 2 else found_p).append(derived)  # noqa: PLR2004
        if not found_c and not found_p:
            derived = _fallback(eq)
            if derived is None:
                logger.debug("Dropping %s", eq)
                continue
            logger.debug("Keeping %s unsubstituted", eq)
            (found_c if derived.count_members() == 2 else found_p).append(derived)  # noqa: PLR2004
        if found_c:
            constants.setdefault(index, []).extend(found_c)
        if found_p:
            partials.setdefault(index, []).extend(found_p)
    ret_c = _flatten(constants)
    ret_p = _flatten(partials)
    logger.debug("Extracted %d constants and %d partial equations", len(ret_c), len(ret_p))
    return ret_c, ret_p
