"""Backtracking solver over extracted equations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xorscript import _common
from xorscript.common import UnsatisfiableError
from xorscript.expression import terms

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

    from xorscript.equation import Equation

logger = logging.getLogger(__name__)


def seed(constants: Iterable[Equation]) -> dict[int, bool]:
    """Collect the assignment fixed by constant equations.

    Raises
    ------
    UnsatisfiableError
        If two constants disagree on the same variable.
    """
    assignment: dict[int, bool] = {}
    for eq in constants:
        var, value = eq.as_constant()
        if assignment.setdefault(var, value) != value:
            msg = f"Contradicting constants for variable {var}."
            raise UnsatisfiableError(msg)
    return assignment


def _search(
    assignment: Mapping[int, bool], variables: Sequence[int], equations: Sequence[Equation]
) -> Iterator[list[bool]]:
    # Frames hold an assignment and the position to resume the free variable scan from
    stack: list[tuple[Mapping[int, bool], int]] = [(assignment, 0)]
    while stack:
        current, pos = stack.pop()
        if not all(eq.is_satisfied(current) for eq in equations):
            continue
        while pos < len(variables) and variables[pos] in current:
            pos += 1
        if pos == len(variables):
            yield [current[v] for v in variables]
            continue
        free = variables[pos]
        # LIFO: False is explored first
        stack.append(({**current, free: True}, pos + 1))
        stack.append(({**current, free: False}, pos + 1))


def iter_solutions(
    variables: Sequence[int], constants: Iterable[Equation], equations: Iterable[Equation]
) -> Iterator[list[bool]]:
    """Iterate over all satisfying assignments.

    Unassigned variables are branched on in the order of `variables`, `False` first,
    and a branch is pruned as soon as any equation is violated.

    Parameters
    ----------
    variables : `collections.abc.Sequence`
        All variable ids.
    constants : `collections.abc.Iterable`
        Constant equations seeding the assignment.
    equations : `collections.abc.Iterable`
        Partial equations checked at every step.

    Yields
    ------
    `list`
        Values of `variables` in the same order.
    """
    try:
        assignment = seed(constants)
    except UnsatisfiableError as e:
        logger.debug("%s", e)
        return
    ordered = sorted(equations, key=lambda eq: len(terms(eq.right)))
    logger.debug("Searching %d of %d variables", sum(v not in assignment for v in variables), len(variables))
    yield from _search(assignment, variables, ordered)


def solve(
    variables: Sequence[int], constants: Iterable[Equation], equations: Iterable[Equation]
) -> tuple[int, str] | None:
    """Count satisfying assignments.

    Returns
    -------
    `tuple` or `None`
        Number of solutions and the first one as a bitstring in the order of `variables`,
        or `None` if no solution exists.
    """
    count = 0
    first: list[bool] | None = None
    for bits in iter_solutions(variables, constants, equations):
        if first is None:
            first = bits
        count += 1
    if first is None:
        return None
    return count, _common.encode_bits(first)
