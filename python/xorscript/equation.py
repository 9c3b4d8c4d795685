"""XOR equations and their simplification.

An equation :code:`left = right` states that the XOR of the terms on the left equals the XOR of the terms on the right.
Extraction keeps every equation in the normal form :code:`v = expr` where :code:`expr` does not reference :code:`v`.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING

from typing_extensions import assert_never

from xorscript.common import UnsolvableEquationError, VariableNotFoundError
from xorscript.expression import (
    TRUE,
    Const,
    Single,
    Var,
    Xor,
    evaluate,
    expression_key,
    from_terms,
    terms,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from xorscript.expression import Expression, Value


class Side(enum.Enum):
    """Side of an equation."""

    LEFT = enum.auto()
    RIGHT = enum.auto()


@dataclasses.dataclass(frozen=True)
class Equation:
    """Constraint :code:`XOR(left) == XOR(right)`."""

    left: Expression
    right: Expression

    @classmethod
    def from_script(cls, ids: Iterable[int]) -> Equation:
        """Build :code:`XOR(ids) = 1` for the variables referenced by one script."""
        return cls(Xor(tuple(Var(i) for i in ids)), Single(TRUE))

    def __str__(self) -> str:
        return f"{self.left} = {self.right}"

    def key(self) -> tuple[object, ...]:
        """Sort key used to deduplicate equations."""
        return (expression_key(self.left), expression_key(self.right))

    def count_members(self) -> int:
        """Count terms on both sides.

        A normalized equation with two members binds its variable to a constant.
        """
        return len(terms(self.left)) + len(terms(self.right))

    def locate_variable(self, var: int) -> Side:
        """Find the side referencing `var`, checking the left side first.

        Raises
        ------
        VariableNotFoundError
            If `var` appears on neither side.
        """
        target = Var(var)
        if target in terms(self.left):
            return Side.LEFT
        if target in terms(self.right):
            return Side.RIGHT
        msg = f"{target} not found in {self}."
        raise VariableNotFoundError(msg)

    def substitute(self, var: int, replace: int | None = None, replacement: Sequence[Value] = ()) -> Equation:
        """Solve for `var`, optionally replacing another variable on the way.

        Parameters
        ----------
        var : `int`
            Variable to isolate on the left.
        replace : `int` or `None`
            Variable whose every occurrence is replaced by `replacement`.
        replacement : `collections.abc.Sequence`
            Terms equal to `replace`.

        Returns
        -------
        `Equation`
            Normalized :code:`var = ...`.

        Raises
        ------
        VariableNotFoundError
            If `var` is not referenced.
        UnsolvableEquationError
            If `var` is referenced on both sides or reintroduced by `replacement`.
        """
        side = self.locate_variable(var)
        target = Var(var)
        other = self.right if side is Side.LEFT else self.left
        if target in terms(other):
            msg = f"{target} appears on both sides of {self}."
            raise UnsolvableEquationError(msg)
        rest = [v for v in (*terms(self.left), *terms(self.right)) if v != target]
        if replace is not None:
            old = Var(replace)
            hits = rest.count(old)
            rest = [v for v in rest if v != old]
            rest.extend(list(replacement) * hits)
        return Equation(Single(target), from_terms(rest)).isolate_left()

    def isolate_left(self) -> Equation:
        """Collapse the right side of :code:`v = ...`.

        Constants fold into one, variables occurring an even number of times cancel.
        The result lists the constant first, then the surviving variables in ascending order.

        Raises
        ------
        ValueError
            If the left side is not a single variable.
        UnsolvableEquationError
            If the left variable occurs on the right.
        """
        if not isinstance(self.left, Single) or not isinstance(self.left.value, Var):
            msg = "Left side must be a single variable."
            raise ValueError(msg)
        target = self.left.value
        parity = False
        odd: set[int] = set()
        for v in terms(self.right):
            if v == target:
                msg = f"{target} appears on both sides of {self}."
                raise UnsolvableEquationError(msg)
            if isinstance(v, Const):
                parity ^= v.value
            elif isinstance(v, Var):
                odd ^= {v.id}
            else:
                assert_never(v)
        return Equation(self.left, from_terms([Const(parity), *(Var(i) for i in sorted(odd))]))

    def variables_on_left(self) -> list[int]:
        """Variable ids referenced on the left side."""
        return [v.id for v in terms(self.left) if isinstance(v, Var)]

    def variables(self) -> set[int]:
        """Variable ids referenced on either side."""
        return {v.id for v in (*terms(self.left), *terms(self.right)) if isinstance(v, Var)}

    def is_satisfied(self, assignment: Mapping[int, bool]) -> bool:
        """Check the equation under a partial assignment.

        Returns `True` as long as any referenced variable is unassigned, so that
        a partial assignment is rejected only once the equation is provably violated.
        """
        lhs = evaluate(terms(self.left), assignment)
        if lhs is None:
            return True
        rhs = evaluate(terms(self.right), assignment)
        if rhs is None:
            return True
        return lhs == rhs

    def as_constant(self) -> tuple[int, bool]:
        """Unpack :code:`v = const`.

        Raises
        ------
        ValueError
            If the equation does not bind a single variable to a constant.
        """
        if (
            isinstance(self.left, Single)
            and isinstance(self.left.value, Var)
            and isinstance(self.right, Single)
            and isinstance(self.right.value, Const)
        ):
            return self.left.value.id, self.right.value.value
        msg = f"{self} is not a constant equation."
        raise ValueError(msg)
