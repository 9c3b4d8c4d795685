"""Boolean terms and their XOR combinations."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeAlias

from typing_extensions import assert_never

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclasses.dataclass(frozen=True)
class Const:
    """Boolean constant."""

    value: bool

    def __str__(self) -> str:
        return "1" if self.value else "0"


@dataclasses.dataclass(frozen=True)
class Var:
    """Reference to a variable by its 1-based id."""

    id: int

    def __str__(self) -> str:
        return f"i_{self.id}"


TRUE = Const(True)  # noqa: FBT003
FALSE = Const(False)  # noqa: FBT003

Value: TypeAlias = Const | Var


@dataclasses.dataclass(frozen=True)
class Single:
    """Expression made of exactly one term."""

    value: Value

    def __str__(self) -> str:
        return str(self.value)


@dataclasses.dataclass(frozen=True)
class Xor:
    """Exclusive-or of the contained terms.

    Identical variables cancel pairwise.
    The order of terms carries no meaning but is kept for deduplication.
    """

    values: tuple[Value, ...]

    def __str__(self) -> str:
        return " XOR ".join(str(v) for v in self.values)


Expression: TypeAlias = Single | Xor


def value_key(value: Value) -> tuple[int, int]:
    """Sort key placing constants before variables."""
    if isinstance(value, Const):
        return (0, int(value.value))
    if isinstance(value, Var):
        return (1, value.id)
    assert_never(value)


def expression_key(expr: Expression) -> tuple[int, tuple[tuple[int, int], ...]]:
    """Sort key over the structure of `expr`."""
    if isinstance(expr, Single):
        return (0, (value_key(expr.value),))
    if isinstance(expr, Xor):
        return (1, tuple(value_key(v) for v in expr.values))
    assert_never(expr)


def terms(expr: Expression) -> tuple[Value, ...]:
    """Return the terms of `expr` regardless of its kind."""
    if isinstance(expr, Single):
        return (expr.value,)
    if isinstance(expr, Xor):
        return expr.values
    assert_never(expr)


def from_terms(values: Iterable[Value]) -> Expression:
    """Build `Single` for exactly one term, otherwise `Xor`."""
    values = tuple(values)
    if len(values) == 1:
        return Single(values[0])
    return Xor(values)


def evaluate(values: Iterable[Value], assignment: Mapping[int, bool]) -> bool | None:
    """XOR `values` under `assignment`.

    Returns
    -------
    `bool` or `None`
        Parity of the terms, or `None` if any variable is unassigned.
    """
    acc = False
    for v in values:
        if isinstance(v, Const):
            acc ^= v.value
        elif isinstance(v, Var):
            bit = assignment.get(v.id)
            if bit is None:
                return None
            acc ^= bit
        else:
            assert_never(v)
    return acc
