"""Common functionalities."""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)  #: Variable node type.


FREE_VARIABLE_WARNING = 24
"""Number of variables left unfixed after extraction above which a slow search is reported."""


class UnsolvableEquationError(ValueError):
    """Target variable cannot be isolated because it appears on both sides."""


class VariableNotFoundError(ValueError):
    """Variable is not referenced where it is looked up."""


class UnsatisfiableError(ValueError):
    """System of equations has no solution."""


@dataclasses.dataclass(frozen=True)
class SolveResult(Generic[V]):
    r"""Solution summary of an XOR system."""

    count: int
    """Number of assignments satisfying every equation."""
    example: dict[V, bool]
    r"""First satisfying assignment found, i.e., the lexicographically smallest one \
    in variable order with :code:`False < True`.
    """
