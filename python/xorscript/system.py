"""XOR systems defined by variable-script incidence.

Each script constrains the variables it references to XOR to :code:`1`.
This module provides functions to count and pick the solutions of such systems.
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

import numpy as np

from xorscript import _common, extract, solver
from xorscript._common import IndexMap
from xorscript.common import FREE_VARIABLE_WARNING, SolveResult, UnsatisfiableError, V

if TYPE_CHECKING:
    from collections.abc import Set as AbstractSet

    import networkx as nx
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def solve_matrix(a: npt.ArrayLike) -> tuple[int, npt.NDArray[np.bool_]] | None:
    """Solve the XOR system described by an incidence matrix.

    Parameters
    ----------
    a : `numpy.typing.ArrayLike`
        Incidence matrix of shape :code:`(variables, scripts)`.
        :code:`a[i, j]` is nonzero if and only if script :code:`j` references variable :code:`i`.

    Returns
    -------
    `tuple` or `None`
        Number of solutions and the first solution as a boolean vector,
        or `None` if there is no solution or no script at all.
    """
    a = _common.arraycheck(a)
    if a.ndim != 2:  # noqa: PLR2004
        msg = "a must be a 2D array."
        raise ValueError(msg)
    rows, cols = a.shape
    if cols == 0:
        logger.info("No scripts given.")
        return None
    equations = extract.from_scripts((np.flatnonzero(a[:, j]) + 1).tolist() for j in range(cols))
    try:
        constants, partials = extract.extract(equations)
    except UnsatisfiableError as e:
        logger.info("%s", e)
        return None
    variables = list(range(1, rows + 1))
    nfree = rows - len({eq.as_constant()[0] for eq in constants})
    if nfree > FREE_VARIABLE_WARNING:
        msg = f"{nfree} variables remain free after extraction. Search may be slow."
        warnings.warn(msg, stacklevel=2)
    if ret_ := solver.solve(variables, constants, partials):
        count, bits = ret_
        return count, _common.decode_bits(bits)
    return None


def find(g: nx.Graph[V], vset: AbstractSet[V], sset: AbstractSet[V]) -> SolveResult[V] | None:
    """Solve the XOR system described by a bipartite graph.

    Parameters
    ----------
    g : `networkx.Graph`
        Simple bipartite graph connecting each script to the variables it references.
    vset : `collections.abc.Set`
        Variable nodes.
    sset : `collections.abc.Set`
        Script nodes.

    Returns
    -------
    `SolveResult` or `None`
        Return the number of solutions and an example if any, otherwise `None`.

    Notes
    -----
    Variables are ordered as iterated from `vset`, which determines the example picked.
    """
    _common.check_graph(g, vset, sset)
    vcodec = IndexMap(vset)
    scodec = IndexMap(sset)
    a_ = vcodec.encode_incidence(g, scodec)
    if ret_ := solve_matrix(a_):
        count, bits = ret_
        return SolveResult(count, vcodec.decode_bits(bits))
    return None
