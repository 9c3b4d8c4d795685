"""Private common functionalities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from collections.abc import Set as AbstractSet
from typing import Generic

import networkx as nx
import numpy as np
import numpy.typing as npt

from xorscript.common import V


def arraycheck(x: npt.ArrayLike) -> npt.NDArray[np.bool_]:
    """Cast `x` to a boolean array.

    Raises
    ------
    TypeError
        If `x` is neither boolean nor integral.
    ValueError
        If `x` contains integers other than 0 and 1.
    """
    # Cast to array with dtype inferred
    x = np.asarray(x)
    if x.dtype == np.bool_:
        return x
    if x.size == 0:
        return x.astype(np.bool_)
    if not np.issubdtype(x.dtype, np.integer):
        msg = "Need to cast non-integral dtype to boolean."
        raise TypeError(msg)
    xb = x.astype(np.bool_)
    if np.any(x != xb):
        msg = "Casted array is not equivalent to the original."
        raise ValueError(msg)
    return xb


def check_graph(g: nx.Graph[V], vset: AbstractSet[V], sset: AbstractSet[V]) -> None:
    """Check if `(g, vset, sset)` is a valid variable-script incidence graph.

    Raises
    ------
    TypeError
        If input types are incorrect.
    ValueError
        If the graph is empty, `vset` and `sset` do not partition the nodes, or an edge is not variable-script.
    """
    if not isinstance(g, nx.Graph):
        msg = "g must be a networkx.Graph."
        raise TypeError(msg)
    if not isinstance(vset, AbstractSet):
        msg = "vset must be a set."
        raise TypeError(msg)
    if not isinstance(sset, AbstractSet):
        msg = "sset must be a set."
        raise TypeError(msg)
    if len(g) == 0:
        msg = "Graph is empty."
        raise ValueError(msg)
    if vset & sset:
        msg = "vset and sset must be disjoint."
        raise ValueError(msg)
    if set(g.nodes) != vset | sset:
        msg = "Every node must be either a variable or a script."
        raise ValueError(msg)
    for u, w in g.edges:
        if (u in vset) == (w in vset):
            msg = f"Edge ({u}, {w}) does not connect a variable and a script."
            raise ValueError(msg)


def encode_bits(bits: Iterable[bool]) -> str:
    """Render `bits` as a string of '0' and '1'."""
    return "".join("1" if b else "0" for b in bits)


def decode_bits(s: str) -> npt.NDArray[np.bool_]:
    """Parse a string of '0' and '1'.

    Raises
    ------
    ValueError
        If `s` contains other characters.
    """
    if not set(s) <= {"0", "1"}:
        msg = f"Invalid bitstring {s!r}."
        raise ValueError(msg)
    return np.fromiter((c == "1" for c in s), dtype=np.bool_, count=len(s))


class IndexMap(Generic[V]):
    """Map between `V` and 0-based indices."""

    __v2i: dict[V, int]
    __i2v: list[V]

    def __init__(self, vset: Iterable[V]) -> None:
        """Initialize the map from `vset`.

        Parameters
        ----------
        vset : `collections.abc.Iterable`
            Nodes in index order.
            Can be any hashable type.
        """
        self.__i2v = list(dict.fromkeys(vset))
        self.__v2i = {v: i for i, v in enumerate(self.__i2v)}

    def __len__(self) -> int:
        return len(self.__i2v)

    def encode(self, v: V) -> int:
        """Encode `v` to the index.

        Returns
        -------
        `int`
            Index of `v`.

        Raises
        ------
        ValueError
            If `v` is not initially registered.
        """
        ind = self.__v2i.get(v)
        if ind is None:
            msg = f"{v} not found."
            raise ValueError(msg)
        return ind

    def encode_set(self, vset: AbstractSet[V]) -> set[int]:
        """Encode set."""
        return {self.encode(v) for v in vset}

    def encode_incidence(self, g: nx.Graph[V], scripts: IndexMap[V]) -> npt.NDArray[np.bool_]:
        """Encode graph as an incidence matrix.

        Returns
        -------
        `numpy.ndarray`
            Boolean matrix of shape :code:`(len(self), len(scripts))`, \
            :code:`True` where the variable is referenced by the script.
        """
        a = np.zeros((len(self), len(scripts)), dtype=np.bool_)
        for i, v in enumerate(self.__i2v):
            for j in scripts.encode_set(g[v].keys()):
                a[i, j] = True
        return a

    def decode(self, i: int) -> V:
        """Decode the index.

        Returns
        -------
        Value corresponding to the index.

        Raises
        ------
        ValueError
            If `i` is out of range.
        """
        try:
            v = self.__i2v[i]
        except IndexError:
            msg = f"{i} not found."
            raise ValueError(msg) from None
        return v

    def decode_bits(self, bits: Sequence[bool] | npt.NDArray[np.bool_]) -> dict[V, bool]:
        """Decode assignment.

        Returns
        -------
        `bits` keyed by the corresponding values.

        Raises
        ------
        ValueError
            If the length of `bits` does not match.
        """
        if len(bits) != len(self):
            msg = "Assignment must be specified for all nodes."
            raise ValueError(msg)
        return {self.decode(i): bool(b) for i, b in enumerate(bits)}
