from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from collections.abc import Iterator


def iter_bmatrix(rows: int, cols: int) -> Iterator[npt.NDArray[np.bool_]]:
    """Iterate over all binary matrices with given dimensions."""
    assert rows > 0
    assert cols > 0
    size = rows * cols
    bmax = 1 << size
    for b in range(bmax):
        bv = np.fromiter(((b >> i) & 1 for i in range(size)), dtype=np.bool_)
        yield bv.reshape(rows, cols)


def iter_brute_force(a: npt.NDArray[np.bool_]) -> Iterator[npt.NDArray[np.bool_]]:
    """Iterate over all assignments making every column of `a` odd, in lexicographic order."""
    rows, _ = a.shape
    a_ = a.astype(np.int64)
    for x in itertools.product([False, True], repeat=rows):
        xv = np.asarray(x, dtype=np.bool_)
        parity = (xv.astype(np.int64) @ a_) % 2
        if np.all(parity == 1):
            yield xv


def random_incidence(rng: np.random.Generator, rows: int, cols: int) -> npt.NDArray[np.bool_]:
    """Sample a random incidence matrix where every script references at least one variable."""
    a = rng.integers(0, 2, size=(rows, cols)).astype(np.bool_)
    for j in np.flatnonzero(~a.any(axis=0)):
        a[rng.integers(rows), j] = True
    return a


def chain_incidence(rows: int) -> npt.NDArray[np.bool_]:
    """Incidence matrix of the chain :code:`i_k XOR i_{k+1} = 1`."""
    a = np.zeros((rows, rows - 1), dtype=np.bool_)
    for j in range(rows - 1):
        a[j, j] = True
        a[j + 1, j] = True
    return a
