"""Example code for XOR system solver."""

# %%
from __future__ import annotations

import numpy as np
from xorscript import system

# %%
# Incidence matrix: rows are variables, columns are scripts
#
# Script No. 0 references variables 0, 1 and 2
a = [
    [1],
    [1],
    [1],
]

# %%
ret = system.solve_matrix(a)

# Solution found
assert ret is not None

count, bits = ret

# Half of all assignments have odd parity
assert count == 4

# Lowest variable first, False before True
assert np.array_equal(bits, [0, 0, 1])

# %%
# Scripts No. 0 and No. 1 fix variables 0 and 1, script No. 2 contradicts them
a = [
    [1, 0, 1],
    [0, 1, 1],
]

# No solution
assert system.solve_matrix(a) is None
