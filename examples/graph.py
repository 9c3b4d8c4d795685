"""Example code for solving an XOR system given as a graph."""

# %%

from __future__ import annotations

import networkx as nx
from xorscript import system

g: nx.Graph[int | str]

# %%

# 1   2   3
#  \ / \ /
#   a   b
g = nx.Graph([(1, "a"), (2, "a"), (2, "b"), (3, "b")])
vset = {1, 2, 3}
sset = {"a", "b"}

result = system.find(g, vset, sset)

# Found: 1 and 3 are the opposite of 2
assert result is not None
assert result.count == 2
assert result.example == {1: False, 2: True, 3: False}

# %%

# 1 - a
#   \
#     c
#   /
# 2 - b
g = nx.Graph([(1, "a"), (2, "b"), (1, "c"), (2, "c")])
vset = {1, 2}
sset = {"a", "b", "c"}

# Not found
result = system.find(g, vset, sset)

assert result is None
