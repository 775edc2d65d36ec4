"""
edge.py — Weighted Undirected Edge
==================================
A read-only view of one entry of the weight matrix.  The Graph owns the
matrix; Edge objects are produced on demand so callers never hold a
reference into it.

Design decisions:
  - `Graph.edges()` lists each undirected edge once with `u < v`, so the
    renderer draws it exactly once.  Edits return the endpoints in the
    order the caller named them, which is how status messages echo them.
  - Weight is display-only.  BFS / DFS only care whether the edge exists.
"""

from typing import NamedTuple


class Edge(NamedTuple):
    u:      int
    v:      int
    weight: int

    def to_dict(self) -> dict:
        return {"u": self.u, "v": self.v, "weight": self.weight}

    def __repr__(self) -> str:
        return f"Edge({self.u} ↔ {self.v}, w={self.weight})"
