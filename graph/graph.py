"""
graph.py — Graph Store
======================
Single source of truth for the graph structure.  Traversal algorithms
and the renderer both read from this object; only the edit methods here
write to it.

Responsibilities:
  1. Weighted, undirected edge edits      (add_edge / remove_edge)
  2. Adjacency queries                    (neighbors, weight, edges)
  3. Node positions for the canvas        (move_node / node_at)
  4. Restore the default topology         (reset)
  5. Serialisation round-trip             (to_dict / from_dict)

Design decisions:
  - Weights live in a dense N×N matrix.  N is tiny (5 by default) and the
    matrix view renders straight from it.  `0` means "no edge".
  - The matrix is symmetric at all times: every write touches (u, v) and
    (v, u) before returning.  The diagonal is never written.
  - `neighbors()` walks a row in ascending index order.  BFS / DFS tie-
    breaking depends on this order, so don't switch to a set or dict.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from graph.node import Node
from graph.edge import Edge
from graph.validation import (
    NoOpWarning,
    ValidationError,
    check_index,
    check_weight,
    coerce_int,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Default topology — restored verbatim by reset()
# ---------------------------------------------------------------------------
DEFAULT_POSITIONS: Tuple[Tuple[float, float], ...] = (
    (350, 80),
    (560, 200),
    (490, 370),
    (210, 370),
    (140, 200),
)

DEFAULT_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 4),
    (0, 4, 2),
    (1, 2, 3),
    (2, 3, 5),
    (3, 4, 6),
)


class Graph:
    """
    Attributes:
        nodes    : [Node] — index i holds node i.
        _matrix  : [[int]] — symmetric weight matrix, 0 = no edge.
    """

    def __init__(
        self,
        positions: Sequence[Tuple[float, float]] = DEFAULT_POSITIONS,
        edges: Sequence[Tuple[int, int, int]] = DEFAULT_EDGES,
    ):
        self.nodes:   List[Node]      = []
        self._matrix: List[List[int]] = []
        self._load(positions, edges)

    def _load(
        self,
        positions: Sequence[Tuple[float, float]],
        edges: Sequence[Tuple[int, int, int]],
    ) -> None:
        n = len(positions)
        self.nodes   = [Node(i, float(x), float(y)) for i, (x, y) in enumerate(positions)]
        self._matrix = [[0] * n for _ in range(n)]
        for u, v, w in edges:
            self._matrix[u][v] = w
            self._matrix[v][u] = w

    # ==================================================================
    # EDGE EDITS
    # ==================================================================
    def add_edge(self, u: Any, v: Any, w: Any) -> Edge:
        """
        Create or overwrite the edge u ↔ v with weight w.  The returned Edge
        keeps the endpoints in the order they were given.

        Raises:
            ValidationError – non-integer input, index out of range,
                              self-loop, or weight < 1.  The matrix is
                              left untouched.
        """
        u, v, w = (coerce_int(x) for x in (u, v, w))
        check_index(u, len(self))
        check_index(v, len(self))
        if u == v:
            raise ValidationError("self-loops not supported")
        check_weight(w)

        self._matrix[u][v] = w
        self._matrix[v][u] = w
        logger.debug("edge set %d <-> %d (w=%d)", u, v, w)
        return Edge(u, v, w)

    def remove_edge(self, u: Any, v: Any) -> Edge:
        """
        Delete the edge u ↔ v and return what was removed (endpoints as given).

        Raises:
            ValidationError – non-integer input or index out of range.
            NoOpWarning     – no edge exists between u and v (this also
                              covers u == v, since self-loops never exist).
        """
        u = coerce_int(u, "enter valid node indices")
        v = coerce_int(v, "enter valid node indices")
        check_index(u, len(self))
        check_index(v, len(self))

        w = self._matrix[u][v]
        if w == 0:
            raise NoOpWarning(f"no edge exists between {u} and {v}")

        self._matrix[u][v] = 0
        self._matrix[v][u] = 0
        logger.debug("edge cleared %d <-> %d", u, v)
        return Edge(u, v, w)

    def reset(self) -> None:
        """Throw away every edit and restore the default 5-node layout."""
        self._load(DEFAULT_POSITIONS, DEFAULT_EDGES)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbors(self, v: int) -> Iterator[int]:
        """Yield every i with weight(v, i) != 0, lowest index first."""
        for i, w in enumerate(self._matrix[v]):
            if w != 0:
                yield i

    def weight(self, u: int, v: int) -> int:
        return self._matrix[u][v]

    def has_edge(self, u: int, v: int) -> bool:
        return self._matrix[u][v] != 0

    def matrix(self) -> List[List[int]]:
        """A copy of the weight matrix; mutating it does not touch the graph."""
        return [list(row) for row in self._matrix]

    def edges(self) -> List[Edge]:
        """Every undirected edge once, as (u, v, weight) with u < v."""
        n = len(self)
        return [
            Edge(i, j, self._matrix[i][j])
            for i in range(n)
            for j in range(i + 1, n)
            if self._matrix[i][j] != 0
        ]

    # ==================================================================
    # POSITIONS (drag support)
    # ==================================================================
    def move_node(
        self,
        index: Any,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
    ) -> Node:
        """Move a node, clamping its centre so the circle stays on the canvas."""
        index = coerce_int(index, "enter a valid node index")
        check_index(index, len(self))
        node = self.nodes[index]
        node.move_to(
            max(radius, min(width - radius, float(x))),
            max(radius, min(height - radius, float(y))),
        )
        return node

    def node_at(self, x: float, y: float, tolerance: float) -> Optional[int]:
        """
        Index of the node under (x, y), or None.  When circles overlap the
        highest index wins, since it is drawn last and sits on top.
        """
        hit = None
        for node in self.nodes:
            if node.distance_to(x, y) < tolerance:
                hit = node.index
        return hit

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes":  [n.to_dict() for n in self.nodes],
            "matrix": self.matrix(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        nodes = sorted((Node.from_dict(nd) for nd in data["nodes"]), key=lambda n: n.index)
        matrix = data["matrix"]
        if len(matrix) != len(nodes) or any(len(row) != len(nodes) for row in matrix):
            raise ValueError("matrix shape does not match node count")

        edges = [
            (i, j, int(matrix[i][j]))
            for i in range(len(nodes))
            for j in range(i + 1, len(nodes))
            if matrix[i][j]
        ]
        return cls(positions=[n.position for n in nodes], edges=edges)

    # ==================================================================
    # Dunder
    # ==================================================================
    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={len(self.edges())})"
