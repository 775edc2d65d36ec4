"""
node.py — Graph Node
====================
A node is identified by its position in the graph's node sequence
(index 0 … N-1).  The index never changes; only the canvas position does,
when the user drags the node around.

Design decisions:
  - Position is presentation data.  Traversal and edit logic only ever
    look at `index`, never at `x` / `y`.
  - `__slots__` keeps the object small; a graph holds a handful of these
    and they are rebuilt from the session on every request.
"""

from typing import Tuple


class Node:
    """
    Attributes:
        index : Stable integer id, 0-based.
        x, y  : Canvas coordinates in logical pixels.
    """

    __slots__ = ("index", "x", "y")

    def __init__(self, index: int, x: float = 0.0, y: float = 0.0):
        self.index: int = index
        self.x: float   = x
        self.y: float   = y

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance from the node centre to an arbitrary point."""
        return ((self.x - x) ** 2 + (self.y - y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"index": self.index, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(index=int(data["index"]), x=float(data["x"]), y=float(data["y"]))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node({self.index}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Node)
            and self.index == other.index
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash(self.index)
