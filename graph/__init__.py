"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import ValidationError, NoOpWarning
"""

from graph.node       import Node
from graph.edge       import Edge
from graph.validation import ValidationError, NoOpWarning
from graph.graph      import Graph, DEFAULT_POSITIONS, DEFAULT_EDGES

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "ValidationError",  "NoOpWarning",
    "DEFAULT_POSITIONS", "DEFAULT_EDGES",
]
