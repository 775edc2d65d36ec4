"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every traversal the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, traverse

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, …),
        "dfs": AlgoInfo(…),
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it:
the engine calls `fn` to get the visit order, the UI shows `label` and
`pseudocode`.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from graph import Graph

from algorithms.bfs import bfs as _bfs, PSEUDOCODE as _bfs_pc
from algorithms.dfs import dfs as _dfs, PSEUDOCODE as _dfs_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                                     # registry key, e.g. "bfs"
    label:            str                                     # human label
    fn:               Callable[[Graph, int], Tuple[int, ...]] # graph, root → visit order
    pseudocode:       List[str]                               # lines for the side-panel
    complexity_time:  str = ""
    complexity_space: str = ""
    description:      str = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from node 0.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives as deep as possible before backtracking.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def traverse(graph: Graph, kind: str, root: int = 0) -> Tuple[int, ...]:
    """Run the algorithm registered under `kind` and return its visit order."""
    info = get_algorithm(kind)
    if info is None:
        raise ValueError(f"Unknown algorithm: {kind}")
    return info.fn(graph, root)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "traverse",
]
