"""
bfs.py — Breadth-First Search
==============================
Queue-based level-order traversal from a fixed root.

Returns the visit order as a tuple.  Nodes come out in non-decreasing
hop distance from the root; ties break by ascending index because
`Graph.neighbors()` yields low indices first and parents are dequeued in
the order they were discovered.  Unreachable nodes never appear.

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the function so the UI can show them in the side panel.
"""

from collections import deque
from typing import List, Tuple

from graph import Graph


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, root):",                    # 0
    "    queue ← [root]",                       # 1
    "    visited ← {root}",                     # 2
    "    order ← []",                           # 3
    "    while queue is not empty:",            # 4
    "        node ← queue.dequeue()",           # 5
    "        order.append(node)",               # 6
    "        for neighbour in adj(node):",      # 7
    "            if neighbour not visited:",    # 8
    "                visited.add(neighbour)",   # 9
    "                queue.enqueue(neighbour)", # 10
    "    return order",                         # 11
]


def bfs(graph: Graph, root: int = 0) -> Tuple[int, ...]:
    """
    Args:
        graph : Graph snapshot to traverse.  Not modified.
        root  : Start node index.

    Returns:
        Visit order, each reachable node exactly once.
    """
    visited = {root}
    queue   = deque([root])
    order: List[int] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in graph.neighbors(node):
            if nbr not in visited:
                # mark on enqueue so a node is never queued twice
                visited.add(nbr)
                queue.append(nbr)

    return tuple(order)
