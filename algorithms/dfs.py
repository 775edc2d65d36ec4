"""
dfs.py — Depth-First Search
=============================
Pre-order depth-first traversal from a fixed root, lowest-index neighbour
first.

The classic form is recursive:

    visit(v): mark v, append v, for each unvisited neighbour i: visit(i)

Here the recursion is unrolled onto an explicit stack of neighbour
iterators (no Python recursion limit issues).  Each stack frame is the
suspended `for` loop of one recursive call, so the order produced is
exactly the recursive one.  Note this differs from the simpler
"push all neighbours, mark on pop" iterative DFS, which can visit nodes
in another order when a node is pushed more than once.
"""

from typing import Iterator, List, Tuple

from graph import Graph


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, root):",                    # 0
    "    visited ← {}",                         # 1
    "    order ← []",                           # 2
    "    visit(root)",                          # 3
    "    return order",                         # 4
    "",                                         # 5
    "def visit(node):",                         # 6
    "    visited.add(node)",                    # 7
    "    order.append(node)",                   # 8
    "    for neighbour in adj(node):",          # 9
    "        if neighbour not visited:",        # 10
    "            visit(neighbour)",             # 11
]


def dfs(graph: Graph, root: int = 0) -> Tuple[int, ...]:
    """
    Args:
        graph : Graph snapshot to traverse.  Not modified.
        root  : Start node index.

    Returns:
        Visit order, each reachable node exactly once.
    """
    visited = {root}
    order: List[int] = [root]
    stack: List[Iterator[int]] = [graph.neighbors(root)]

    while stack:
        for nbr in stack[-1]:
            if nbr not in visited:
                visited.add(nbr)
                order.append(nbr)
                stack.append(graph.neighbors(nbr))
                break
        else:
            # neighbours exhausted — return to the caller's frame
            stack.pop()

    return tuple(order)
