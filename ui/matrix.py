"""
matrix.py — Adjacency Matrix Table
====================================
Pure rendering function: Visualizer snapshot → HTML <table> rows.

  - Cells show the weight; 0 means no edge.
  - The diagonal is shown as "–" (self-loops don't exist).
  - A row / column header gets class "highlight" once its node is visited.
  - A cell gets class "highlight" when both endpoints are visited and the
    edge exists, "nonzero" when the edge exists otherwise.
"""

from typing import Any, Dict, List, Set


def render_matrix(snapshot: Dict[str, Any]) -> str:
    matrix: List[List[int]] = snapshot["matrix"]
    lit: Set[int] = set(snapshot.get("highlighted", []))
    n = len(matrix)

    rows = ['<tr><th>·</th>' + "".join(
        f'<th class="{_hl(j, lit)}">{j}</th>' for j in range(n)
    ) + '</tr>']

    for i in range(n):
        cells = [f'<tr><th class="{_hl(i, lit)}">{i}</th>']
        for j in range(n):
            if i == j:
                cells.append('<td class="diagonal">–</td>')
                continue
            val = matrix[i][j]
            cls = ""
            if val != 0 and i in lit and j in lit:
                cls = "highlight"
            elif val != 0:
                cls = "nonzero"
            cells.append(f'<td class="{cls}">{val}</td>')
        cells.append('</tr>')
        rows.append("".join(cells))

    return "\n".join(rows)


def _hl(index: int, lit: Set[int]) -> str:
    return "highlight" if index in lit else ""
