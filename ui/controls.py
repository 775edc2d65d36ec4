"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • traversal_controls  – BFS / DFS start buttons + reset
  • edge_editor         – u / v / weight inputs with add & remove
  • status_bar          – the single status line
  • pseudocode_viewer   – pseudocode for the running (or default) algorithm

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import List, Optional

from algorithms import AlgoInfo


def _escape(text: str) -> str:
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


# ---------------------------------------------------------------------------
# Traversal Controls
# ---------------------------------------------------------------------------
def traversal_controls(
    algorithms: List[AlgoInfo],
    active_kind: Optional[str] = None,
    running: bool = False,
) -> str:
    buttons = []
    for algo in algorithms:
        active = 'active' if algo.key == active_kind else ''
        buttons.append(
            f'<button class="btn-traverse {active}" data-kind="{algo.key}" '
            f'title="{algo.label} — {algo.complexity_time}">▶ {algo.key.upper()}</button>'
        )

    return f"""
    <div class="panel traversal-controls">
      <h3>Traversal <span class="muted">from node 0</span></h3>
      <div class="button-row">
        {''.join(buttons)}
        <button id="btn-reset" class="btn-secondary">⟲ Reset</button>
      </div>
      <div class="run-state">{'animating…' if running else ''}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Edge Editor
# ---------------------------------------------------------------------------
def edge_editor(num_nodes: int) -> str:
    hi = max(num_nodes - 1, 0)
    return f"""
    <div class="panel edge-editor">
      <h3>Edges <span class="muted">nodes 0 – {hi}</span></h3>
      <div class="input-row">
        <input id="eu" type="number" min="0" max="{hi}" placeholder="u">
        <input id="ev" type="number" min="0" max="{hi}" placeholder="v">
        <input id="ew" type="number" min="1" placeholder="weight">
      </div>
      <div class="button-row">
        <button id="btn-add-edge" class="btn-primary">+ Add edge</button>
        <button id="btn-remove-edge" class="btn-secondary">− Remove edge</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Status Bar
# ---------------------------------------------------------------------------
def status_bar(status: str, level: str = "info") -> str:
    return f'<div id="status" class="status {level}">// {_escape(status)}</div>'


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(algo: Optional[AlgoInfo] = None) -> str:
    if algo is None:
        return """
        <div class="code-block">
          <div class="muted">Start a traversal to view its pseudocode</div>
        </div>
        """

    lines_html = [
        f'<div class="code-line" data-line="{i}">{_escape(line) or "&nbsp;"}</div>'
        for i, line in enumerate(algo.pseudocode)
    ]
    return f"""
    <div class="code-block">
      <div class="code-title">{algo.label}</div>
      <div class="muted">{_escape(algo.description)}</div>
      <div class="muted">time {algo.complexity_time} · space {algo.complexity_space}</div>
      {''.join(lines_html)}
    </div>
    """
