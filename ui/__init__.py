"""
ui/
---
Presentation layer.

    from ui import render_canvas, render_matrix
    from ui import traversal_controls, edge_editor, …
"""

from ui.canvas import render_canvas, CanvasConfig
from ui.matrix import render_matrix

from ui.controls import (
    traversal_controls,
    edge_editor,
    status_bar,
    pseudocode_viewer,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "render_matrix",
    "traversal_controls",
    "edge_editor",
    "status_bar",
    "pseudocode_viewer",
]
