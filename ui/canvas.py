"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Visualizer snapshot → SVG string.

The renderer consumes:
  • snapshot – `Visualizer.snapshot()` (positions, edges, highlights, kind)
  • config   – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - The highlight set is the only thing that decides "visited" styling:
      • node highlighted           → traversal colour (green BFS, purple DFS)
      • edge with both ends lit    → traversal colour, thicker
      • edge with one end lit      → dim cyan
      • otherwise                  → neutral
  - Each undirected edge is drawn once, weight label at its midpoint.
"""

import math
from typing import Any, Dict, Optional, Set, Tuple


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 700
    height: int = 480
    bg:     str = "#050a19"

    # traversal palette: kind → (fill, stroke)
    kind_colors: Dict[str, Tuple[str, str]] = {
        "bfs": ("#004d26", "#00ff99"),
        "dfs": ("#2e1065", "#a855f7"),
    }

    # node
    node_radius:       int = 22
    node_fill:         str = "#080d20"
    node_stroke:       str = "rgba(0,255,231,0.4)"
    node_label_color:  str = "rgba(200,230,240,0.8)"
    node_label_lit:    str = "#ffffff"
    node_label_size:   int = 13

    # edge
    edge_default:      str = "rgba(100,140,180,0.3)"
    edge_partial:      str = "rgba(0,255,231,0.4)"
    edge_width:        float = 1.5
    edge_width_lit:    float = 2.5
    weight_bg:         str = "rgba(5,10,25,0.82)"
    weight_color:      str = "rgba(255,215,0,0.55)"
    weight_color_lit:  str = "#ffd700"
    weight_size:       int = 12


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(snapshot: Dict[str, Any], config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot : Output of `Visualizer.snapshot()`.
        config   : Visual config.
    """
    positions = snapshot["positions"]
    lit: Set[int] = set(snapshot.get("highlighted", []))
    kind: Optional[str] = snapshot.get("kind")

    svg_parts = [
        f'<svg id="graph-svg" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    # -- edges (draw first so nodes sit on top) --
    for edge in snapshot["edges"]:
        svg_parts.append(_render_edge(edge, positions, lit, kind, config))

    # -- nodes --
    for index, (x, y) in enumerate(positions):
        svg_parts.append(_render_node(index, x, y, index in lit, kind, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(
    index: int,
    x: float,
    y: float,
    highlighted: bool,
    kind: Optional[str],
    config: CanvasConfig,
) -> str:
    r = config.node_radius
    fill, stroke, stroke_width = config.node_fill, config.node_stroke, 1
    label_color = config.node_label_color
    glow = ""

    if highlighted:
        fill, stroke = config.kind_colors.get(kind, config.kind_colors["bfs"])
        stroke_width = 2.5
        label_color = config.node_label_lit
        glow = (
            f'  <circle cx="{x}" cy="{y}" r="{r + 8}" fill="none" '
            f'stroke="{stroke}" stroke-width="6" opacity="0.25"/>'
        )

    parts = [
        f'<g class="node{" visited" if highlighted else ""}" data-index="{index}">',
        glow,
        f'  <circle cx="{x}" cy="{y}" r="{r}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <text x="{x}" y="{y + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{label_color}" font-weight="500">{index}</text>',
        '</g>',
    ]
    return "\n".join(p for p in parts if p)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(
    edge: Dict[str, int],
    positions,
    lit: Set[int],
    kind: Optional[str],
    config: CanvasConfig,
) -> str:
    u, v, weight = edge["u"], edge["v"], edge["weight"]
    x1, y1 = positions[u]
    x2, y2 = positions[v]

    both = u in lit and v in lit
    either = u in lit or v in lit

    if both:
        stroke = config.kind_colors.get(kind, config.kind_colors["bfs"])[1]
        stroke_width = config.edge_width_lit
    elif either:
        stroke, stroke_width = config.edge_partial, config.edge_width
    else:
        stroke, stroke_width = config.edge_default, config.edge_width

    parts = [
        f'<g class="edge{" visited" if both else ""}" data-u="{u}" data-v="{v}">',
        f'  <line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>',
    ]

    # weight pill at the midpoint; skipped for coincident endpoints
    if math.hypot(x2 - x1, y2 - y1) >= 0.001:
        mx, my = (x1 + x2) / 2, (y1 + y2) / 2
        parts.append(
            f'  <rect x="{mx - 12}" y="{my - 9}" width="24" height="18" rx="4" '
            f'fill="{config.weight_bg}"/>'
        )
        parts.append(
            f'  <text x="{mx}" y="{my + 4}" text-anchor="middle" '
            f'font-size="{config.weight_size}" font-family="\'DM Mono\', monospace" '
            f'fill="{config.weight_color_lit if both else config.weight_color}" '
            f'font-weight="500">{weight}</text>'
        )

    parts.append('</g>')
    return "\n".join(parts)
