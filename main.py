"""
main.py — Traversal Visualizer Flask App
==========================================
The web server that powers the visualizer.

Routes:
  GET  /                   – main UI
  GET  /api/state          – fire due animation ticks, return current view
  POST /api/edge/add       – add / overwrite an edge        {u, v, w}
  POST /api/edge/remove    – remove an edge                 {u, v}
  POST /api/graph/reset    – restore the default topology
  POST /api/traverse       – start a BFS / DFS animation    {kind}
  POST /api/node/hit       – which node is under a point?   {x, y}
  POST /api/node/move      – drag a node                    {index, x, y}

State management:
  Each browser session owns one Visualizer, held server-side in a
  VisualizerStore; the signed session cookie only carries its id.
  Requests for the same session are applied one at a time.  The
  animation has no background thread: the page polls /api/state while a
  traversal runs, and each poll fires every tick that has come due.

  The store lives in process memory, so run a single worker process.

Configuration:
  create_app() reads TRAVERSAL_* environment variables (e.g.
  TRAVERSAL_TICK_INTERVAL=0.3, TRAVERSAL_SECRET_KEY=...) and then any
  mapping passed in.
"""

import logging
import secrets
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from flask import Flask, current_app, jsonify, render_template_string, request, session

from algorithms import get_algorithm, list_algorithms
from engine import EditResult, Visualizer, VisualizerConfig, VisualizerStore
from ui import (
    CanvasConfig,
    edge_editor,
    pseudocode_viewer,
    render_canvas,
    render_matrix,
    status_bar,
    traversal_controls,
)

logger = logging.getLogger(__name__)

SESSION_KEY = "sid"


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    config: Optional[Mapping[str, Any]] = None,
    clock: Callable[[], float] = time.monotonic,
) -> Flask:
    """
    Args:
        config : Extra Flask config, applied after TRAVERSAL_* env vars.
        clock  : Seconds source for animation timing.
    """
    app = Flask(__name__)
    app.config.from_prefixed_env("TRAVERSAL")
    if config:
        app.config.update(config)
    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = secrets.token_hex(32)
        logger.warning("TRAVERSAL_SECRET_KEY not set; sessions end when this process exits")

    viz_config = VisualizerConfig.from_mapping(app.config)
    canvas_config = CanvasConfig()
    canvas_config.width = viz_config.width
    canvas_config.height = viz_config.height
    canvas_config.node_radius = viz_config.node_radius

    app.extensions["traversal"] = {
        "config": viz_config,
        "canvas": canvas_config,
        "store":  VisualizerStore(viz_config, clock, viz_config.max_sessions),
    }

    _register_routes(app)
    logger.info("traversal visualizer ready (tick every %.2fs)", viz_config.tick_interval)
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def _ext() -> Dict[str, Any]:
    return current_app.extensions["traversal"]


@contextmanager
def session_visualizer() -> Iterator[Visualizer]:
    """
    Check out this browser's Visualizer for the length of one request.
    The cookie only names the server-side slot, so replaying an old
    cookie cannot bring back old state.
    """
    store: VisualizerStore = _ext()["store"]
    sid = session.get(SESSION_KEY)
    if not isinstance(sid, str) or not sid:
        sid = store.new_id()
        session[SESSION_KEY] = sid
    with store.checkout(sid) as viz:
        yield viz


def view_payload(viz: Visualizer, result: Optional[EditResult] = None) -> Dict[str, Any]:
    """Everything the page needs to redraw after a request."""
    snap = viz.snapshot()
    payload = {
        "state":       snap,
        "svg":         render_canvas(snap, _ext()["canvas"]),
        "matrix":      render_matrix(snap) if snap["matrix_stale"] else None,
        "status":      status_bar(snap["status"], snap["level"]),
        "running":     snap["running"],
        "pseudocode":  pseudocode_viewer(get_algorithm(snap["kind"] or "bfs")),
    }
    if result is not None:
        payload["ok"] = result.ok
        payload["level"] = result.level
    viz.mark_matrix_rendered()
    return payload


def _respond(viz: Visualizer, result: EditResult):
    payload = view_payload(viz, result)
    if not result.ok:
        payload["error"] = result.status
        return jsonify(payload), 400
    return jsonify(payload)


def _json() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        ext = _ext()
        with session_visualizer() as viz:
            viz.poll()
            snap = viz.snapshot()
            html = render_template_string(
                INDEX_TEMPLATE,
                svg=render_canvas(snap, ext["canvas"]),
                matrix=render_matrix(snap),
                status=status_bar(snap["status"], snap["level"]),
                controls=traversal_controls(list_algorithms(), snap["kind"], snap["running"]),
                editor=edge_editor(len(snap["positions"])),
                pseudocode=pseudocode_viewer(get_algorithm(snap["kind"] or "bfs")),
                poll_ms=ext["config"].poll_interval_ms,
                running=snap["running"],
                width=ext["config"].width,
                height=ext["config"].height,
            )
            viz.mark_matrix_rendered()
        return html

    # -- polling ---------------------------------------------------------
    @app.route("/api/state")
    def api_state():
        with session_visualizer() as viz:
            viz.poll()
            return jsonify(view_payload(viz))

    # -- edits -----------------------------------------------------------
    @app.route("/api/edge/add", methods=["POST"])
    def api_edge_add():
        data = _json()
        with session_visualizer() as viz:
            viz.poll()
            result = viz.add_edge(data.get("u"), data.get("v"), data.get("w"))
            return _respond(viz, result)

    @app.route("/api/edge/remove", methods=["POST"])
    def api_edge_remove():
        data = _json()
        with session_visualizer() as viz:
            viz.poll()
            result = viz.remove_edge(data.get("u"), data.get("v"))
            return _respond(viz, result)

    @app.route("/api/graph/reset", methods=["POST"])
    def api_graph_reset():
        with session_visualizer() as viz:
            result = viz.reset()
            return _respond(viz, result)

    # -- traversal -------------------------------------------------------
    @app.route("/api/traverse", methods=["POST"])
    def api_traverse():
        kind = _json().get("kind", "bfs")
        with session_visualizer() as viz:
            result = viz.start_traversal(kind)
            return _respond(viz, result)

    # -- dragging --------------------------------------------------------
    @app.route("/api/node/hit", methods=["POST"])
    def api_node_hit():
        data = _json()
        try:
            x, y = float(data["x"]), float(data["y"])
        except (KeyError, TypeError, ValueError):
            return jsonify({"error": "x and y must be numbers"}), 400
        with session_visualizer() as viz:
            return jsonify({"index": viz.node_at(x, y)})

    @app.route("/api/node/move", methods=["POST"])
    def api_node_move():
        data = _json()
        with session_visualizer() as viz:
            viz.poll()
            result = viz.move_node(data.get("index"), data.get("x"), data.get("y"))
            if not result.ok:
                return jsonify({"error": result.status}), 400
            snap = viz.snapshot()
            return jsonify({
                "svg":       render_canvas(snap, _ext()["canvas"]),
                "positions": snap["positions"],
            })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Graph Traversal Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=DM+Mono:wght@400;500&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #080d20;
      --bg-darker: #050a19;
      --bg-panel: #0d1530;
      --border: rgba(0,255,231,0.15);
      --text-primary: #e6edf3;
      --text-secondary: rgba(200,230,240,0.6);
      --accent-cyan: #00ffe7;
      --accent-green: #00ff99;
      --accent-purple: #a855f7;
      --accent-gold: #ffd700;
      --accent-rose: #f43f5e;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      min-height: 100vh;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      padding: 24px 16px;
    }

    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
      padding: 20px;
      gap: 16px;
    }

    #canvas-svg svg { width: 100%; height: auto; cursor: grab; user-select: none; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 14px;
    }
    .muted { color: var(--text-secondary); font-weight: 400; text-transform: none; }

    .button-row, .input-row { display: flex; gap: 8px; margin-bottom: 10px; }
    .input-row input {
      width: 33%;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      color: var(--text-primary);
      border-radius: 6px;
      padding: 8px;
      font-family: 'DM Mono', monospace;
    }

    button {
      background: rgba(0,255,231,0.1);
      color: var(--accent-cyan);
      border: 1px solid var(--accent-cyan);
      padding: 8px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-family: 'DM Sans', sans-serif;
      font-weight: 600;
    }
    button.active { background: rgba(0,255,231,0.3); }
    .btn-traverse[data-kind="bfs"] { color: var(--accent-green); border-color: var(--accent-green); }
    .btn-traverse[data-kind="dfs"] { color: var(--accent-purple); border-color: var(--accent-purple); }
    .btn-secondary { color: var(--text-secondary); border-color: var(--border); }

    .status {
      font-family: 'DM Mono', monospace;
      font-size: 13px;
      padding: 10px 14px;
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--accent-cyan);
    }
    .status.warning { color: var(--accent-gold); }
    .status.error { color: var(--accent-rose); }

    #matrix-table { border-collapse: collapse; font-family: 'DM Mono', monospace; font-size: 13px; }
    #matrix-table th, #matrix-table td {
      width: 36px; height: 30px; text-align: center; border: 1px solid var(--border);
    }
    #matrix-table td { color: rgba(200,230,240,0.35); }
    #matrix-table td.diagonal { color: rgba(200,230,240,0.2); }
    #matrix-table td.nonzero { color: var(--accent-gold); }
    #matrix-table .highlight { color: var(--accent-green); background: rgba(0,255,153,0.08); }

    .code-block { font-family: 'DM Mono', monospace; font-size: 12px; line-height: 1.6; }
    .code-title { color: var(--accent-cyan); margin-bottom: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="controls">{{ controls|safe }}</div>
    <div id="editor">{{ editor|safe }}</div>
    <div class="panel">
      <h3>Pseudocode</h3>
      <div id="pseudocode">{{ pseudocode|safe }}</div>
    </div>
  </div>

  <div id="main">
    <div id="status-container">{{ status|safe }}</div>
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div class="panel">
      <h3>Adjacency Matrix</h3>
      <table id="matrix-table">{{ matrix|safe }}</table>
    </div>
  </div>

  <script>
    const POLL_MS = {{ poll_ms }};
    const W = {{ width }}, H = {{ height }};
    let pollTimer = null;

    // Every request goes through one chain, so responses apply in the
    // order they were sent.  `busy` counts requests not yet settled.
    let chain = Promise.resolve();
    let busy = 0;
    function enqueue(task) {
      busy += 1;
      const run = chain.then(task).finally(() => { busy -= 1; });
      chain = run.catch(() => {});
      return run;
    }

    function post(url, data) {
      return enqueue(async () => {
        const res = await fetch(url, {
          method: 'POST',
          headers: {'Content-Type': 'application/json'},
          body: JSON.stringify(data || {}),
        });
        return await res.json();
      });
    }

    function apply(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.matrix) document.getElementById('matrix-table').innerHTML = data.matrix;
      if (data.status) document.getElementById('status-container').innerHTML = data.status;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.running) startPolling(); else stopPolling();
    }

    function startPolling() {
      if (pollTimer) return;
      pollTimer = setInterval(() => {
        if (busy) return;
        enqueue(async () => {
          const res = await fetch('/api/state');
          apply(await res.json());
        });
      }, POLL_MS);
    }

    function stopPolling() {
      if (pollTimer) clearInterval(pollTimer);
      pollTimer = null;
    }

    // Traversal + reset
    document.querySelectorAll('.btn-traverse').forEach(btn => {
      btn.addEventListener('click', async () => apply(await post('/api/traverse', {kind: btn.dataset.kind})));
    });
    document.getElementById('btn-reset').addEventListener('click', async () => {
      apply(await post('/api/graph/reset'));
    });

    // Edge editor
    const field = id => document.getElementById(id).value;
    document.getElementById('btn-add-edge').addEventListener('click', async () => {
      apply(await post('/api/edge/add', {u: field('eu'), v: field('ev'), w: field('ew')}));
    });
    document.getElementById('btn-remove-edge').addEventListener('click', async () => {
      apply(await post('/api/edge/remove', {u: field('eu'), v: field('ev')}));
    });

    // Dragging: map pointer position into the SVG's logical coordinates
    let dragging = null;
    function canvasPos(e) {
      const rect = document.querySelector('#canvas-svg svg').getBoundingClientRect();
      const src = e.touches ? e.touches[0] : e;
      return {
        x: (src.clientX - rect.left) * W / rect.width,
        y: (src.clientY - rect.top) * H / rect.height,
      };
    }
    const canvasEl = document.getElementById('canvas-svg');
    async function onDown(e) {
      const data = await post('/api/node/hit', canvasPos(e));
      dragging = (data.index === null || data.index === undefined) ? null : data.index;
    }
    async function onMove(e) {
      if (dragging === null) return;
      e.preventDefault();
      if (busy) return;
      const pos = canvasPos(e);
      const data = await post('/api/node/move', {index: dragging, x: pos.x, y: pos.y});
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
    }
    function onUp() { dragging = null; }
    canvasEl.addEventListener('mousedown', onDown);
    canvasEl.addEventListener('mousemove', onMove);
    canvasEl.addEventListener('mouseup', onUp);
    canvasEl.addEventListener('mouseleave', onUp);
    canvasEl.addEventListener('touchstart', onDown, {passive: false});
    canvasEl.addEventListener('touchmove', onMove, {passive: false});
    canvasEl.addEventListener('touchend', onUp);

    {% if running %}startPolling();{% endif %}
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Graph Traversal Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    create_app().run(debug=True, host="0.0.0.0", port=5000)
