"""
visualizer.py — Session State
==============================
The Visualizer is the ONLY object the web layer talks to.  It owns one
Graph, one Animator and the status line, and funnels every user action
through them:

    edit (add / remove / reset)  →  Graph  →  animation cleared, matrix stale
    traversal request            →  algorithms.traverse(graph)  →  Animator.start
    poll                         →  Animator.poll  →  status + matrix stale

Status channel:
  Every edit and every animation tick leaves exactly one human-readable
  message in `status`.  Rejections are prefixed "ERROR:", no-op removals
  "WARNING:" so the UI (and tests) can tell them from real changes.

Thread safety:
  None needed.  A Visualizer is rebuilt from the session for each request
  and only one timer exists per instance.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from graph import Graph, NoOpWarning, ValidationError
from algorithms import get_algorithm, traverse
from engine.animator import Animator
from engine.config import VisualizerConfig

logger = logging.getLogger(__name__)

ROOT = 0   # every traversal starts here


@dataclass(frozen=True)
class EditResult:
    """Outcome of one user action.  `level` is "info", "warning" or "error"."""
    ok:     bool
    status: str
    level:  str = "info"


class Visualizer:
    """
    Attributes:
        config       : VisualizerConfig for this session.
        graph        : The Graph Store (single source of truth for structure).
        animator     : The Animator (single source of truth for highlights).
        status       : Latest status message.
        level        : Severity of `status`: "info", "warning" or "error".
        matrix_stale : True when the matrix view no longer matches state.
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        graph: Optional[Graph] = None,
        animator: Optional[Animator] = None,
    ):
        self.config:       VisualizerConfig = config or VisualizerConfig()
        self.graph:        Graph            = graph if graph is not None else Graph()
        self.animator:     Animator         = (
            animator if animator is not None else Animator(self.config.tick_interval, clock)
        )
        self.status:       str              = "Ready — pick BFS or DFS to start from node 0"
        self.level:        str              = "info"
        self.matrix_stale: bool             = True

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------
    def add_edge(self, u: Any, v: Any, w: Any) -> EditResult:
        try:
            edge = self.graph.add_edge(u, v, w)
        except ValidationError as exc:
            return self._reject(exc)
        self._after_edit()
        logger.info("edge added %d <-> %d (w=%d)", edge.u, edge.v, edge.weight)
        return self._report(f"EDGE ADDED: {edge.u} ↔ {edge.v}  [weight {edge.weight}]")

    def remove_edge(self, u: Any, v: Any) -> EditResult:
        try:
            edge = self.graph.remove_edge(u, v)
        except ValidationError as exc:
            return self._reject(exc)
        except NoOpWarning as warn:
            logger.info("remove edge ignored: %s", warn)
            return self._report(f"WARNING: {warn}", ok=True, level="warning")
        self._after_edit()
        logger.info("edge removed %d <-> %d", edge.u, edge.v)
        return self._report(f"EDGE REMOVED: {edge.u} ↔ {edge.v}")

    def reset(self) -> EditResult:
        self.graph.reset()
        self._after_edit()
        logger.info("graph reset to default topology")
        return self._report("GRAPH RESET — default topology restored")

    def move_node(self, index: Any, x: float, y: float) -> EditResult:
        """Drag a node.  Purely positional, so a running animation keeps going."""
        try:
            node = self.graph.move_node(
                index, x, y,
                width=self.config.width,
                height=self.config.height,
                radius=self.config.node_radius,
            )
        except (ValidationError, TypeError, ValueError) as exc:
            logger.warning("move rejected: %s", exc)
            return EditResult(ok=False, status=f"ERROR: {exc}", level="error")
        return EditResult(ok=True, status=f"node {node.index} at ({node.x:.0f}, {node.y:.0f})")

    def node_at(self, x: float, y: float) -> Optional[int]:
        return self.graph.node_at(x, y, self.config.hit_radius)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def start_traversal(self, kind: str) -> EditResult:
        info = get_algorithm(kind) if isinstance(kind, str) else None
        if info is None:
            return self._reject(ValidationError(f"unknown traversal '{kind}' (expected bfs or dfs)"))

        order = traverse(self.graph, info.key, ROOT)
        self.animator.start(order, info.key)
        self.matrix_stale = True
        logger.info("%s started, order %s", info.key, order)
        return self._report(f"{info.key.upper()} started from node {ROOT}")

    def poll(self) -> int:
        """Apply every tick that has come due.  Returns how many fired."""
        messages = self.animator.poll()
        if messages:
            self.status = messages[-1]
            self.level = "info"
            self.matrix_stale = True
        return len(messages)

    def tick(self) -> Optional[str]:
        """Force one tick now (manual stepping)."""
        message = self.animator.tick()
        if message is not None:
            self.status = message
            self.level = "info"
            self.matrix_stale = True
        return message

    # ------------------------------------------------------------------
    # Read-only view for the presentation layer
    # ------------------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        anim = self.animator
        return {
            "positions":   [n.position for n in self.graph.nodes],
            "matrix":      self.graph.matrix(),
            "edges":       [e.to_dict() for e in self.graph.edges()],
            "highlighted": sorted(anim.highlighted),
            "kind":        anim.kind,
            "state":       anim.state.value,
            "running":     anim.is_running,
            "cursor":      anim.cursor,
            "sequence":    list(anim.sequence) if anim.sequence is not None else None,
            "status":      self.status,
            "level":       self.level,
            "matrix_stale": self.matrix_stale,
        }

    def mark_matrix_rendered(self) -> None:
        self.matrix_stale = False

    # ------------------------------------------------------------------
    # Serialisation (Flask session)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "graph":        self.graph.to_dict(),
            "animator":     self.animator.to_dict(),
            "status":       self.status,
            "level":        self.level,
            "matrix_stale": self.matrix_stale,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        config: Optional[VisualizerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Visualizer":
        config = config or VisualizerConfig()
        viz = cls(
            config=config,
            clock=clock,
            graph=Graph.from_dict(data["graph"]),
            animator=Animator.from_dict(data["animator"], config.tick_interval, clock),
        )
        viz.status       = data.get("status", viz.status)
        viz.level        = data.get("level", viz.level)
        viz.matrix_stale = bool(data.get("matrix_stale", True))
        return viz

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _after_edit(self) -> None:
        # structural change: any running animation is stale now
        self.animator.clear()
        self.matrix_stale = True

    def _reject(self, exc: Exception) -> EditResult:
        logger.warning("edit rejected: %s", exc)
        return self._report(f"ERROR: {exc}", ok=False, level="error")

    def _report(self, status: str, ok: bool = True, level: str = "info") -> EditResult:
        self.status = status
        self.level = level
        return EditResult(ok=ok, status=status, level=level)
