# tests/test_visualizer.py
"""
Tests for the session object (engine/visualizer.py): edits, the status
channel, and how edits interact with a running animation.
"""
import pytest

from graph import Graph
from engine import AnimatorState, EditResult, Visualizer, VisualizerConfig


def _run_to_end(viz, clock, steps=6):
    clock.advance(float(steps))
    viz.poll()


# ═════════════════════════════════════════════════════════════════
#  Status channel
# ═════════════════════════════════════════════════════════════════

class TestStatus:

    def test_add_edge_status(self, viz):
        result = viz.add_edge(0, 2, 7)
        assert result == EditResult(ok=True, status="EDGE ADDED: 0 ↔ 2  [weight 7]", level="info")
        assert viz.status == result.status

    def test_remove_edge_status(self, viz):
        result = viz.remove_edge(4, 0)
        assert result.ok
        assert viz.status == "EDGE REMOVED: 4 ↔ 0"

    def test_endpoints_echoed_in_typed_order(self, viz):
        assert viz.add_edge(2, "0", 5).status == "EDGE ADDED: 2 ↔ 0  [weight 5]"
        assert viz.remove_edge(2, 0).status == "EDGE REMOVED: 2 ↔ 0"

    def test_level_follows_status(self, viz, clock):
        viz.remove_edge(0, 2)
        assert viz.level == "warning"
        assert viz.snapshot()["level"] == "warning"
        viz.add_edge(0, 0, 1)
        assert viz.level == "error"
        viz.start_traversal("bfs")
        assert viz.level == "info"

    def test_reset_status(self, viz):
        assert viz.reset().status == "GRAPH RESET — default topology restored"

    def test_rejection_is_error(self, viz):
        result = viz.add_edge(1, 1, 3)
        assert not result.ok
        assert result.level == "error"
        assert viz.status == "ERROR: self-loops not supported"

    def test_missing_edge_is_warning_not_error(self, viz):
        result = viz.remove_edge(0, 2)
        assert result.ok
        assert result.level == "warning"
        assert viz.status == "WARNING: no edge exists between 0 and 2"

    def test_remove_twice_gives_same_warning(self, viz):
        viz.remove_edge(0, 1)
        matrix = viz.graph.matrix()
        first = viz.remove_edge(0, 1)
        second = viz.remove_edge(0, 1)
        assert first == second
        assert first.level == "warning"
        assert viz.graph.matrix() == matrix

    def test_start_status(self, viz):
        assert viz.start_traversal("dfs").status == "DFS started from node 0"

    def test_tick_updates_status(self, viz, clock):
        viz.start_traversal("bfs")
        clock.advance(1.0)
        assert viz.poll() == 1
        assert viz.status == "BFS — visiting node 0 (step 1/5)"


# ═════════════════════════════════════════════════════════════════
#  Traversal + animation
# ═════════════════════════════════════════════════════════════════

class TestTraversal:

    def test_full_bfs_run(self, viz, clock):
        viz.start_traversal("bfs")
        _run_to_end(viz, clock)
        assert viz.status == "BFS complete — visited: [0 → 1 → 4 → 2 → 3]"
        snap = viz.snapshot()
        assert snap["highlighted"] == [0, 1, 2, 3, 4]
        assert snap["state"] == "done"
        assert snap["kind"] == "bfs"
        assert snap["running"] is False

    def test_full_dfs_run(self, viz, clock):
        viz.start_traversal("dfs")
        _run_to_end(viz, clock)
        assert viz.status == "DFS complete — visited: [0 → 1 → 2 → 3 → 4]"

    def test_unknown_kind_rejected(self, viz):
        result = viz.start_traversal("dijkstra")
        assert not result.ok
        assert viz.animator.state is AnimatorState.IDLE
        assert viz.status.startswith("ERROR: unknown traversal")

    def test_second_request_preempts_first(self, viz, clock):
        viz.start_traversal("bfs")
        clock.advance(3.0)
        viz.poll()
        viz.start_traversal("dfs")
        assert viz.snapshot()["highlighted"] == []
        clock.advance(1.0)
        viz.poll()
        assert viz.status == "DFS — visiting node 0 (step 1/5)"
        assert viz.snapshot()["highlighted"] == [0]

    def test_traversal_uses_current_graph(self, viz, clock):
        viz.remove_edge(0, 4)
        viz.start_traversal("bfs")
        assert viz.animator.sequence == (0, 1, 2, 3, 4)
        viz.remove_edge(2, 3)
        viz.start_traversal("bfs")
        assert viz.animator.sequence == (0, 1, 2)


# ═════════════════════════════════════════════════════════════════
#  Edits cancel animation
# ═════════════════════════════════════════════════════════════════

class TestEditsCancelAnimation:

    @pytest.mark.parametrize("edit", [
        lambda v: v.add_edge(0, 2, 3),
        lambda v: v.remove_edge(0, 1),
        lambda v: v.reset(),
    ])
    def test_structural_edit_stops_ticks(self, viz, clock, edit):
        viz.start_traversal("bfs")
        clock.advance(2.0)
        viz.poll()
        edit(viz)
        status = viz.status
        assert not viz.animator.timer_active
        assert viz.snapshot()["highlighted"] == []
        assert viz.animator.kind is None
        clock.advance(10.0)
        assert viz.poll() == 0
        assert viz.status == status

    def test_rejected_edit_keeps_animation(self, viz, clock):
        viz.start_traversal("bfs")
        clock.advance(1.0)
        viz.poll()
        viz.add_edge(0, 0, 1)
        assert viz.animator.is_running
        clock.advance(1.0)
        viz.poll()
        assert viz.snapshot()["highlighted"] == [0, 1]

    def test_noop_remove_keeps_animation(self, viz, clock):
        viz.start_traversal("bfs")
        viz.remove_edge(0, 3)
        assert viz.animator.is_running

    def test_drag_keeps_animation(self, viz, clock):
        viz.start_traversal("dfs")
        clock.advance(1.0)
        viz.poll()
        result = viz.move_node(2, 100, 100)
        assert result.ok
        assert viz.animator.is_running
        assert viz.graph.nodes[2].position == (100.0, 100.0)

    def test_next_traversal_must_be_requested(self, viz, clock):
        viz.start_traversal("bfs")
        viz.add_edge(0, 2, 1)
        clock.advance(10.0)
        viz.poll()
        assert viz.animator.state is AnimatorState.IDLE


# ═════════════════════════════════════════════════════════════════
#  Reset, drag, matrix staleness, serialisation
# ═════════════════════════════════════════════════════════════════

class TestMisc:

    def test_reset_restores_defaults_after_history(self, viz, clock):
        viz.add_edge(0, 2, 9)
        viz.remove_edge(1, 2)
        viz.move_node(0, 30, 30)
        viz.start_traversal("dfs")
        clock.advance(2.0)
        viz.poll()
        viz.reset()
        default = Graph()
        assert viz.graph.matrix() == default.matrix()
        assert [n.position for n in viz.graph.nodes] == [n.position for n in default.nodes]
        assert viz.animator.state is AnimatorState.IDLE

    def test_drag_is_clamped_to_canvas(self, viz):
        viz.move_node(1, 5000, -5)
        assert viz.graph.nodes[1].position == (678.0, 22.0)

    def test_drag_rejects_garbage(self, viz):
        assert not viz.move_node("abc", 1, 1).ok
        assert not viz.move_node(1, "left", 1).ok

    def test_node_at_uses_drag_tolerance(self, viz):
        # node 0 at (350, 80); radius 22 + tolerance 4
        assert viz.node_at(350 + 25, 80) == 0
        assert viz.node_at(350 + 27, 80) is None

    def test_matrix_stale_flag(self, viz, clock):
        viz.mark_matrix_rendered()
        viz.remove_edge(0, 2)  # no-op
        assert viz.matrix_stale is False
        viz.add_edge(0, 2, 1)
        assert viz.matrix_stale is True
        viz.mark_matrix_rendered()
        viz.start_traversal("bfs")
        viz.mark_matrix_rendered()
        clock.advance(1.0)
        viz.poll()
        assert viz.matrix_stale is True

    def test_round_trip_mid_animation(self, viz, clock, config):
        viz.add_edge(1, 3, 2)
        viz.start_traversal("bfs")
        clock.advance(2.0)
        viz.poll()
        clone = Visualizer.from_dict(viz.to_dict(), config, clock)
        assert clone.snapshot() == viz.snapshot()
        clock.advance(1.0)
        clone.poll()
        viz.poll()
        assert clone.snapshot() == viz.snapshot()

    def test_config_from_mapping(self):
        cfg = VisualizerConfig.from_mapping({
            "TICK_INTERVAL": "0.25", "CANVAS_WIDTH": 800, "SECRET_KEY": "x",
            "ROOT": 7,
        })
        assert cfg.tick_interval == 0.25
        assert cfg.width == 800
        assert cfg.height == 480
        assert not hasattr(cfg, "root")
