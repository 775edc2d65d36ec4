# tests/test_ui.py
"""
Tests for the presentation layer (ui/): matrix table and SVG canvas.
Rendering must reflect the highlight set and never mutate state.
"""
import re

from algorithms import get_algorithm, list_algorithms
from ui import (
    edge_editor,
    pseudocode_viewer,
    render_canvas,
    render_matrix,
    status_bar,
    traversal_controls,
)


def _cells(html):
    return re.findall(r'<td class="([^"]*)">([^<]*)</td>', html)


class TestMatrix:

    def test_plain_matrix(self, viz):
        html = render_matrix(viz.snapshot())
        cells = _cells(html)
        assert len(cells) == 25
        # row 0: – 4 0 0 2
        assert [v for _, v in cells[:5]] == ["–", "4", "0", "0", "2"]
        assert [c for c, _ in cells[:5]] == ["diagonal", "nonzero", "", "", "nonzero"]
        assert 'class="highlight"' not in html

    def test_highlight_needs_both_ends_and_an_edge(self, viz):
        viz.start_traversal("bfs")
        viz.tick()
        viz.tick()            # highlighted {0, 1}
        cells = _cells(render_matrix(viz.snapshot()))
        row0 = [c for c, _ in cells[:5]]
        row1 = [c for c, _ in cells[5:10]]
        assert row0 == ["diagonal", "highlight", "", "", "nonzero"]
        assert row1 == ["highlight", "diagonal", "nonzero", "", ""]

    def test_headers_follow_highlight(self, viz):
        viz.start_traversal("dfs")
        viz.tick()
        html = render_matrix(viz.snapshot())
        assert '<th class="highlight">0</th>' in html
        assert '<th class="">1</th>' in html


class TestCanvas:

    def test_draws_each_node_and_edge_once(self, viz):
        svg = render_canvas(viz.snapshot())
        assert svg.count('class="node') == 5
        assert svg.count('class="edge') == 5
        assert '>6</text>' in svg          # weight label of 3 ↔ 4

    def test_visited_styling(self, viz):
        viz.start_traversal("dfs")
        viz.tick()
        viz.tick()
        svg = render_canvas(viz.snapshot())
        assert svg.count('class="node visited"') == 2
        assert svg.count('class="edge visited"') == 1
        assert "#a855f7" in svg            # dfs palette

    def test_render_does_not_mutate(self, viz):
        snap = viz.snapshot()
        render_canvas(snap)
        render_matrix(snap)
        assert snap == viz.snapshot()


class TestControls:

    def test_traversal_buttons(self):
        html = traversal_controls(list_algorithms(), active_kind="bfs")
        assert 'data-kind="bfs"' in html and 'data-kind="dfs"' in html
        assert 'btn-reset' in html

    def test_edge_editor_range(self):
        assert "nodes 0 – 4" in edge_editor(5)

    def test_status_bar_escapes(self):
        html = status_bar("ERROR: <bad>", "error")
        assert "&lt;bad&gt;" in html
        assert 'class="status error"' in html

    def test_pseudocode(self):
        assert "queue.dequeue()" in pseudocode_viewer(get_algorithm("bfs"))
        assert "Start a traversal" in pseudocode_viewer(None)

    def test_pseudocode_shows_summary_and_cost(self):
        html = pseudocode_viewer(get_algorithm("dfs"))
        assert "Dives as deep as possible" in html
        assert "time O(V + E) · space O(V)" in html
