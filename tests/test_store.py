# tests/test_store.py
"""
Tests for the server-side session store (engine/store.py).
"""
import threading

import pytest

from engine import VisualizerStore


@pytest.fixture
def store(config, clock) -> VisualizerStore:
    return VisualizerStore(config, clock, max_sessions=3)


def test_checkout_saves_on_clean_exit(store):
    with store.checkout("a") as viz:
        viz.remove_edge(0, 1)
    with store.checkout("a") as viz:
        assert viz.graph.weight(0, 1) == 0
    assert "a" in store


def test_failed_block_is_not_saved(store):
    with pytest.raises(RuntimeError):
        with store.checkout("a") as viz:
            viz.remove_edge(0, 1)
            raise RuntimeError("boom")
    with store.checkout("a") as viz:
        assert viz.graph.weight(0, 1) == 4


def test_sessions_do_not_share_state(store):
    with store.checkout("a") as viz:
        viz.add_edge(0, 2, 9)
    with store.checkout("b") as viz:
        assert viz.graph.weight(0, 2) == 0


def test_oldest_session_is_evicted(store):
    for sid in ("a", "b", "c", "d"):
        with store.checkout(sid):
            pass
    assert len(store) == 3
    assert "a" not in store
    assert "d" in store


def test_unreadable_state_is_replaced(store):
    with store.checkout("a"):
        pass
    store._states["a"] = {"graph": {"nodes": []}}
    with store.checkout("a") as viz:
        assert len(viz.graph) == 5


def test_animation_resumes_across_checkouts(store, clock):
    with store.checkout("a") as viz:
        viz.start_traversal("dfs")
    clock.advance(2.0)
    with store.checkout("a") as viz:
        assert viz.poll() == 2
        assert viz.snapshot()["highlighted"] == [0, 1]


def test_same_session_requests_run_one_at_a_time(store):
    entered = threading.Event()
    release = threading.Event()
    order = []

    def slow():
        with store.checkout("a") as viz:
            entered.set()
            release.wait(timeout=5)
            viz.remove_edge(0, 1)
            order.append("slow")

    worker = threading.Thread(target=slow)
    worker.start()
    assert entered.wait(timeout=5)

    def fast():
        with store.checkout("a") as viz:
            order.append(("fast", viz.graph.weight(0, 1)))

    second = threading.Thread(target=fast)
    second.start()
    release.set()
    worker.join(timeout=5)
    second.join(timeout=5)
    assert order == ["slow", ("fast", 0)]
