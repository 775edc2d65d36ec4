# tests/conftest.py
"""
Shared test fixtures.
Default graph: the 5-node topology restored by reset().

    0 —4— 1 —3— 2 —5— 3 —6— 4 —2— 0      (a 5-cycle)
"""
import pytest

from graph import Graph
from engine import Animator, Visualizer, VisualizerConfig


class ManualClock:
    """Stands in for time.monotonic; tests move time forward by hand."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def graph() -> Graph:
    """Fresh default graph — safe to mutate."""
    return Graph()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def config() -> VisualizerConfig:
    """One tick per second keeps clock arithmetic exact."""
    return VisualizerConfig(tick_interval=1.0)


@pytest.fixture
def animator(clock) -> Animator:
    return Animator(interval=1.0, clock=clock)


@pytest.fixture
def viz(config, clock) -> Visualizer:
    return Visualizer(config=config, clock=clock)


@pytest.fixture
def app(clock):
    from main import create_app
    return create_app({"TESTING": True, "TICK_INTERVAL": 1.0}, clock=clock)


@pytest.fixture
def client(app):
    return app.test_client()
