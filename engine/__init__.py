"""
engine/
-------
Animation & session layer.

    from engine import Visualizer, Animator, VisualizerConfig, VisualizerStore
"""

from engine.config     import VisualizerConfig
from engine.animator   import Animator, AnimatorState
from engine.visualizer import Visualizer, EditResult
from engine.store      import VisualizerStore

__all__ = [
    "VisualizerConfig",
    "Animator",
    "AnimatorState",
    "Visualizer",
    "EditResult",
    "VisualizerStore",
]
