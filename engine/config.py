"""
config.py — Visualizer Configuration
=====================================
Typed settings for one visualizer session.  Defaults reproduce the
classic layout: a 700 × 480 logical canvas, 22 px nodes and one
animation tick every 700 ms.

The Flask app builds this from its own config object, so every field
can be overridden with a TRAVERSAL_* environment variable, e.g.

    TRAVERSAL_TICK_INTERVAL=0.3 flask --app main run
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class VisualizerConfig:
    """
    Attributes:
        tick_interval    : Seconds between animation ticks.
        width, height    : Logical canvas size; drags are clamped to it.
        node_radius      : Node circle radius in logical pixels.
        drag_tolerance   : Extra pixels around a node that still count as a hit.
        poll_interval_ms : How often the browser polls /api/state while animating.
        max_sessions     : Server-side sessions kept before the oldest is evicted.
    """
    tick_interval:    float = 0.7
    width:            int   = 700
    height:           int   = 480
    node_radius:      int   = 22
    drag_tolerance:   int   = 4
    poll_interval_ms: int   = 150
    max_sessions:     int   = 1000

    @property
    def hit_radius(self) -> float:
        return self.node_radius + self.drag_tolerance

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "VisualizerConfig":
        """
        Pick matching upper-case keys (TICK_INTERVAL, CANVAS_WIDTH, …) out
        of a Flask-style config mapping.  Unknown keys are ignored.
        """
        aliases = {"width": "CANVAS_WIDTH", "height": "CANVAS_HEIGHT"}
        kwargs = {}
        for f in fields(cls):
            key = aliases.get(f.name, f.name.upper())
            if key in mapping:
                kwargs[f.name] = f.type(mapping[key])
        return cls(**kwargs)
