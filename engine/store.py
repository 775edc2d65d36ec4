"""
store.py — Server-side Session Store
====================================
Keeps each browser session's Visualizer on the server, keyed by an opaque
id.  The Flask cookie only carries that id, so a response that arrives
late can never roll the state back to an older copy.

    store = VisualizerStore(config, clock)
    with store.checkout(sid) as viz:
        viz.add_edge(0, 2, 7)
    # saved on clean exit, discarded if the block raised

Every checkout of one id holds that id's lock for the whole request, so
overlapping requests from the same page are applied one after another.
The store lives in process memory: run the app with a single worker
process (threads are fine).
"""

import logging
import secrets
import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from engine.config import VisualizerConfig
from engine.visualizer import Visualizer

logger = logging.getLogger(__name__)


class VisualizerStore:
    """
    Attributes:
        config       : VisualizerConfig handed to every Visualizer.
        max_sessions : Oldest sessions are evicted beyond this many.
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        max_sessions: int = 1000,
    ):
        self.config = config or VisualizerConfig()
        self.max_sessions = max_sessions
        self._clock = clock
        self._states: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._locks:  Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    @staticmethod
    def new_id() -> str:
        return secrets.token_urlsafe(16)

    def __contains__(self, sid: str) -> bool:
        with self._guard:
            return sid in self._states

    def __len__(self) -> int:
        with self._guard:
            return len(self._states)

    @contextmanager
    def checkout(self, sid: str) -> Iterator[Visualizer]:
        """Lend out the session's Visualizer, saving it when the block exits cleanly."""
        with self._lock_for(sid):
            viz = self._load(sid)
            yield viz
            self._save(sid, viz)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _lock_for(self, sid: str) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(sid, threading.Lock())

    def _load(self, sid: str) -> Visualizer:
        with self._guard:
            data = self._states.get(sid)
        if data is not None:
            try:
                return Visualizer.from_dict(data, self.config, self._clock)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("discarding unreadable state for session %s: %s", sid[:6], exc)
        return Visualizer(self.config, self._clock)

    def _save(self, sid: str, viz: Visualizer) -> None:
        with self._guard:
            self._states[sid] = viz.to_dict()
            self._states.move_to_end(sid)
            while len(self._states) > self.max_sessions:
                old, _ = self._states.popitem(last=False)
                self._locks.pop(old, None)
                logger.info("evicted session %s", old[:6])

