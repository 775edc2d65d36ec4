"""
animator.py — Traversal Animation State Machine
================================================
Reveals a traversal order one node per tick and exposes the growing
highlight set to the renderer.

State machine:
    IDLE     →  start()              →  RUNNING
    RUNNING  →  tick() (cursor < n)  →  RUNNING   (one more node highlighted)
    RUNNING  →  tick() (cursor == n) →  DONE      (timer stopped, highlights kept)
    any      →  start()              →  RUNNING   (old timer + highlights discarded)
    any      →  cancel()             →  timer stopped, highlights kept
    any      →  clear()              →  IDLE

Timing:
  There is at most one timer, and it is just a due time.  Nothing runs in
  the background: the caller drives the clock by calling poll() (the
  browser polls /api/state), and poll() fires every tick that has come
  due, strictly in order, one interval apart.  The clock is injected so
  tests can step time by hand.

  Cancelling only stops future ticks.  It never rewinds highlights that
  were already applied.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class AnimatorState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    DONE    = "done"


# ---------------------------------------------------------------------------
# Animator
# ---------------------------------------------------------------------------
class Animator:
    """
    Attributes:
        interval : Seconds between ticks.
        status   : Latest message produced by a tick ("" until the first one).
    """

    def __init__(self, interval: float = 0.7, clock: Callable[[], float] = time.monotonic):
        self.interval: float = interval
        self.status:   str   = ""
        self._clock = clock

        self._state:       AnimatorState              = AnimatorState.IDLE
        self._kind:        Optional[str]              = None
        self._sequence:    Optional[Tuple[int, ...]]  = None
        self._cursor:      int                        = 0
        self._highlighted: Set[int]                   = set()
        self._next_due:    Optional[float]            = None   # None ⇔ no timer

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start(self, sequence: Sequence[int], kind: str) -> None:
        """Pre-empt whatever is running and begin revealing `sequence`."""
        self.cancel()
        self._highlighted.clear()
        self._kind     = kind
        self._sequence = tuple(sequence)
        self._cursor   = 0
        self._state    = AnimatorState.RUNNING
        self._next_due = self._clock() + self.interval
        logger.debug("%s animation started: %s", kind, self._sequence)

    def tick(self) -> Optional[str]:
        """
        Advance by exactly one step and return the status message it
        produced.  Does nothing (returns None) unless RUNNING with a live
        timer, so a cancelled run can never be advanced again.
        """
        if not self.is_running:
            return None

        label = self._kind.upper()
        total = len(self._sequence)

        if self._cursor < total:
            node = self._sequence[self._cursor]
            self._highlighted.add(node)
            self.status = f"{label} — visiting node {node} (step {self._cursor + 1}/{total})"
            self._cursor += 1
        else:
            self._next_due = None
            self._state    = AnimatorState.DONE
            visited = " → ".join(str(n) for n in self._sequence)
            self.status = f"{label} complete — visited: [{visited}]"

        logger.debug(self.status)
        return self.status

    def poll(self) -> List[str]:
        """Fire every tick that is due by now, oldest first."""
        messages: List[str] = []
        now = self._clock()
        while self._next_due is not None and now >= self._next_due:
            self._next_due += self.interval
            message = self.tick()
            if message is not None:
                messages.append(message)
        return messages

    def cancel(self) -> None:
        """Stop the timer.  Highlights and cursor stay where they are."""
        self._next_due = None

    def clear(self) -> None:
        """Stop the timer and forget the run entirely."""
        self.cancel()
        self._highlighted.clear()
        self._kind     = None
        self._sequence = None
        self._cursor   = 0
        self._state    = AnimatorState.IDLE

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> AnimatorState:
        return self._state

    @property
    def kind(self) -> Optional[str]:
        return self._kind

    @property
    def sequence(self) -> Optional[Tuple[int, ...]]:
        return self._sequence

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def highlighted(self) -> FrozenSet[int]:
        return frozenset(self._highlighted)

    @property
    def timer_active(self) -> bool:
        return self._next_due is not None

    @property
    def is_running(self) -> bool:
        return self._state is AnimatorState.RUNNING and self.timer_active

    # ------------------------------------------------------------------
    # Serialisation (session storage)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "state":       self._state.value,
            "kind":        self._kind,
            "sequence":    list(self._sequence) if self._sequence is not None else None,
            "cursor":      self._cursor,
            "highlighted": sorted(self._highlighted),
            "next_due":    self._next_due,
            "status":      self.status,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        interval: float = 0.7,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Animator":
        anim = cls(interval=interval, clock=clock)
        anim._state       = AnimatorState(data.get("state", "idle"))
        anim._kind        = data.get("kind")
        seq               = data.get("sequence")
        anim._sequence    = tuple(int(n) for n in seq) if seq is not None else None
        anim._cursor      = int(data.get("cursor", 0))
        anim._highlighted = {int(n) for n in data.get("highlighted", [])}
        anim._next_due    = data.get("next_due")
        anim.status       = data.get("status", "")
        return anim
