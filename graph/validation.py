"""
validation.py — Edit Validation
================================
The Graph Store is the only component that validates input.  Everything
downstream (traversal, animation, rendering) trusts a Graph implicitly.

Two outcomes besides success:
  • ValidationError – the edit is rejected outright, nothing changes.
  • NoOpWarning     – the edit was well-formed but had no effect
                      (removing an edge that isn't there).
"""

from typing import Any


class ValidationError(ValueError):
    """Raised when an edit is malformed: bad type, out of range, self-loop, weight < 1."""
    pass


class NoOpWarning(UserWarning):
    """Raised when a well-formed edit would not change the graph."""
    pass


def coerce_int(value: Any, message: str = "all fields must be numbers") -> int:
    """
    Accept an int, or a string that holds one (form fields arrive as text).
    Everything else — bools, floats, None, free text — is rejected.
    """
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            pass
    raise ValidationError(message)


def check_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise ValidationError(f"node indices must be 0 – {size - 1}")


def check_weight(weight: int) -> None:
    if weight < 1:
        raise ValidationError("weight must be ≥ 1")
