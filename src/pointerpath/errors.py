from __future__ import annotations


class PointerError(Exception):
    """Base exception for all pointer-related errors."""


class PointerTypeError(PointerError, TypeError):
    """Raised when the data cannot hold a value at the requested location.

    Missing paths are not errors; this is reserved for writes through
    scalars, string keys on arrays and similar shape mismatches.
    """


class PointerRangeError(PointerError, IndexError):
    """Raised when ``set`` would grow a list by more than ``MAX_GAP_FILL`` slots."""
