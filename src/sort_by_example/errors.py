"""Exceptions raised while building comparators and sorters."""
from __future__ import annotations


class SortByExampleError(Exception):
    """Base class for every construction-time failure."""


class InvalidReferenceError(SortByExampleError, TypeError):
    """Raised when the example is neither an ordered sequence nor a mapping."""


class InvalidFallbackError(SortByExampleError, TypeError):
    """Raised when a fallback comparator is given but is not callable."""


class InvalidTransformError(SortByExampleError, TypeError):
    """Raised when an xform is given but is not callable."""


class IncompatibleOptionsError(SortByExampleError, ValueError):
    """Raised when options cannot be combined for the requested construction."""


__all__ = [
    "SortByExampleError",
    "InvalidReferenceError",
    "InvalidFallbackError",
    "InvalidTransformError",
    "IncompatibleOptionsError",
]
