"""Sort lists to look like the example you provide."""
from __future__ import annotations

from . import utils
from .config import SortOptions
from .core.comparer import RankComparator, build_comparator, build_key
from .core.models import OrderedList, RankMap, RankTable, resolve_reference
from .core.sorter import SequenceSorter, build_sorter, sbe
from .errors import (
    IncompatibleOptionsError,
    InvalidFallbackError,
    InvalidReferenceError,
    InvalidTransformError,
    SortByExampleError,
)

__version__ = "0.1.0"

__all__ = [
    "SortOptions",
    "RankComparator",
    "SequenceSorter",
    "OrderedList",
    "RankMap",
    "RankTable",
    "build_comparator",
    "build_key",
    "build_sorter",
    "resolve_reference",
    "sbe",
    "SortByExampleError",
    "InvalidReferenceError",
    "InvalidFallbackError",
    "InvalidTransformError",
    "IncompatibleOptionsError",
    "utils",
]
