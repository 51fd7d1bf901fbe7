"""Rank tables, comparators and sorters built from example orderings."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "RankComparator",
    "SequenceSorter",
    "build_comparator",
    "build_key",
    "build_sorter",
    "sbe",
    "OrderedList",
    "RankMap",
    "RankTable",
    "UNRANKED",
    "resolve_reference",
]


def __getattr__(name: str) -> Any:
    if name in {"RankComparator", "build_comparator", "build_key"}:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name in {"SequenceSorter", "build_sorter", "sbe"}:
        module = import_module(".sorter", __name__)
        return getattr(module, name)
    if name in {"OrderedList", "RankMap", "RankTable", "UNRANKED", "resolve_reference"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
