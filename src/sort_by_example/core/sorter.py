"""Sorting whole sequences into the order of an example."""
from __future__ import annotations

import functools
import logging
from time import perf_counter
from typing import Any, Iterable, Optional

from ..config import Fallback, SortOptions, Transform
from .comparer import RankComparator
from .models import RankTable, resolve_reference

logger = logging.getLogger(__name__)


class SequenceSorter:
    """Callable that returns a new list ordered like the example.

    With an ``xform`` every item's key is computed once per call; the keys
    drive the rank lookup and the fallback is handed
    ``(key_a, key_b, item_a, item_b)``.
    """

    def __init__(self, table: RankTable, options: SortOptions) -> None:
        self.table = table
        self.options = options
        self.comparator = RankComparator(table, options.fallback)

    def __call__(self, items: Iterable[Any]) -> list[Any]:
        start = perf_counter()
        if self.options.xform is None:
            ordered = sorted(items, key=self.comparator.as_key())
        else:
            ordered = self._sort_transformed(items)
        logger.debug(
            "Sorted %d items in %.6fs (precomputed keys=%s)",
            len(ordered),
            perf_counter() - start,
            self.options.has_xform,
        )
        return ordered

    def _sort_transformed(self, items: Iterable[Any]) -> list[Any]:
        xform = self.options.xform
        decorated = [(xform(item), item) for item in items]
        compare_keys = self.comparator.compare_keys

        def _compare_pairs(left: tuple[Any, Any], right: tuple[Any, Any]) -> int:
            return compare_keys(left[0], right[0], left[1], right[1])

        decorated.sort(key=functools.cmp_to_key(_compare_pairs))
        return [item for _, item in decorated]


def build_sorter(
    example: Any,
    options: Any = None,
    *,
    fallback: Optional[Fallback] = None,
    xform: Optional[Transform] = None,
) -> SequenceSorter:
    """Return a function that sorts sequences to look like ``example``.

    ``options`` may be a ``SortOptions``, a mapping with ``fallback`` and
    ``xform`` keys, or a bare fallback callable::

        sorter = build_sorter(["first", "second", "third"])
        sorter(["third", "unknown", "first"])
        # -> ["first", "third", "unknown"]
    """
    table = resolve_reference(example)
    sort_options = SortOptions.coerce(options, fallback=fallback, xform=xform)
    return SequenceSorter(table, sort_options)


def sbe(
    example: Any,
    options: Any = None,
    *,
    fallback: Optional[Fallback] = None,
    xform: Optional[Transform] = None,
) -> SequenceSorter:
    """Short alias for ``build_sorter``."""
    return build_sorter(example, options, fallback=fallback, xform=xform)


__all__ = ["SequenceSorter", "build_sorter", "sbe"]
