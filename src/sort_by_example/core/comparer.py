"""Rank-based comparison built from an example ordering."""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional

from ..config import Fallback, SortOptions, Transform
from ..errors import IncompatibleOptionsError
from ..utils import sign, three_way
from .models import UNRANKED, RankTable, resolve_reference

logger = logging.getLogger(__name__)


class RankComparator:
    """Orders values by their rank in a ``RankTable``.

    Ranked values sort before unranked ones.  Ties (equal ranks, or two
    unranked values) go to the fallback when there is one and compare equal
    otherwise.
    """

    __slots__ = ("table", "fallback")

    def __init__(self, table: RankTable, fallback: Optional[Fallback] = None) -> None:
        self.table = table
        self.fallback = fallback

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare_keys(a, b)

    def compare_keys(self, key_a: Any, key_b: Any, *originals: Any) -> int:
        """Compare two keys; ``originals`` are forwarded to the fallback."""
        rank_a = self.table.lookup(key_a)
        rank_b = self.table.lookup(key_b)
        if rank_a is not UNRANKED and rank_b is not UNRANKED:
            result = three_way(rank_a, rank_b)
            if result:
                return result
            return self._tie(key_a, key_b, originals)
        if rank_a is not UNRANKED:
            return -1
        if rank_b is not UNRANKED:
            return 1
        return self._tie(key_a, key_b, originals)

    def _tie(self, key_a: Any, key_b: Any, originals: tuple[Any, ...]) -> int:
        if self.fallback is None:
            return 0
        return sign(self.fallback(key_a, key_b, *originals))

    def as_key(self) -> Callable[[Any], Any]:
        """Key function for ``sorted`` and ``list.sort``."""
        return functools.cmp_to_key(self)


def build_comparator(
    example: Any,
    options: Any = None,
    *,
    fallback: Optional[Fallback] = None,
    xform: Optional[Transform] = None,
) -> RankComparator:
    """Return a two-argument comparator ordering values like ``example``.

    ``example`` is a pre-sorted sequence or a value -> rank mapping.  An
    ``xform`` is rejected: key extraction is only supported by the sorter,
    which computes each key once.
    """
    table = resolve_reference(example)
    sort_options = SortOptions.coerce(options, fallback=fallback, xform=xform)
    if sort_options.has_xform:
        raise IncompatibleOptionsError("you may not build a transformation into a comparator")
    logger.debug(
        "Built comparator (ranked=%d, fallback=%s)", len(table), sort_options.has_fallback
    )
    return RankComparator(table, sort_options.fallback)


def build_key(
    example: Any,
    options: Any = None,
    *,
    fallback: Optional[Fallback] = None,
) -> Callable[[Any], Any]:
    """``build_comparator`` wrapped for use as ``key=`` in ``sorted``."""
    return build_comparator(example, options, fallback=fallback).as_key()


__all__ = ["RankComparator", "build_comparator", "build_key"]
