"""Reference orderings and the rank table they resolve to."""
from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from ..errors import InvalidReferenceError
from ..utils import is_mapping, is_ordered_sequence, type_name

logger = logging.getLogger(__name__)

UNRANKED: Any = object()


@dataclass(frozen=True, slots=True)
class RankTable:
    """Immutable value -> rank lookup owned by one comparator."""

    ranks: Mapping[Hashable, Any]

    def __contains__(self, value: Any) -> bool:
        return self.lookup(value) is not UNRANKED

    def __len__(self) -> int:
        return len(self.ranks)

    def lookup(self, value: Any) -> Any:
        """Return the rank of ``value`` or ``UNRANKED``.

        Unhashable values can never be in the table, so they are unranked.
        """
        try:
            return self.ranks.get(value, UNRANKED)
        except TypeError:
            return UNRANKED

    def rank_of(self, value: Any) -> Any:
        try:
            return self.ranks[value]
        except (KeyError, TypeError):
            raise KeyError(f"{value!r} is not part of the example") from None


@dataclass(frozen=True, slots=True)
class OrderedList:
    """Example given as a pre-sorted sequence; position is rank."""

    values: tuple[Any, ...]

    def to_rank_table(self) -> RankTable:
        ranks: dict[Hashable, int] = {}
        # a repeated value keeps its last position
        for position, value in enumerate(self.values):
            ranks[value] = position
        return RankTable(MappingProxyType(ranks))


@dataclass(frozen=True, slots=True)
class RankMap:
    """Example given as explicit value -> score pairs; equal scores tie."""

    ranks: Mapping[Hashable, Any]

    def to_rank_table(self) -> RankTable:
        return RankTable(MappingProxyType(dict(self.ranks)))


Reference = Union[OrderedList, RankMap]


def as_reference(example: Any) -> Reference:
    """Classify a plain example value as one of the reference variants."""
    if isinstance(example, (OrderedList, RankMap)):
        return example
    if is_mapping(example):
        return RankMap(example)
    if is_ordered_sequence(example):
        return OrderedList(tuple(example))
    raise InvalidReferenceError(
        f"invalid example data: expected a sequence or mapping, got {type_name(example)}"
    )


def resolve_reference(example: Any) -> RankTable:
    """Build the rank table for ``example``.

    Raises ``InvalidReferenceError`` for unsupported shapes and for
    unhashable example values.
    """
    reference = as_reference(example)
    try:
        table = reference.to_rank_table()
    except TypeError as exc:
        raise InvalidReferenceError(f"invalid example data: {exc}") from exc
    logger.debug("Built rank table from %s with %d entries", type(reference).__name__, len(table))
    return table


__all__ = [
    "UNRANKED",
    "RankTable",
    "OrderedList",
    "RankMap",
    "Reference",
    "as_reference",
    "resolve_reference",
]
