"""Utility helpers shared by the comparator and sorter builders."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


def sign(value: Any) -> int:
    """Reduce a comparison result to -1, 0 or 1."""
    return (value > 0) - (value < 0)


def three_way(left: Any, right: Any) -> int:
    """Three-way comparison using only ``<`` and ``>``."""
    return (left > right) - (left < right)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_ordered_sequence(value: Any) -> bool:
    """True for list-like sequences; strings and bytes do not count."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def type_name(value: Any) -> str:
    if value is None:
        return "None"
    return type(value).__name__


__all__ = [
    "sign",
    "three_way",
    "is_mapping",
    "is_ordered_sequence",
    "type_name",
]
