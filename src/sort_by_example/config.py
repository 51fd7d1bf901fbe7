"""Configuration dataclasses for comparator and sorter construction."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import IncompatibleOptionsError, InvalidFallbackError, InvalidTransformError
from .utils import type_name

Fallback = Callable[..., Any]
Transform = Callable[[Any], Any]

OPTION_FIELDS = ("fallback", "xform")


@dataclass(frozen=True, slots=True)
class SortOptions:
    """Optional tie-breaking comparator and key-extraction function.

    ``fallback`` receives ``(a, b)`` or, when ``xform`` is set,
    ``(key_a, key_b, item_a, item_b)`` and returns a negative, zero or
    positive number.
    """

    fallback: Optional[Fallback] = None
    xform: Optional[Transform] = None

    def __post_init__(self) -> None:
        if self.fallback is not None and not callable(self.fallback):
            raise InvalidFallbackError(
                f"invalid fallback routine: expected a callable, got {type_name(self.fallback)}"
            )
        if self.xform is not None and not callable(self.xform):
            raise InvalidTransformError(
                f"invalid xform routine: expected a callable, got {type_name(self.xform)}"
            )

    @property
    def has_fallback(self) -> bool:
        return self.fallback is not None

    @property
    def has_xform(self) -> bool:
        return self.xform is not None

    @classmethod
    def coerce(
        cls,
        options: Any = None,
        *,
        fallback: Optional[Fallback] = None,
        xform: Optional[Transform] = None,
    ) -> "SortOptions":
        """Normalise every accepted calling convention into ``SortOptions``.

        ``options`` may be ``None``, a ``SortOptions``, a mapping with
        ``fallback``/``xform`` keys, or a bare fallback callable.  Keyword
        arguments are an alternative to ``options``, not an addition to it.
        """
        keywords = {
            name: value
            for name, value in (("fallback", fallback), ("xform", xform))
            if value is not None
        }
        if options is None:
            return cls(**keywords)
        if keywords:
            raise IncompatibleOptionsError(
                "pass sort options either as one positional value or as keywords, not both"
            )
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            unknown = sorted(str(key) for key in options if key not in OPTION_FIELDS)
            if unknown:
                raise IncompatibleOptionsError(f"unknown sort options: {', '.join(unknown)}")
            return cls(**dict(options))
        return cls(fallback=options)


__all__ = ["Fallback", "Transform", "SortOptions", "OPTION_FIELDS"]
