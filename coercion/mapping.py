from __future__ import annotations

import logging
import math
from typing import Any

from coercion.checks import check_not_null
from coercion.transformer import (
    DEFAULT_TRANSFORMER,
    InputKind,
    NumberTransformer,
    classify,
)

logger = logging.getLogger(__name__)


class TransformerMap:
    """Registry of per-type transformers.

    Numbers and strings always go through the default transformer.  Other
    values use the transformer registered for their type (or the nearest base
    class in the MRO); values of unregistered types transform to ``nan``.
    """

    def __init__(self, default: NumberTransformer | None = None) -> None:
        self.default_transformer: NumberTransformer = (
            DEFAULT_TRANSFORMER if default is None else default
        )
        self._transformers: dict[type, NumberTransformer] = {}

    def register(self, type_: type, transformer: NumberTransformer) -> NumberTransformer | None:
        """Map *type_* to *transformer*, returning the entry it replaces."""
        if not isinstance(type_, type):
            raise TypeError(f"expected a type, got {type_!r}")
        check_not_null(transformer, "transformer must not be None")
        if not isinstance(transformer, NumberTransformer):
            raise TypeError(f"{transformer!r} has no transform() method")
        previous = self._transformers.get(type_)
        self._transformers[type_] = transformer
        logger.debug("Registered %r for %s", transformer, type_.__qualname__)
        return previous

    def unregister(self, type_: type) -> NumberTransformer | None:
        removed = self._transformers.pop(type_, None)
        if removed is not None:
            logger.debug("Unregistered transformer for %s", type_.__qualname__)
        return removed

    def get_transformer(self, type_: type) -> NumberTransformer | None:
        found = self._transformers.get(type_)
        if found is not None:
            return found
        for base in type_.__mro__[1:]:
            if base in self._transformers:
                return self._transformers[base]
        return None

    def contains_type(self, type_: type) -> bool:
        return type_ in self._transformers

    def contains_transformer(self, transformer: NumberTransformer) -> bool:
        return any(t is transformer for t in self._transformers.values())

    def types(self) -> list[type]:
        return list(self._transformers)

    def transformers(self) -> list[NumberTransformer]:
        return list(self._transformers.values())

    def clear(self) -> None:
        self._transformers.clear()
        logger.debug("Cleared transformer map")

    def transform(self, value: Any) -> float:
        check_not_null(value)
        if classify(value) in (InputKind.NUMERIC, InputKind.TEXT):
            return self.default_transformer.transform(value)
        transformer = self.get_transformer(type(value))
        if transformer is None:
            return math.nan
        return transformer.transform(value)

    def __len__(self) -> int:
        return len(self._transformers)

    def __contains__(self, type_: object) -> bool:
        return type_ in self._transformers
