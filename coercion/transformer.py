"""
NumberCoercer
=============
Stateless conversion of numeric values and numeric text into ``float``.

``DEFAULT_TRANSFORMER`` is the one shared instance; ``get_instance()`` returns
it and pickling/copying resolve back to it.  The module-level ``transform`` and
``try_transform`` functions delegate to it.
"""
from __future__ import annotations

import math
import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from coercion.checks import check_not_null
from coercion.errors import NullArgumentError, UnparsableValueError
from coercion.parsing import parse_double
from schemas.transform import TransformOutcome


@runtime_checkable
class NumberTransformer(Protocol):
    """Anything that turns an object into a double."""

    def transform(self, value: Any) -> float: ...


class InputKind(str, Enum):
    NULL = "null"
    NUMERIC = "numeric"
    TEXT = "text"
    OTHER = "other"


def classify(value: Any) -> InputKind:
    """Sort *value* into the variant the transformer dispatches on."""
    if value is None:
        return InputKind.NULL
    # bool is an int subclass but is not treated as a number
    if isinstance(value, bool):
        return InputKind.OTHER
    if isinstance(value, (numbers.Real, Decimal)):
        return InputKind.NUMERIC
    if isinstance(value, str):
        return InputKind.TEXT
    return InputKind.OTHER


def _numeric_to_float(value: numbers.Real | Decimal) -> float:
    try:
        return float(value)
    except OverflowError:
        # int / Fraction beyond double range
        return -math.inf if value < 0 else math.inf
    except ValueError as exc:
        # Decimal("sNaN") has no float form
        raise UnparsableValueError(str(value)) from exc


def _text_to_float(text: str) -> float:
    try:
        return parse_double(text)
    except ValueError as exc:
        raise UnparsableValueError(text) from exc


class DefaultTransformer:
    """Coerce numbers and numeric strings to ``float``.

    Numeric values (``numbers.Real``, including numpy scalars, and
    ``Decimal``) convert directly.  Everything else is converted through its
    ``str()`` form, which must be a floating-point literal.
    """

    __slots__ = ()

    def transform(self, value: Any) -> float:
        """Return *value* as a float.

        Raises:
            NullArgumentError: *value* is ``None``.
            UnparsableValueError: the text of *value* is not a float literal.
        """
        check_not_null(value)
        kind = classify(value)
        if kind is InputKind.NUMERIC:
            return _numeric_to_float(value)
        if kind is InputKind.TEXT:
            return _text_to_float(value)
        return _text_to_float(str(value))

    def try_transform(self, value: Any) -> TransformOutcome:
        """Like :meth:`transform`, but return the failure instead of raising."""
        try:
            result = self.transform(value)
        except UnparsableValueError as exc:
            return TransformOutcome(failure=exc.kind, text=exc.text)
        except NullArgumentError as exc:
            return TransformOutcome(failure=exc.kind)
        return TransformOutcome(value=result)

    def __reduce__(self) -> tuple[Any, tuple[()]]:
        return (get_instance, ())

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_TRANSFORMER = DefaultTransformer()


def get_instance() -> DefaultTransformer:
    """Return the shared transformer."""
    return DEFAULT_TRANSFORMER


def transform(value: Any) -> float:
    return DEFAULT_TRANSFORMER.transform(value)


def try_transform(value: Any) -> TransformOutcome:
    return DEFAULT_TRANSFORMER.try_transform(value)
