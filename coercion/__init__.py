"""coercion package - number transformers, literal parsing, and batch helpers."""

from coercion.checks import check_not_null
from coercion.errors import MathIllegalArgumentError, NullArgumentError, UnparsableValueError
from coercion.parsing import is_double_literal, parse_double
from coercion.transformer import (
    DEFAULT_TRANSFORMER,
    DefaultTransformer,
    InputKind,
    NumberTransformer,
    classify,
    get_instance,
    transform,
    try_transform,
)
from coercion.mapping import TransformerMap
from coercion.batch import transform_many, transform_report, transform_series

__all__ = [
    "check_not_null",
    "MathIllegalArgumentError",
    "NullArgumentError",
    "UnparsableValueError",
    "parse_double",
    "is_double_literal",
    "DEFAULT_TRANSFORMER",
    "DefaultTransformer",
    "InputKind",
    "NumberTransformer",
    "classify",
    "get_instance",
    "transform",
    "try_transform",
    "TransformerMap",
    "transform_many",
    "transform_report",
    "transform_series",
]
