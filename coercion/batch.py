"""
Batch coercion over iterables, numpy arrays and pandas Series.

Failures either propagate (``errors="raise"``) or become ``nan``
(``errors="nan"``), in which case one warning summarises how many values were
dropped.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
import pandas as pd

from config import DEFAULT_ERROR_POLICY, ERROR_POLICIES
from coercion.errors import MathIllegalArgumentError, NullArgumentError, UnparsableValueError
from coercion.transformer import DEFAULT_TRANSFORMER, NumberTransformer
from schemas.transform import BatchTransformReport, TransformFailure

logger = logging.getLogger(__name__)


def _check_policy(errors: str) -> None:
    if errors not in ERROR_POLICIES:
        raise ValueError(f"Unknown error policy '{errors}'. Available: {', '.join(ERROR_POLICIES)}")


def _coerce_all(
    values: Iterable[Any],
    transformer: NumberTransformer,
    errors: str,
) -> tuple[np.ndarray, int]:
    out: list[float] = []
    n_failed = 0
    for value in values:
        try:
            out.append(transformer.transform(value))
        except MathIllegalArgumentError:
            if errors == "raise":
                raise
            out.append(np.nan)
            n_failed += 1
    return np.asarray(out, dtype=np.float64), n_failed


def transform_many(
    values: Iterable[Any],
    *,
    transformer: NumberTransformer | None = None,
    errors: str = DEFAULT_ERROR_POLICY,
) -> np.ndarray:
    """Coerce every value and return a float64 array of the same length."""
    _check_policy(errors)
    if transformer is None:
        transformer = DEFAULT_TRANSFORMER
    result, n_failed = _coerce_all(values, transformer, errors)
    if n_failed:
        logger.warning("Coerced %d of %d values to NaN", n_failed, len(result))
    return result


def transform_series(
    series: pd.Series,
    *,
    transformer: NumberTransformer | None = None,
    errors: str = DEFAULT_ERROR_POLICY,
) -> pd.Series:
    """Coerce a Series element-wise, keeping its index and name."""
    _check_policy(errors)
    if transformer is None:
        transformer = DEFAULT_TRANSFORMER
    result, n_failed = _coerce_all(series.tolist(), transformer, errors)
    if n_failed:
        logger.warning(
            "Coerced %d of %d values to NaN in series %r", n_failed, len(result), series.name
        )
    return pd.Series(result, index=series.index, name=series.name, dtype=np.float64)


def transform_report(
    values: Iterable[Any],
    *,
    transformer: NumberTransformer | None = None,
) -> BatchTransformReport:
    """Coerce every value, recording failures instead of raising."""
    if transformer is None:
        transformer = DEFAULT_TRANSFORMER
    coerced: list[float] = []
    failures: list[TransformFailure] = []
    for index, value in enumerate(values):
        try:
            coerced.append(transformer.transform(value))
        except UnparsableValueError as exc:
            coerced.append(float("nan"))
            failures.append(TransformFailure(index=index, kind=exc.kind, text=exc.text))
        except NullArgumentError as exc:
            coerced.append(float("nan"))
            failures.append(TransformFailure(index=index, kind=exc.kind))
    logger.debug("Batch report: %d values, %d failures", len(coerced), len(failures))
    return BatchTransformReport(values=coerced, failures=failures)
