"""Tests for the default number transformer."""
from __future__ import annotations

import copy
import math
import pickle
import threading
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from coercion.errors import FailureKind, MathIllegalArgumentError, NullArgumentError, UnparsableValueError
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


class _Celsius:
    def __init__(self, degrees: float) -> None:
        self.degrees = degrees

    def __str__(self) -> str:
        return str(self.degrees)


@pytest.mark.parametrize(
    "value",
    [0, 7, -3, 2.5, -0.0, Fraction(1, 4), Decimal("1.25"), np.int64(9), np.float32(0.5), np.float64(-1.5)],
)
def test_numeric_values_convert_directly(value: object) -> None:
    """Numeric values, numpy scalars included, convert with float()."""
    assert transform(value) == float(value)
    assert isinstance(transform(value), float)


def test_numeric_strings() -> None:
    """Numeric text is parsed as a floating-point literal."""
    assert transform("3.14") == 3.14
    assert transform("-0.5e2") == -50.0


def test_nan_passes_through() -> None:
    """NaN as a number or as text comes back as NaN."""
    assert math.isnan(transform(float("nan")))
    assert math.isnan(transform("NaN"))


def test_huge_integers_widen_to_infinity() -> None:
    """Integers beyond the double range become signed infinity."""
    assert transform(10**400) == math.inf
    assert transform(-(10**400)) == -math.inf


def test_other_objects_use_their_text() -> None:
    """Non-numeric objects are converted through str()."""
    assert transform(_Celsius(21.5)) == 21.5


def test_none_raises_null_argument() -> None:
    """None is rejected with the null-input error."""
    with pytest.raises(NullArgumentError, match="non-null value") as excinfo:
        transform(None)
    assert excinfo.value.kind is FailureKind.NULL_INPUT


def test_unparsable_text_carries_offending_text() -> None:
    """Unparsable text keeps the offending text on the error."""
    with pytest.raises(UnparsableValueError) as excinfo:
        transform("abc")
    assert excinfo.value.text == "abc"
    assert str(excinfo.value) == "cannot transform abc to a double"
    assert excinfo.value.kind is FailureKind.UNPARSABLE_VALUE


def test_empty_string_is_unparsable_not_null() -> None:
    """The empty string is unparsable, not null and not zero."""
    with pytest.raises(UnparsableValueError) as excinfo:
        transform("")
    assert excinfo.value.text == ""


@pytest.mark.parametrize("value", [True, False, np.bool_(True), 1 + 2j, [1.0], object()])
def test_non_numeric_objects_are_unparsable(value: object) -> None:
    """bool, complex and container values are rejected through their text."""
    with pytest.raises(UnparsableValueError):
        transform(value)


def test_errors_are_value_errors() -> None:
    """Both error kinds stay catchable as ValueError."""
    assert issubclass(NullArgumentError, MathIllegalArgumentError)
    assert issubclass(UnparsableValueError, ValueError)


def test_transform_is_idempotent() -> None:
    """Repeated calls with the same input give the same result."""
    results = {transform("2.75") for _ in range(10)}
    assert results == {2.75}


class TestSingleton:
    def test_accessor_is_identity_stable(self) -> None:
        """get_instance() always returns the shared instance."""
        assert get_instance() is get_instance()
        assert get_instance() is DEFAULT_TRANSFORMER

    def test_pickle_resolves_to_shared_instance(self) -> None:
        """Unpickling gives back the shared instance."""
        restored = pickle.loads(pickle.dumps(get_instance()))
        assert restored is DEFAULT_TRANSFORMER

    def test_copy_resolves_to_shared_instance(self) -> None:
        """copy and deepcopy give back the shared instance."""
        assert copy.copy(DEFAULT_TRANSFORMER) is DEFAULT_TRANSFORMER
        assert copy.deepcopy(DEFAULT_TRANSFORMER) is DEFAULT_TRANSFORMER

    def test_instances_are_interchangeable(self) -> None:
        """Separately built instances are equal and behave the same."""
        other = DefaultTransformer()
        assert other == DEFAULT_TRANSFORMER
        assert hash(other) == hash(DEFAULT_TRANSFORMER)
        assert other.transform("1.5") == DEFAULT_TRANSFORMER.transform("1.5")

    def test_satisfies_protocol(self) -> None:
        """The default transformer satisfies NumberTransformer."""
        assert isinstance(DEFAULT_TRANSFORMER, NumberTransformer)

    def test_concurrent_calls(self) -> None:
        """Concurrent calls from several threads agree."""
        results: list[float] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(200):
                value = transform("0.125")
                with lock:
                    results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 800
        assert set(results) == {0.125}


class TestTryTransform:
    def test_success(self) -> None:
        """A parsable value gives an ok outcome."""
        outcome = try_transform("4")
        assert outcome.ok
        assert outcome.value == 4.0
        assert outcome.unwrap() == 4.0

    def test_null_input(self) -> None:
        """None gives a null-input outcome that re-raises on unwrap."""
        outcome = try_transform(None)
        assert not outcome.ok
        assert outcome.failure is FailureKind.NULL_INPUT
        with pytest.raises(NullArgumentError):
            outcome.unwrap()

    def test_unparsable_preserves_text(self) -> None:
        """Unparsable text is kept on the outcome and on the re-raised error."""
        outcome = try_transform("abc")
        assert outcome.failure is FailureKind.UNPARSABLE_VALUE
        assert outcome.text == "abc"
        with pytest.raises(UnparsableValueError) as excinfo:
            outcome.unwrap()
        assert excinfo.value.text == "abc"


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, InputKind.NULL),
        (1, InputKind.NUMERIC),
        (np.float64(1.0), InputKind.NUMERIC),
        (Decimal("1"), InputKind.NUMERIC),
        ("1", InputKind.TEXT),
        (True, InputKind.OTHER),
        (b"1", InputKind.OTHER),
    ],
)
def test_classify(value: object, kind: InputKind) -> None:
    """Values sort into the expected input variant."""
    assert classify(value) is kind


def test_signaling_nan_decimal_is_unparsable() -> None:
    """A Decimal with no float form raises the unparsable error, not a bare ValueError."""
    with pytest.raises(UnparsableValueError) as excinfo:
        transform(Decimal("sNaN"))
    assert excinfo.value.text == "sNaN"


def test_try_transform_signaling_nan_decimal() -> None:
    """try_transform reports a signaling-NaN Decimal as an unparsable outcome."""
    outcome = try_transform(Decimal("-sNaN"))
    assert outcome.failure is FailureKind.UNPARSABLE_VALUE
    assert outcome.text == "-sNaN"


def test_quiet_nan_decimal_converts() -> None:
    """A quiet-NaN Decimal is a number and converts to NaN."""
    assert math.isnan(transform(Decimal("NaN")))
