"""
Transform result contracts: Pydantic models for single and batch coercion.

A :class:`TransformOutcome` carries either the coerced double or the failure
kind (with the offending text), so callers can branch on the result instead of
catching exceptions.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FailureKind(str, Enum):
    NULL_INPUT = "null_input"
    UNPARSABLE_VALUE = "unparsable_value"


class TransformOutcome(BaseModel):
    """Result of coercing one value."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: float | None = None
    failure: FailureKind | None = None
    text: str | None = None

    @model_validator(mode="after")
    def _validate_variant(self) -> "TransformOutcome":
        if (self.value is None) == (self.failure is None):
            raise ValueError("exactly one of value or failure must be set")
        if self.failure is FailureKind.UNPARSABLE_VALUE and self.text is None:
            raise ValueError("unparsable failures must carry the offending text")
        return self

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> float:
        """Return the value, or raise the error matching the failure kind."""
        if self.failure is not None:
            # local import: coercion.errors imports this module
            from coercion.errors import error_for

            raise error_for(self.failure, self.text)
        return self.value  # type: ignore[return-value]


class TransformFailure(BaseModel):
    model_config = ConfigDict(extra="forbid")

    index: int = Field(ge=0)
    kind: FailureKind
    text: str | None = None


class BatchTransformReport(BaseModel):
    """Coerced values for a batch, with ``nan`` at failed positions."""

    model_config = ConfigDict(extra="forbid")

    values: list[float] = Field(default_factory=list)
    failures: list[TransformFailure] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_indices(self) -> "BatchTransformReport":
        for failure in self.failures:
            if failure.index >= len(self.values):
                raise ValueError(f"failure index {failure.index} outside batch of {len(self.values)}")
        return self

    @property
    def n_total(self) -> int:
        return len(self.values)

    @property
    def n_failed(self) -> int:
        return len(self.failures)

    @property
    def success_rate(self) -> float:
        if not self.values:
            return 0.0
        return (self.n_total - self.n_failed) / self.n_total
