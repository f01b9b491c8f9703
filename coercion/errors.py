"""Invalid-argument errors raised by the coercion helpers."""
from __future__ import annotations

from config import NULL_INPUT_MESSAGE, UNPARSABLE_MESSAGE
from schemas.transform import FailureKind


class MathIllegalArgumentError(ValueError):
    """Raised when an argument violates a precondition of a numeric operation."""

    kind: FailureKind | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NullArgumentError(MathIllegalArgumentError):
    """Raised when a required value is ``None``."""

    kind = FailureKind.NULL_INPUT

    def __init__(self, message: str = NULL_INPUT_MESSAGE) -> None:
        super().__init__(message)


class UnparsableValueError(MathIllegalArgumentError):
    """Raised when a value's text is not a floating-point literal.

    The offending text is kept on ``text`` for diagnostics.
    """

    kind = FailureKind.UNPARSABLE_VALUE

    def __init__(self, text: str) -> None:
        super().__init__(UNPARSABLE_MESSAGE.format(text=text))
        self.text = text


def error_for(kind: FailureKind, text: str | None = None) -> MathIllegalArgumentError:
    """Build the exception matching a failure kind."""
    if kind is FailureKind.NULL_INPUT:
        return NullArgumentError()
    return UnparsableValueError("" if text is None else text)
