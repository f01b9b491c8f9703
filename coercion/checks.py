from __future__ import annotations

from typing import Any

from config import NULL_INPUT_MESSAGE
from coercion.errors import NullArgumentError


def check_not_null(value: Any, message: str = NULL_INPUT_MESSAGE) -> None:
    """Raise :class:`NullArgumentError` when *value* is ``None``."""
    if value is None:
        raise NullArgumentError(message)
