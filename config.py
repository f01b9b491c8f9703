from __future__ import annotations

import logging
import os
from typing import Final

# Logging
LOG_LEVEL: Final[str] = os.environ.get("COERCION_LOG_LEVEL", "INFO").strip().upper() or "INFO"
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_DATEFMT: Final[str] = "%H:%M:%S"

# Error messages
NULL_INPUT_MESSAGE: Final[str] = "object transformation requires a non-null value"
UNPARSABLE_MESSAGE: Final[str] = "cannot transform {text} to a double"

# Batch failure handling
ERROR_POLICIES: Final[tuple[str, str]] = ("raise", "nan")
DEFAULT_ERROR_POLICY: Final[str] = "raise"

_LEVEL_NAMES: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str | None = None) -> str:
    """Configure root logging with the project format and return the level used."""
    requested = level.strip().upper() if level else LOG_LEVEL
    if requested not in _LEVEL_NAMES:
        requested = LOG_LEVEL if LOG_LEVEL in _LEVEL_NAMES else "INFO"
    logging.basicConfig(
        level=getattr(logging, requested),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    # basicConfig is a no-op once root has handlers
    logging.getLogger().setLevel(requested)
    return requested
