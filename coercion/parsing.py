"""
Floating-point literal parsing.

``float()`` accepts spellings that are not floating-point literals in the
numeric-text sense used here (``"inf"``, ``"nan"``, ``"1_000"``, non-ASCII
digits) and rejects some that are (``"1.5f"``, ``"0x1p3"``).  This module
parses the stricter grammar:

* surrounding characters with code point <= 0x20 are trimmed;
* optional sign, then ``NaN``, ``Infinity``, a decimal literal or a hex
  literal with a mandatory binary exponent;
* an optional ``f``/``F``/``d``/``D`` type suffix, which is ignored.

Out-of-range values round to signed infinity or signed zero.
"""
from __future__ import annotations

import math
import re
from typing import Final

_TRIM_CHARS: Final[str] = "".join(chr(c) for c in range(0x21))

_SPECIAL_RE: Final[re.Pattern[str]] = re.compile(r"([+-]?)(NaN|Infinity)")
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?"
)
_HEX_RE: Final[re.Pattern[str]] = re.compile(
    r"([+-]?)0[xX]"
    r"((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)"
    r"[fFdD]?"
)
_SUFFIXES: Final[str] = "fFdD"


def _parse_hex(sign: str, body: str) -> float:
    try:
        return float.fromhex(f"{sign}0x{body}")
    except OverflowError:
        mantissa = re.split(r"[pP]", body, maxsplit=1)[0]
        if not mantissa.replace(".", "").strip("0"):
            return -0.0 if sign == "-" else 0.0
        return -math.inf if sign == "-" else math.inf


def parse_double(text: str) -> float:
    """Parse *text* as a floating-point literal.

    Raises ``ValueError`` when *text* is not a literal (the empty string
    included).
    """
    stripped = text.strip(_TRIM_CHARS)

    special = _SPECIAL_RE.fullmatch(stripped)
    if special is not None:
        sign, name = special.groups()
        if name == "NaN":
            return math.nan
        return -math.inf if sign == "-" else math.inf

    if _DECIMAL_RE.fullmatch(stripped) is not None:
        if stripped[-1] in _SUFFIXES:
            stripped = stripped[:-1]
        return float(stripped)

    hexadecimal = _HEX_RE.fullmatch(stripped)
    if hexadecimal is not None:
        return _parse_hex(*hexadecimal.groups())

    raise ValueError(f"not a floating-point literal: {text!r}")


def is_double_literal(text: str) -> bool:
    """Return True when :func:`parse_double` accepts *text*."""
    try:
        parse_double(text)
    except ValueError:
        return False
    return True
