"""Parsing of time values from configuration, and message translation."""

from __future__ import annotations

import gettext as _gettext
import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_U64_MAX = 2**64 - 1


class ParseError(ValueError):
    """A time value could not be parsed.

    ``kind`` is one of ``"InvalidDecimal"``, ``"ExceedsLimits"`` or ``"IllFormed"``.
    """

    def __init__(self, message: str, kind: str) -> None:
        super().__init__(message)
        self.kind = kind


def gettext(msg: object) -> str:
    """Translate a user-facing message."""
    return _gettext.gettext(str(msg))


def _strip_all(value: str, suffix: str) -> str:
    while value.endswith(suffix):
        value = value[: -len(suffix)]
    return value


def _decimal(text: str) -> Decimal:
    if not _DECIMAL.fullmatch(text):
        raise ParseError(f"invalid decimal: {text!r}", "InvalidDecimal")
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ParseError(f"invalid decimal: {text!r}", "InvalidDecimal") from exc


def parse_time(time: str) -> timedelta:
    """Parse a duration ending with ``s`` or ``ms`` to whole milliseconds."""
    if time.endswith("ms"):
        millis = _decimal(_strip_all(time, "ms"))
    elif time.endswith("s"):
        millis = _decimal(_strip_all(time, "s")) * 1000
    else:
        raise ParseError(
            "unsupported time format! should be ended with 's' or 'ms'.", "IllFormed"
        )

    whole = int(millis)
    if whole < 0 or whole > _U64_MAX:
        raise ParseError(
            "could not represent duration more accurate than ms", "ExceedsLimits"
        )
    return timedelta(milliseconds=whole)