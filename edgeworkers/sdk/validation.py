"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Request validation helpers.

Every request type implements ``validate()`` as plain code built from the rule
functions below. Each rule returns a human-readable message when the value
violates it and ``None`` otherwise. ``ValidationErrors`` collects one message
per field so a single call reports every problem at once.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence

BLANK = "cannot be blank"

REPORT_DATE_FORMAT = "YYYY-MM-DDTHH:MM:SS.sssZ"
_REPORT_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(\.\d+)?Z$")


class ValidationErrors(dict):
    """Mapping of field name to validation message.

    Renders as ``"field: message; other: message."`` with fields sorted, and
    is falsy when there is nothing to report.
    """

    def add(self, field: str, message: Optional[str]) -> None:
        """Record ``message`` for ``field`` unless it is ``None``."""
        if message:
            self[field] = message

    def first(self, field: str, *messages: Optional[str]) -> None:
        """Record the first non-empty message in ``messages`` for ``field``."""
        for message in messages:
            if message:
                self[field] = message
                return

    def nest(self, prefix: str, errors: Mapping[str, str]) -> None:
        """Record errors of a nested object under ``prefix.<field>``."""
        for field, message in errors.items():
            self[f"{prefix}.{field}"] = message

    def __str__(self) -> str:
        if not self:
            return ""
        return "; ".join(f"{k}: {self[k]}" for k in sorted(self)) + "."


# -- Rules -------------------------------------------------------------------

def _value_of(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def is_blank(value: Any) -> bool:
    """Whether ``value`` is the zero value of its type."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def required(value: Any) -> Optional[str]:
    if is_blank(_value_of(value)):
        return BLANK
    return None


def not_none(value: Any) -> Optional[str]:
    if value is None:
        return BLANK
    return None


def length_between(value: Optional[str], minimum: int, maximum: int) -> Optional[str]:
    """Length bounds. Empty values are left to ``required``."""
    if not value:
        return None
    if not minimum <= len(value) <= maximum:
        return f"the length must be between {minimum} and {maximum}"
    return None


def render_choices(choices: Sequence[Any]) -> str:
    """Render legal values as ``'a' or 'b'`` or ``'a', 'b', 'c'``."""
    quoted = [f"'{_value_of(c)}'" for c in choices]
    if len(quoted) == 2:
        return " or ".join(quoted)
    return ", ".join(quoted)


def one_of(value: Any, choices: Iterable[Any]) -> Optional[str]:
    """Enum membership. Blank values are left to ``required``."""
    raw = _value_of(value)
    if is_blank(raw):
        return None
    choices = list(choices)
    if raw not in [_value_of(c) for c in choices]:
        return f"value '{raw}' is invalid. Must be one of: {render_choices(choices)}"
    return None


def min_value(value: Optional[int], minimum: int) -> Optional[str]:
    if value is not None and value < minimum:
        return f"must be no less than {minimum}"
    return None


def max_value(value: Optional[int], maximum: int) -> Optional[str]:
    if value is not None and value > maximum:
        return f"must be no greater than {maximum}"
    return None


def report_date(value: Optional[str]) -> Optional[str]:
    """``YYYY-MM-DDTHH:MM:SS[.sss]Z`` timestamps. Blank values are skipped."""
    if not value:
        return None
    match = _REPORT_DATE_RE.match(value)
    if match is not None:
        try:
            datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
            return None
        except ValueError:
            pass
    return f"value '{value}' is invalid. It must have format '{REPORT_DATE_FORMAT}'"
