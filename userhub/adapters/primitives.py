"""Validation and sanitization helpers shared by all user adapters.

These are plain functions with no state. The only side effect is a warning
log when a date value is recovered with a fallback.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from numbers import Number
from typing import Any, Optional, TypeVar

from dateutil import parser as date_parser

from userhub.core.errors import ValidationError
from userhub.core.logging import get_logger

log = get_logger("adapters.primitives")

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ELLIPSIS = "..."

# Marks "fall back to the current time"; None is a legitimate caller fallback.
_NOW = object()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_valid_email(email: Any) -> bool:
    """Check an email against a simple ``local@domain.tld`` pattern.

    >>> is_valid_email("user@example.com")
    True
    >>> is_valid_email("invalid-email")
    False
    """
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def parse_date_safely(value: Any, fallback: Any = _NOW) -> Optional[datetime]:
    """Parse a date string, returning ``fallback`` when it cannot be parsed.

    ``fallback`` defaults to the current UTC time. Pass ``None`` to make an
    unparseable value distinguishable from "replaced with now".
    Naive results are interpreted as UTC.
    """
    if fallback is _NOW:
        fallback = utcnow()

    if not value:
        return fallback

    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = date_parser.parse(str(value))
        except (ValueError, OverflowError, TypeError):
            log.bind(value=value).warning(f'Invalid date format: "{value}", using fallback')
            return fallback

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def clamp_future_date(value: Optional[datetime], adapter_name: str) -> Optional[datetime]:
    """Replace a date that lies in the future with the current time."""
    if value is None:
        return None
    now = utcnow()
    if value > now:
        log.bind(adapter=adapter_name, value=value.isoformat()).warning(
            f"[{adapter_name}] Future registration date detected, using current date"
        )
        return now
    return value


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """Trim whitespace and cap the length.

    When truncating, ``...`` is appended after the first ``max_length``
    characters, so the result is ``max_length + 3`` characters long.
    """
    if not text:
        return ""

    sanitized = text.strip()
    if max_length and len(sanitized) > max_length:
        return sanitized[:max_length] + ELLIPSIS
    return sanitized


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def require_field(value: Any, field_name: str, adapter_name: str) -> None:
    """Raise ValidationError if ``value`` is None, blank or NaN."""
    is_empty = (
        value is None
        or (isinstance(value, str) and value.strip() == "")
        or _is_nan(value)
    )
    if is_empty:
        raise ValidationError(
            f"[{adapter_name}] Missing or invalid required field: {field_name}",
            adapter_name=adapter_name,
            field_name=field_name,
        )


def parse_number(value: Any, field_name: str, adapter_name: str) -> Number:
    """Convert ``value`` to a number, raising ValidationError on failure.

    Numbers are returned unchanged. Strings holding an integer become ``int``,
    other numeric strings become ``float``.
    """
    parsed: Any = float("nan")
    if isinstance(value, Number) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            parsed = int(text)
        except ValueError:
            try:
                parsed = float(text)
            except ValueError:
                pass

    if _is_nan(parsed):
        raise ValidationError(
            f"[{adapter_name}] Invalid number format for field: {field_name}: {value}",
            adapter_name=adapter_name,
            field_name=field_name,
        )
    return parsed


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address."""
    return email.strip().lower()


def get_value_or_default(value: Optional[T], default: T) -> T:
    """Return ``default`` when ``value`` is None or an empty string."""
    if value is None or (isinstance(value, str) and value == ""):
        return default
    return value
