"""Locale-aware date, currency and string formatting helpers."""

import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Literal
from zoneinfo import ZoneInfo

from babel.dates import format_date as babel_format_date
from babel.dates import format_datetime as babel_format_datetime
from babel.numbers import format_currency as babel_format_currency

from transport.config import get_config
from transport.errors import validation_error
from transport.services.pricing import round_money

DateMode = Literal["short", "long", "iso"]

_LONG_PATTERN = "d MMMM y 'at' hh:mm a"
_CURRENCY_PATTERN = "¤#,##0.##"
_ELLIPSIS = "..."


def _as_utc(value: date | datetime) -> datetime:
    """Naive datetimes and plain dates are taken to be UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


# -------- dates --------
def format_date(
    value: date | datetime,
    mode: DateMode = "short",
    locale: str | None = None,
    tz: str | None = None,
) -> str:
    """
    Format a date for display.

    - ``iso``:   UTC timestamp, millisecond precision, ``Z`` suffix
    - ``short``: locale medium date, e.g. ``19 Oct 2026``
    - ``long``:  full month name with 2-digit hour and minute

    Locale and time zone default to the configured ``locale`` and ``timezone``.
    """
    if mode == "iso":
        return _as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    config = get_config()
    locale = locale or config.locale
    tz = tz or config.timezone
    local = _as_utc(value).astimezone(ZoneInfo(tz))
    if mode == "long":
        return babel_format_datetime(local, _LONG_PATTERN, tzinfo=ZoneInfo(tz), locale=locale)
    if mode == "short":
        return babel_format_date(local.date(), format="medium", locale=locale)
    raise ValueError(f"Unknown date format mode: {mode}")


def parse_date(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime string into an aware datetime."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, TypeError, ValueError) as e:
        raise validation_error(f"Invalid date format: {value}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_date_in_past(value: datetime, now: datetime | None = None) -> bool:
    now = now if now is not None else datetime.now(timezone.utc)
    return value < now


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


def calculate_days_between(start: datetime, end: datetime) -> int:
    """Whole days between two instants, partial days rounded up."""
    return math.ceil(abs((end - start).total_seconds()) / 86400)


# -------- currency --------
def format_currency(amount: float, code: str | None = None, locale: str | None = None) -> str:
    """Format with up to 2 decimals, rounded half-up like prices. Defaults come from config."""
    config = get_config()
    return babel_format_currency(
        round_money(amount),
        code or config.currency,
        format=_CURRENCY_PATTERN,
        locale=locale or config.locale,
        currency_digits=False,
    )


def parse_currency(value: str) -> float:
    cleaned = re.sub(r"[^0-9.\-]", "", value)
    try:
        return float(cleaned)
    except ValueError as e:
        raise validation_error(f"Invalid currency format: {value}") from e


# -------- strings --------
def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:].lower()


def slugify(value: str) -> str:
    slug = value.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def truncate(value: str, length: int = 50) -> str:
    if len(value) <= length:
        return value
    return value[:length] + _ELLIPSIS
