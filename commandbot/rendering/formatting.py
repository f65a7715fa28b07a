"""Formatting helpers shared by the command handlers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
import ipaddress
import math
import re
from typing import Any

from dateutil import parser, tz

from commandbot.rendering.attachment import fallback_text

PLACEHOLDER = "N/A"

DAYS_PER_MONTH = 146097 / 4800
DAYS_PER_YEAR = 146097 / 400


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _parse_timestamp(value: str | datetime) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = parser.isoparse(value)
        except (TypeError, ValueError):
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz.tzlocal())
    return parsed


def _humanize(seconds: float) -> str:
    days = seconds / 86400
    secs = _round(seconds)
    minutes = _round(seconds / 60)
    hours = _round(seconds / 3600)
    whole_days = _round(days)
    months = _round(days / DAYS_PER_MONTH)
    years = _round(days / DAYS_PER_YEAR)

    steps = (
        (secs < 45, "a few seconds"),
        (minutes <= 1, "a minute"),
        (minutes < 45, f"{minutes} minutes"),
        (hours <= 1, "an hour"),
        (hours < 22, f"{hours} hours"),
        (whole_days <= 1, "a day"),
        (whole_days < 26, f"{whole_days} days"),
        (months <= 1, "a month"),
        (months < 11, f"{months} months"),
        (years <= 1, "a year"),
    )
    for matched, phrase in steps:
        if matched:
            return phrase
    return f"{years} years"


def relative_time(timestamp: str | datetime, now: datetime | None = None) -> str:
    """Render a timestamp relative to ``now``, e.g. ``"in 5 minutes"`` or ``"an hour ago"``."""
    when = _parse_timestamp(timestamp)
    if when is None:
        return PLACEHOLDER
    reference = now or datetime.now(timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=tz.tzlocal())

    delta = (when - reference).total_seconds()
    phrase = _humanize(abs(delta))
    if delta >= 0:
        return f"in {phrase}"
    return f"{phrase} ago"


def grouped_number(value: Any) -> str:
    """Render a number with thousands separators.

    Absent values, booleans and anything that is not a number or numeric
    string render the placeholder.
    """
    if isinstance(value, str):
        try:
            value = float(value) if "." in value else int(value)
        except ValueError:
            return PLACEHOLDER
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value:,}"


def qualitative_label(
    value: Any,
    labels: Mapping[Any, str] | Callable[[Any], str] | None = None,
) -> str:
    """Map a raw reading to a descriptive label chosen by the caller.

    ``labels`` is either a lookup table or a function. Values the table does
    not know pass through unchanged; absent values render the placeholder.
    """
    if value is None or value == "":
        return PLACEHOLDER
    if labels is None:
        return str(value)
    if callable(labels):
        return labels(value)
    return labels.get(value, str(value))


def title_case(value: str) -> str:
    return re.sub(r"\b\w", lambda match: match.group(0).upper(), value.lower())


def validate_ip(value: Any) -> bool:
    """Return True for a well-formed IPv4 or IPv6 literal."""
    if not isinstance(value, str):
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


__all__ = [
    "PLACEHOLDER",
    "relative_time",
    "grouped_number",
    "qualitative_label",
    "title_case",
    "validate_ip",
    "fallback_text",
]
