"""
Fixed-offset time conversion.

All functions here are pure: offsets are plain hours from UTC and no
daylight-saving or tz-database rules are applied.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from shared.core.exceptions import ValidationError

Instant = Union[str, datetime]


@dataclass(frozen=True)
class ZoneConversion:
    utc_instant: datetime
    converted_instant: datetime


def _offset_delta(offset: float) -> timedelta:
    if offset is None:
        raise TypeError("offset must be resolved before conversion")
    return timedelta(hours=offset)


def _shift(value: datetime, delta: timedelta, source: Instant) -> datetime:
    """Move ``value`` by ``delta`` as an aware UTC datetime."""
    try:
        return _as_utc(value) + delta
    except OverflowError as e:
        raise ValidationError(
            "dateTime is outside the supported range",
            details={"dateTime": str(source)},
        ) from e


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value: Instant) -> datetime:
    """
    Parse an ISO-8601 string (or pass a datetime through) as an aware UTC
    datetime. Naive values are read as UTC.
    """
    if isinstance(value, datetime):
        return _shift(value, timedelta(0), value)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            "dateTime must be an ISO-8601 timestamp",
            details={"dateTime": value},
        )

    text = value.strip()
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(
            "dateTime must be an ISO-8601 timestamp",
            details={"dateTime": value},
        ) from e
    return _shift(parsed, timedelta(0), value)


def format_instant(value: datetime) -> str:
    """ISO-8601 in UTC with a ``Z`` suffix, e.g. ``2023-12-31T19:00:00Z``."""
    return _as_utc(value).isoformat().replace("+00:00", "Z")


def format_offset_suffix(offset: float, exact: bool = False) -> str:
    """
    Render the ``±HH:MM`` tail of a wall-clock timestamp.

    The legacy form keeps only the integer hours, always writes ``:00`` and
    leaves negative offsets unsigned (``5.75`` -> ``+05:00``, ``-8`` ->
    ``08:00``). The exact form writes the real sign and minutes.
    """
    if exact:
        total_minutes = round(abs(offset) * 60)
        hours, minutes = divmod(total_minutes, 60)
        sign = "+" if offset >= 0 else "-"
        return f"{sign}{hours:02d}:{minutes:02d}"

    sign = "+" if offset >= 0 else ""
    return f"{sign}{int(abs(offset)):02d}:00"


def current_instant_in_zone(
    offset: float,
    now: Optional[datetime] = None,
    exact_suffix: bool = False,
) -> str:
    """Wall-clock time in a zone ``offset`` hours from UTC."""
    current = now if now is not None else datetime.now(timezone.utc)
    shifted = _shift(current, _offset_delta(offset), current)

    return (
        f"{shifted.year:04d}-{shifted.month:02d}-{shifted.day:02d}"
        f"T{shifted.hour:02d}:{shifted.minute:02d}:{shifted.second:02d}"
        f"{format_offset_suffix(offset, exact=exact_suffix)}"
    )


def convert_between_zones(
    input_instant: Instant, from_offset: float, to_offset: float
) -> ZoneConversion:
    """Shift ``input_instant`` out of ``from_offset`` into ``to_offset`` via UTC."""
    instant = parse_instant(input_instant)
    utc_instant = _shift(instant, -_offset_delta(from_offset), input_instant)
    return ZoneConversion(
        utc_instant=utc_instant,
        converted_instant=_shift(
            utc_instant, _offset_delta(to_offset), input_instant
        ),
    )
