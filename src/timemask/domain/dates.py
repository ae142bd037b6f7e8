"""Small calendar helpers working in epoch milliseconds."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, tzinfo
from typing import Any


def trim_time(timestamp_ms: float, tz: tzinfo | None = None) -> int:
    """Return epoch ms for midnight of the day containing *timestamp_ms*.

    The day boundary is taken in *tz*, or the local timezone when None.
    """
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


def _first(fields: Mapping[str, Any], *keys: str) -> int:
    for key in keys:
        value = fields.get(key)
        if value:
            return int(value)
    return 0


def object_to_date(fields: Mapping[str, Any], tz: tzinfo | None = None) -> datetime:
    """Build a datetime from a mapping of calendar fields.

    ``year``, ``month`` (1-based) and ``day`` are required. Time fields may
    be given in singular or plural form (``hour``/``hours``) and default to 0.

    Raises:
        KeyError: A required field is missing.
    """
    return datetime(
        int(fields["year"]),
        int(fields["month"]),
        int(fields["day"]),
        _first(fields, "hour", "hours"),
        _first(fields, "minute", "minutes"),
        _first(fields, "second", "seconds"),
        tzinfo=tz,
    )
