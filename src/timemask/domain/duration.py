"""Duration formatting — milliseconds to a cascading ``d:hh:mm:ss.mmm`` string.

The most significant unit allowed by the policy becomes the *leader*.
Units below the leader are shown unless their policy is ``never``; a
``never`` unit ends the cascade. Every unit value is derived directly
from the original magnitude, never from a running remainder.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

from timemask.domain.types import DisplayPolicy

SECOND_MS = 1_000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


class DurationPolicy(BaseModel):
    """Per-unit display rules for :func:`format_duration`.

    Field names are snake_case; the camelCase aliases (``showMilliseconds``,
    ``padSeconds``, ...) are accepted as well.

    Attributes:
        show_days: Days display policy. Default ``non_zero``.
        show_hours: Hours display policy. Default ``non_zero``.
        show_minutes: Minutes display policy. Default ``non_zero``.
        show_seconds: Seconds display policy. Default ``non_zero``.
        show_milliseconds: Milliseconds display policy. Default ``never``.
        pad_days: Zero-pad days to two digits when they lead. Default off.
        pad_hours: Same for hours.
        pad_minutes: Same for minutes.
        pad_seconds: Same for seconds.
        format_number: Group thousands in the leading unit. Default on.
        group_separator: Separator used for grouping. Default ``","``.
    """

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    show_days: DisplayPolicy = DisplayPolicy.NON_ZERO
    show_hours: DisplayPolicy = DisplayPolicy.NON_ZERO
    show_minutes: DisplayPolicy = DisplayPolicy.NON_ZERO
    show_seconds: DisplayPolicy = DisplayPolicy.NON_ZERO
    show_milliseconds: DisplayPolicy = DisplayPolicy.NEVER
    pad_days: bool = False
    pad_hours: bool = False
    pad_minutes: bool = False
    pad_seconds: bool = False
    format_number: bool = True
    group_separator: str = ","

    @field_validator(
        "show_days",
        "show_hours",
        "show_minutes",
        "show_seconds",
        "show_milliseconds",
        mode="before",
    )
    @classmethod
    def _coerce_policy(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, DisplayPolicy):
            return DisplayPolicy(value)
        return value

    def merged(self, overrides: Mapping[str, Any]) -> DurationPolicy:
        """Return a new policy with *overrides* (field names or aliases) applied."""
        data = self.model_dump()
        for key, value in overrides.items():
            data[_FIELD_BY_ALIAS.get(key, key)] = value
        return DurationPolicy.model_validate(data)


_FIELD_BY_ALIAS: dict[str, str] = {to_camel(name): name for name in DurationPolicy.model_fields}

DEFAULT_POLICY = DurationPolicy()

# (name, size in ms, modulus below the leader)
_UNITS: tuple[tuple[str, int, int | None], ...] = (
    ("days", DAY_MS, None),
    ("hours", HOUR_MS, 24),
    ("minutes", MINUTE_MS, 60),
    ("seconds", SECOND_MS, 60),
    ("milliseconds", 1, 1000),
)


def resolve_policy(policy: DurationPolicy | Mapping[str, Any] | None) -> DurationPolicy:
    """Merge a partial *policy* over :data:`DEFAULT_POLICY`."""
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, DurationPolicy):
        return policy
    return DEFAULT_POLICY.merged(policy)


def _is_shown(display: DisplayPolicy, value: int) -> bool:
    return display is DisplayPolicy.ALWAYS or (display is DisplayPolicy.NON_ZERO and value > 0)


def _leader_text(value: int, pad: bool, policy: DurationPolicy) -> str:
    text = f"{value:,}".replace(",", policy.group_separator) if policy.format_number else str(value)
    return text.zfill(2) if pad else text


def format_duration(
    duration_ms: Any,
    policy: DurationPolicy | Mapping[str, Any] | None = None,
) -> str | None:
    """Render *duration_ms* as a cascading duration string.

    Returns None when *duration_ms* is missing, not a real number, NaN,
    or infinite. Negative values are rendered as their magnitude with a
    leading ``-``.

    Examples:
        >>> format_duration(-90_061_000)
        '-1:01:01:01'
        >>> format_duration(500, {"show_milliseconds": "always"})
        '0.500'
    """
    if isinstance(duration_ms, bool) or not isinstance(duration_ms, numbers.Real):
        return None
    if not isinstance(duration_ms, numbers.Integral) and not math.isfinite(duration_ms):
        return None

    opts = resolve_policy(policy)
    negative = duration_ms < 0
    total = int(abs(duration_ms))

    result: str | None = None
    for index, (name, size, _) in enumerate(_UNITS[:-1]):
        value = total // size
        if not _is_shown(getattr(opts, f"show_{name}"), value):
            continue
        parts = [_leader_text(value, getattr(opts, f"pad_{name}"), opts)]
        for lower, lower_size, modulus in _UNITS[index + 1 :]:
            if getattr(opts, f"show_{lower}") is DisplayPolicy.NEVER:
                break
            lower_value = (total // lower_size) % modulus
            if lower == "milliseconds":
                parts.append("." + str(lower_value).zfill(3))
            else:
                parts.append(":" + str(lower_value).zfill(2))
        result = "".join(parts)
        break

    if result is None:
        result = "0." + str(total).zfill(3) if _is_shown(opts.show_milliseconds, total) else "0"

    return ("-" if negative else "") + result
