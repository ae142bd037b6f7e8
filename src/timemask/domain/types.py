"""Classification enums shared by the tokenizer, masks, and durations."""

from __future__ import annotations

from enum import StrEnum


class TokenType(StrEnum):
    """Date/time field a format symbol stands for."""

    MONTH = "Month"
    QUARTER = "Quarter"
    DAY = "Day"
    DAY_OF_YEAR = "DayOfYear"
    DAY_OF_WEEK = "DayOfWeek"
    WEEK_OF_YEAR = "WeekOfYear"
    YEAR = "Year"
    WEEK_YEAR = "WeekYear"
    MERIDIEM = "Meridiem"
    HOUR = "Hour"
    MINUTE = "Minute"
    SECOND = "Second"
    MILLISECOND = "Millisecond"
    TIMEZONE = "Timezone"
    TIMESTAMP = "Timestamp"


class DisplayPolicy(StrEnum):
    """When a duration unit is rendered."""

    ALWAYS = "always"
    NON_ZERO = "non_zero"
    NEVER = "never"

    @classmethod
    def _missing_(cls, value: object) -> DisplayPolicy | None:
        # Accept the camelCase spelling used by older configs.
        if isinstance(value, str) and value.replace("-", "_").lower() in ("nonzero", "non_zero"):
            return cls.NON_ZERO
        return None


class Placeholder(StrEnum):
    """Character class in an input mask.

    Every member stands for exactly one input character except ``DIGITS``,
    which stands for a run of one or more digits.
    """

    DIGIT = "digit"
    DIGITS = "digits"
    LETTER = "letter"
    EITHER = "either"

    @property
    def pattern(self) -> str:
        """Regex source matching the input this placeholder stands for."""
        return _PATTERNS[self]


_PATTERNS: dict[Placeholder, str] = {
    Placeholder.DIGIT: r"\d",
    Placeholder.DIGITS: r"\d+",
    Placeholder.LETTER: r"[A-Za-z]",
    Placeholder.EITHER: r"\w",
}
