"""Format tokenizer — split a date-format pattern into literal and token segments.

Pure functions, no infrastructure dependencies. Never raises for any
input string: an unclosed ``[`` degrades to an ordinary character.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from timemask.domain.symbols import DATE_SYMBOLS, SymbolTable


@dataclass(frozen=True)
class Literal:
    """Text passed through unchanged.

    ``escaped`` marks text that came from a ``[...]`` escape; it is not
    part of equality.
    """

    text: str
    escaped: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class Token:
    """A recognized format symbol."""

    symbol: str


FormatSegment = Literal | Token


def tokenize(fmt: str, table: SymbolTable = DATE_SYMBOLS) -> list[FormatSegment]:
    """Tokenize *fmt* against *table*, longest symbol first.

    Unrecognized characters accumulate into the preceding literal unless
    that literal was bracket-escaped.

    Examples:
        >>> tokenize("[Year]: YYYY")
        [Literal(text='Year'), Literal(text=': '), Token(symbol='YYYY')]
        >>> tokenize("")
        []
    """
    segments: list[FormatSegment] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        if fmt[pos] == "[":
            close = fmt.find("]", pos + 1)
            if close != -1:
                segments.append(Literal(fmt[pos + 1 : close], escaped=True))
                pos = close + 1
                continue

        symbol = table.match(fmt, pos)
        if symbol is not None:
            segments.append(Token(symbol))
            pos += len(symbol)
            continue

        last = segments[-1] if segments else None
        if isinstance(last, Literal) and not last.escaped:
            segments[-1] = Literal(last.text + fmt[pos])
        else:
            segments.append(Literal(fmt[pos]))
        pos += 1
    return segments


def join_format(segments: list[FormatSegment]) -> str:
    """Rebuild a format pattern from *segments*, re-bracketing escaped literals."""
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, Token):
            parts.append(segment.symbol)
        elif segment.escaped:
            parts.append(f"[{segment.text}]")
        else:
            parts.append(segment.text)
    return "".join(parts)
