"""Input-mask derivation from date-format patterns.

A mask is a flat list whose elements are either a :class:`Placeholder`
(one input character of a class) or literal text that must appear verbatim.
"""

from __future__ import annotations

import re

from timemask.domain.symbols import DATE_SYMBOLS, SymbolTable
from timemask.domain.tokens import FormatSegment, Literal, tokenize
from timemask.domain.types import Placeholder

MaskElement = Placeholder | str


class UnmappedTokenError(LookupError):
    """A token symbol has no placeholder shape in the symbol table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unmapped token {symbol!r}: no mask placeholder shape")
        self.symbol = symbol


def sequence_to_mask(
    segments: list[FormatSegment],
    table: SymbolTable = DATE_SYMBOLS,
) -> list[MaskElement]:
    """Flatten tokenized *segments* into mask elements.

    Raises:
        UnmappedTokenError: A token's symbol is not in *table*.
    """
    mask: list[MaskElement] = []
    for segment in segments:
        if isinstance(segment, Literal):
            mask.append(segment.text)
            continue
        spec = table.get(segment.symbol)
        if spec is None:
            raise UnmappedTokenError(segment.symbol)
        mask.extend(spec.placeholders)
    return mask


def format_to_mask(fmt: str, table: SymbolTable = DATE_SYMBOLS) -> list[MaskElement] | None:
    """Tokenize *fmt* and derive its input mask. Returns None for an empty pattern.

    Examples:
        >>> [str(e) for e in format_to_mask("MM/YY")]
        ['digit', 'digit', '/', 'digit', 'digit']
        >>> format_to_mask("") is None
        True
    """
    if not fmt:
        return None
    return sequence_to_mask(tokenize(fmt, table), table)


def mask_pattern(mask: list[MaskElement]) -> str:
    """Build an anchored regex matching input that fills *mask*."""
    parts = [
        element.pattern if isinstance(element, Placeholder) else re.escape(element)
        for element in mask
    ]
    return "^" + "".join(parts) + "$"
