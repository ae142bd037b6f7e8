"""Date-format symbol table — classification and mask shape per symbol.

Every recognized symbol carries its token type, its canonical unit code,
and the fixed-arity placeholder shape used for input masks. The table is
built once at import; :class:`SymbolTable` rejects a spec without a
placeholder shape, so mask coverage is checked at construction.

INVARIANT: ``SymbolTable.ordered`` is longest-first, then lexicographic.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from timemask.domain.types import Placeholder, TokenType

_D = Placeholder.DIGIT
_DS = Placeholder.DIGITS
_L = Placeholder.LETTER
_E = Placeholder.EITHER

_ORDINAL = (_D, _D, _L, _L)


@dataclass(frozen=True)
class TokenSpec:
    """A recognized format symbol and what it stands for."""

    symbol: str
    type: TokenType
    unit: str
    placeholders: tuple[Placeholder, ...]


class SymbolTable:
    """Immutable lookup of :class:`TokenSpec` by symbol.

    ``ordered`` is precomputed so the tokenizer can take the first match
    as the longest match.
    """

    def __init__(self, specs: Iterable[TokenSpec]) -> None:
        by_symbol: dict[str, TokenSpec] = {}
        for spec in specs:
            if not spec.symbol:
                raise ValueError("Token symbol must not be empty")
            if not spec.placeholders:
                raise ValueError(f"Token {spec.symbol!r} has no mask placeholder shape")
            if spec.symbol in by_symbol:
                raise ValueError(f"Duplicate token symbol {spec.symbol!r}")
            by_symbol[spec.symbol] = spec
        self._by_symbol = by_symbol
        self.ordered: tuple[str, ...] = tuple(sorted(by_symbol, key=lambda s: (-len(s), s)))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def __iter__(self) -> Iterator[str]:
        return iter(self.ordered)

    def __len__(self) -> int:
        return len(self._by_symbol)

    def get(self, symbol: str) -> TokenSpec | None:
        return self._by_symbol.get(symbol)

    def match(self, text: str, pos: int = 0) -> str | None:
        """Return the longest symbol that *text* starts with at *pos*, if any."""
        for symbol in self.ordered:
            if text.startswith(symbol, pos):
                return symbol
        return None


def _specs(
    token_type: TokenType,
    unit: str,
    shapes: dict[str, tuple[Placeholder, ...]],
) -> list[TokenSpec]:
    return [TokenSpec(sym, token_type, unit, shape) for sym, shape in shapes.items()]


DATE_TOKEN_SPECS: tuple[TokenSpec, ...] = (
    *_specs(
        TokenType.MONTH,
        "M",
        {"M": (_D, _D), "Mo": _ORDINAL, "MM": (_D, _D), "MMM": (_L, _L, _L), "MMMM": (_E,)},
    ),
    *_specs(TokenType.QUARTER, "Q", {"Q": (_D, _D), "Qo": _ORDINAL}),
    *_specs(TokenType.DAY, "D", {"D": (_D, _D), "Do": _ORDINAL, "DD": (_D, _D)}),
    *_specs(
        TokenType.DAY_OF_YEAR,
        "DDD",
        {"DDD": (_D, _D, _D), "DDDo": _ORDINAL, "DDDD": (_D, _D, _D)},
    ),
    *_specs(
        TokenType.DAY_OF_WEEK,
        "d",
        {
            "d": (_D,),
            "do": _ORDINAL,
            "dd": (_L, _L),
            "ddd": (_L, _L, _L),
            "dddd": (_E,),
            "e": (_D,),
            "E": (_D,),
        },
    ),
    *_specs(
        TokenType.WEEK_OF_YEAR,
        "w",
        {
            "w": (_D, _D),
            "wo": _ORDINAL,
            "ww": (_D, _D),
            "W": (_D, _D),
            "Wo": _ORDINAL,
            "WW": (_D, _D),
        },
    ),
    *_specs(TokenType.YEAR, "Y", {"YY": (_D, _D), "YYYY": (_D,) * 4, "Y": (_D,) * 4}),
    *_specs(
        TokenType.WEEK_YEAR,
        "gg",
        {"gg": (_D, _D), "gggg": (_D,) * 4, "GG": (_D, _D), "GGGG": (_D,) * 4},
    ),
    *_specs(TokenType.MERIDIEM, "a", {"A": (_L, _L), "a": (_L, _L)}),
    *_specs(
        TokenType.HOUR,
        "h",
        {sym: (_D, _D) for sym in ("H", "HH", "h", "hh", "k", "kk")},
    ),
    *_specs(TokenType.MINUTE, "m", {"m": (_D, _D), "mm": (_D, _D)}),
    *_specs(TokenType.SECOND, "s", {"s": (_D, _D), "ss": (_D, _D)}),
    *_specs(
        TokenType.MILLISECOND,
        "S",
        {"S": (_D, _D), "SS": (_D, _D), "SSS": (_D, _D, _D)},
    ),
    *_specs(TokenType.TIMEZONE, "Z", {"Z": (_E,), "ZZ": (_E,)}),
    *_specs(TokenType.TIMESTAMP, "x", {"X": (_DS,), "x": (_DS,)}),
)

DATE_SYMBOLS = SymbolTable(DATE_TOKEN_SPECS)


def token_type(symbol: str) -> TokenType | None:
    """Return the field type of a date-format *symbol*, or None if unknown.

    Examples:
        >>> token_type("MMM")
        <TokenType.MONTH: 'Month'>
        >>> token_type("q") is None
        True
    """
    spec = DATE_SYMBOLS.get(symbol)
    return spec.type if spec else None


def token_unit(symbol: str) -> str | None:
    """Return the canonical unit code for *symbol* (``"DDDo"`` -> ``"DDD"``)."""
    spec = DATE_SYMBOLS.get(symbol)
    return spec.unit if spec else None
