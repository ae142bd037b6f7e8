"""FormatService — tokenize, mask, and duration operations as ServiceResults."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from timemask.domain.duration import DEFAULT_POLICY, format_duration
from timemask.domain.masks import MaskElement, mask_pattern, sequence_to_mask
from timemask.domain.symbols import DATE_SYMBOLS, SymbolTable
from timemask.domain.tokens import FormatSegment, Literal, tokenize
from timemask.domain.types import Placeholder
from timemask.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from timemask.config.settings import TmSettings

logger = logging.getLogger(__name__)

# Symbols whose real input is longer than the single placeholder they map to.
_VARIABLE_WIDTH = frozenset({"MMMM", "dddd", "Z", "ZZ"})


def _segment_payload(segment: FormatSegment, table: SymbolTable) -> dict[str, Any]:
    if isinstance(segment, Literal):
        return {"kind": "literal", "text": segment.text, "escaped": segment.escaped}
    spec = table.get(segment.symbol)
    return {
        "kind": "token",
        "symbol": segment.symbol,
        "type": str(spec.type) if spec else None,
        "unit": spec.unit if spec else None,
    }


def _mask_payload(element: MaskElement) -> dict[str, str]:
    if isinstance(element, Placeholder):
        return {"placeholder": str(element)}
    return {"literal": element}


def parse_duration_ms(raw: Any) -> Any:
    """Coerce CLI text to a number; anything unparseable passes through unchanged."""
    if not isinstance(raw, str):
        return raw
    text = raw.strip().replace("_", "")
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return raw


class FormatService:
    """Format-pattern and duration operations.

    Holds no mutable state; the settings only provide the configured
    duration policy and mask defaults.
    """

    def __init__(
        self,
        settings: TmSettings | None = None,
        table: SymbolTable = DATE_SYMBOLS,
    ) -> None:
        self._settings = settings
        self._table = table

    def tokenize(self, fmt: str) -> ServiceResult:
        segments = tokenize(fmt, self._table)
        logger.debug("Tokenized %r into %d segments", fmt, len(segments))
        warnings: list[str] = []
        if any(isinstance(s, Literal) and not s.escaped and "[" in s.text for s in segments):
            warnings.append("Unclosed '[' treated as literal text")
        tokens = sum(1 for s in segments if not isinstance(s, Literal))
        return ServiceResult(
            ok=True,
            op="tokenize",
            data={
                "format": fmt,
                "segments": [_segment_payload(s, self._table) for s in segments],
            },
            warnings=warnings,
            meta={"tokens": tokens, "literals": len(segments) - tokens},
        )

    def mask(self, fmt: str, *, regex: bool | None = None) -> ServiceResult:
        """Derive the input mask for *fmt*.

        When *regex* is None the ``[mask] regex`` setting decides whether the
        anchored pattern is included in the payload.
        """
        if not fmt:
            return ServiceResult.failure("mask", ErrorCode.EMPTY_FORMAT, "Format pattern is empty")
        if regex is None:
            regex = self._settings.mask.regex if self._settings else False

        segments = tokenize(fmt, self._table)
        mask = sequence_to_mask(segments, self._table)
        logger.debug("Derived %d mask elements from %r", len(mask), fmt)

        warnings = [
            f"Token {s.symbol!r} has variable width; mask reserves one character"
            for s in segments
            if not isinstance(s, Literal) and s.symbol in _VARIABLE_WIDTH
        ]
        data: dict[str, Any] = {
            "format": fmt,
            "mask": [_mask_payload(e) for e in mask],
        }
        if regex:
            data["pattern"] = mask_pattern(mask)
        placeholders = sum(1 for e in mask if isinstance(e, Placeholder))
        return ServiceResult(
            ok=True,
            op="mask",
            data=data,
            warnings=warnings,
            meta={"elements": len(mask), "placeholders": placeholders},
        )

    def duration(
        self,
        duration_ms: Any,
        overrides: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Format *duration_ms* with the configured policy plus *overrides*."""
        base = self._settings.duration if self._settings else DEFAULT_POLICY
        try:
            policy = base.merged(overrides) if overrides else base
        except ValidationError as exc:
            return ServiceResult.failure(
                "duration",
                ErrorCode.INVALID_POLICY,
                "Invalid duration display policy",
                errors=[err["msg"] for err in exc.errors()],
            )

        value = parse_duration_ms(duration_ms)
        text = format_duration(value, policy)
        if text is None:
            logger.debug("Rejected duration input %r", duration_ms)
            return ServiceResult.failure(
                "duration",
                ErrorCode.INVALID_DURATION,
                f"Not a finite number of milliseconds: {duration_ms!r}",
            )
        return ServiceResult(
            ok=True,
            op="duration",
            data={"duration_ms": value, "text": text},
        )
