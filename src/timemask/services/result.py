"""ServiceResult and ServiceError — the result contract of FormatService.

INVARIANT: A result carries an error exactly when ``ok`` is False.
Domain functions raise or return None; the service layer turns those
outcomes into one of the :class:`ErrorCode` values below.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ErrorCode(StrEnum):
    """Failure codes reported by FormatService."""

    EMPTY_FORMAT = "EMPTY_FORMAT"
    INVALID_POLICY = "INVALID_POLICY"
    INVALID_DURATION = "INVALID_DURATION"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one tokenize, mask, or duration operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"tokenize"``, ``"mask"``, ``"duration"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, e.g. an unclosed ``[`` in a pattern.
        error: Structured error if ``ok`` is False.
        meta: Segment or element counts shown in verbose output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> ServiceResult:
        if self.ok and self.error is not None:
            raise ValueError("successful result must not carry an error")
        if not self.ok and self.error is None:
            raise ValueError("failed result must carry an error")
        return self

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result for *op*."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
