"""ServiceResult and ServiceError — what every folio service returns.

INVARIANT: All service-layer methods return ServiceResult; expected
failures (unknown category, missing slug, broken frontmatter, template
errors, unsafe output directory) are values with an :class:`ErrorCode`,
never exceptions.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure codes surfaced in ``--json`` output and exit messages."""

    INVALID_CATEGORY = "INVALID_CATEGORY"
    NOT_FOUND = "NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    CONTENT_INVALID = "CONTENT_INVALID"
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    UNSAFE_OUTPUT = "UNSAFE_OUTPUT"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class BuildMeta(BaseModel):
    """Timing and provenance attached to a build result."""

    model_config = {"frozen": True}

    content_root: str
    elapsed_ms: float
    built_at: str


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``list_items``, ``get``, ``build``...).
        data: Operation-specific payload.
        warnings: Non-fatal issues, such as unpublished items or skipped pages.
        error: Structured error if ``ok`` is False.
        meta: Build timing; only ``build`` results carry it.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: BuildMeta | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """A failed result for *op* carrying one :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
