"""ServiceResult and ServiceError: the contract for non-raising callers.

The binder raises; the facade's ``switch_locale`` and every CLI command
convert outcomes into a ServiceResult instead, so the recovery branch
(fallback locale, exit code) is explicit at the call site.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes carried by ServiceError.code.
LOCALE_NOT_SUPPORTED = "LOCALE_NOT_SUPPORTED"
LOCALE_SWITCH_FAILED = "LOCALE_SWITCH_FAILED"
UNDEFINED_DOMAIN = "UNDEFINED_DOMAIN"
CATALOG_NOT_FOUND = "CATALOG_NOT_FOUND"
SCAFFOLD_FAILED = "SCAFFOLD_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"switch_locale"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
