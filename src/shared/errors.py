"""Custom exception classes for the AsyncAPI document model."""
from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str, status_code: int = 500) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class ParsingError(AppError):
    """Parsing error (400)."""

    def __init__(self, detail: str = "Parsing error") -> None:
        super().__init__(detail=detail, status_code=400)


class SchemaError(AppError):
    """Schema error (422)."""

    def __init__(self, detail: str = "Schema error") -> None:
        super().__init__(detail=detail, status_code=422)


class MalformedFragmentError(SchemaError):
    """A document fragment has an unexpected shape (strict mode only)."""

    def __init__(
        self,
        detail: str = "Malformed fragment",
        pointer: str = "",
    ) -> None:
        self.pointer = pointer
        if pointer:
            detail = f"{detail} (at '{pointer}')"
        super().__init__(detail=detail)
