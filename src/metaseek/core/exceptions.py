"""Custom exception hierarchy for metaseek."""

from typing import Any


class MetaseekError(Exception):
    """Base exception for all metaseek errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(MetaseekError):
    """Input validation failed."""

    pass


class InvalidKeywordError(ValidationError):
    """Search keyword is empty after trimming."""

    def __init__(self, message: str = "invalid keyword", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class InvalidIDError(ValidationError):
    """Provider rejected the movie ID during normalization."""

    def __init__(self, message: str = "invalid id", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class ProviderNotFoundError(MetaseekError):
    """Requested provider is not registered."""

    def __init__(self, provider: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"provider not found: {provider}", details)
        self.provider = provider


class NotFoundError(MetaseekError):
    """Lookup completed without a valid result."""

    def __init__(self, message: str = "not found", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)
