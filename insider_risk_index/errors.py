"""
Exception types for the Insider Risk Index engine.

The scoring core is permissive: incomplete submissions and unknown benchmark
keys are resolved by fallback rather than raised. These types cover the few
places where something is genuinely wrong.
"""

from __future__ import annotations


class InsiderRiskError(Exception):
    """Base class for all engine errors."""


class AnswerFormatError(InsiderRiskError):
    """Raised when a submitted payload cannot be parsed into answers."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        if index is not None:
            message = f"Answer #{index}: {message}"
        super().__init__(message)


class CatalogError(InsiderRiskError):
    """Raised when a static catalog violates its invariants."""


class MatrixFetchError(InsiderRiskError):
    """Raised when the threat matrix feed returns a non-recoverable error."""

    def __init__(self, status_code: int, message: str, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Matrix feed error {status_code} for {url}: {message}")
