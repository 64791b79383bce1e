"""Custom exception hierarchy for TaxNarrate.

The calculation engine is total over numbers: zero, negative or garbage
amounts never raise, they produce a zero-liability result. The exceptions
below cover the few structural failures left - asking for a law version
that was never registered, or registering a malformed band table.

Error codes follow pattern: [CATEGORY][NUMBER]
- TAX: Tax engine errors (300-399)
"""

from __future__ import annotations

from typing import Any


class TaxNarrateException(Exception):
    """Base exception for all TaxNarrate application errors.

    All custom exceptions inherit from this to enable centralized error handling.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with user-friendly message and metadata.

        Args:
            message: User-friendly error message
            code: Unique error code (e.g., "TAX300")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# TAX ENGINE ERRORS (TAX300-399)
# ============================================================================

class TaxError(TaxNarrateException):
    """Base class for tax engine errors."""
    pass


class UnknownLawVersionError(TaxError):
    """No tax policy is registered for the requested law version."""

    def __init__(self, version: str, available: list[str] | None = None):
        message = f"No tax law registered for version {version!r}"
        super().__init__(
            message=message,
            code="TAX300",
            status_code=404,
            details={"version": version, "available": available or []},
        )


class InvalidBandTableError(TaxError):
    """A band table breaks the ordering/contiguity rules."""

    def __init__(self, version: str, reason: str):
        super().__init__(
            message=f"Invalid band table for {version}: {reason}",
            code="TAX301",
            status_code=500,
            details={"version": version, "reason": reason},
        )
