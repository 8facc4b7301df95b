"""
Custom Exception Hierarchy

Errors raised at the API boundary, before input reaches the classifiers.
The classifiers themselves are total and raise nothing.
"""
from typing import Any, Dict, List, Optional


class RiskClassificationError(Exception):
    """Base exception for all risk classification errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class InputValidationError(RiskClassificationError):
    """An externally supplied value is outside its allowed domain."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INPUT_VALIDATION_ERROR",
            details={"field": field, **(details or {})}
        )
        self.field = field


class UnknownMarkerError(RiskClassificationError):
    """No reference entry exists for the requested marker id."""

    status_code = 404

    def __init__(self, marker_id: str, known: Optional[List[str]] = None):
        super().__init__(
            message=f"Unknown marker: {marker_id}",
            code="UNKNOWN_MARKER",
            details={"marker_id": marker_id, "known_markers": known or []}
        )
        self.marker_id = marker_id
