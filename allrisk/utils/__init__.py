"""
Utilities Package - Logging and Exception Handling
"""
from .logging import StructuredFormatter, setup_logging
from .exceptions import (
    RiskClassificationError,
    InputValidationError,
    UnknownMarkerError,
)

__all__ = [
    "StructuredFormatter",
    "setup_logging",
    "RiskClassificationError",
    "InputValidationError",
    "UnknownMarkerError",
]
