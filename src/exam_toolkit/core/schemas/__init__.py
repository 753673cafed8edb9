"""
Schemas Package

JSON schema definition and validation for question-bank payloads.
"""

from .validator import (
    validate_bank,
    validate_question,
    ValidationError,
    BANK_SCHEMA_VERSION,
)

__all__ = [
    "validate_bank",
    "validate_question",
    "ValidationError",
    "BANK_SCHEMA_VERSION",
]
