"""
Core Utilities Package

Serialization helpers for question banks and generated versions.
"""

from .serialization import (
    BankLoadError,
    bank_from_dict,
    bank_to_dict,
    load_question_bank,
    question_from_dict,
    question_to_dict,
    version_to_dict,
    versions_to_dict,
)

__all__ = [
    "BankLoadError",
    "bank_from_dict",
    "bank_to_dict",
    "load_question_bank",
    "question_from_dict",
    "question_to_dict",
    "version_to_dict",
    "versions_to_dict",
]
