"""
Module: versioning

Purpose:
    Randomized exam version generation. Permutes question order and/or
    option order per version, keeps every correct-option index attached
    to its original option text, and derives answer keys on demand.

Key Functions:
    - shuffled(): Unbiased shuffle of a copy
    - remap_options(): Option shuffle with correct-index tracking
    - build_version(): One lettered version
    - is_answer_key_eligible() / derive_answer_key(): Answer keys

Key Classes:
    - VersionSetManager: Active version set (generate / remove / clear)
    - VersionConfig: Count and mode, validated

Used By:
    - exam_toolkit.cli
"""

from .config import (
    DEFAULT_VERSION_COUNT,
    MAX_VERSIONS,
    MIN_VERSIONS,
    VersionConfig,
    clamp_version_count,
    parse_version_count,
)
from .permutation import shuffled
from .options import remap_options
from .builder import build_version, version_code
from .manager import VersionSetManager
from .answer_key import answer_keys, derive_answer_key, is_answer_key_eligible

__all__ = [
    # Config
    "VersionConfig",
    "clamp_version_count",
    "parse_version_count",
    "MIN_VERSIONS",
    "MAX_VERSIONS",
    "DEFAULT_VERSION_COUNT",
    # Engine
    "shuffled",
    "remap_options",
    "build_version",
    "version_code",
    "VersionSetManager",
    # Answer keys
    "is_answer_key_eligible",
    "derive_answer_key",
    "answer_keys",
]
