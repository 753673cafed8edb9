"""
Module: versioning.config

Purpose:
    Configuration dataclass for version generation. Immutable
    configuration with validation on construction.

Key Classes:
    - VersionConfig: How many versions to build and what to shuffle

Key Functions:
    - parse_version_count(): Leading integer of raw input
    - clamp_version_count(): Coerce raw input into the allowed range

Used By:
    - versioning.manager: VersionSetManager.generate
    - cli: Command-line options
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from exam_toolkit.core.models.versions import CODE_ALPHABET, ShuffleMode, ShufflePolicy

MIN_VERSIONS = 1
MAX_VERSIONS = len(CODE_ALPHABET)  # One letter code per version (A-Z)
DEFAULT_VERSION_COUNT = 2


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_version_count(value: Any) -> Optional[int]:
    """
    Leading integer of raw input, or None when there is none.

    Trailing text is ignored, so "3.5" and "3 versions" both read as 3.

    Example:
        >>> parse_version_count("03")
        3
        >>> parse_version_count("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def clamp_version_count(value: Any) -> int:
    """
    Coerce user input into [MIN_VERSIONS, MAX_VERSIONS].

    Mirrors the settings field: input without a leading positive
    integer becomes 1, large values cap at 26.

    Example:
        >>> clamp_version_count("40")
        26
        >>> clamp_version_count("3.5")
        3
        >>> clamp_version_count("abc")
        1
    """
    count = parse_version_count(value) or MIN_VERSIONS
    return min(MAX_VERSIONS, max(MIN_VERSIONS, count))


@dataclass(frozen=True)
class VersionConfig:
    """
    Configuration for generating a version set (immutable).

    Attributes:
        count: Number of versions to build (1-26)
        mode: What to shuffle in each version

    Invariants:
        - MIN_VERSIONS <= count <= MAX_VERSIONS

    Example:
        >>> config = VersionConfig(count=3, mode=ShuffleMode.OPTIONS_ONLY)
        >>> config.codes
        ('A', 'B', 'C')
    """

    count: int = DEFAULT_VERSION_COUNT
    mode: ShuffleMode = ShuffleMode.BOTH

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.mode, ShuffleMode):
            object.__setattr__(self, "mode", ShuffleMode(self.mode))
        if not (MIN_VERSIONS <= self.count <= MAX_VERSIONS):
            raise ValueError(
                f"count must be {MIN_VERSIONS}-{MAX_VERSIONS}: {self.count}"
            )

    @property
    def policy(self) -> ShufflePolicy:
        return self.mode.policy

    @property
    def codes(self) -> tuple[str, ...]:
        """Letter codes the generated versions will carry."""
        return tuple(CODE_ALPHABET[: self.count])
