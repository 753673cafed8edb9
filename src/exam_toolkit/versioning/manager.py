"""
Module: versioning.manager

Purpose:
    Own the active set of generated versions: bulk generation, removal
    of a single version with code renumbering, and clearing.

Key Classes:
    - VersionSetManager: Holder of the current version set

Dependencies:
    - versioning.builder: build_version
    - versioning.config: VersionConfig (count/mode validation)

Used By:
    - cli: Generation from the command line
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import replace
from typing import Iterable, Iterator, Optional, Union

from exam_toolkit.core.models.questions import Question
from exam_toolkit.core.models.versions import ExamVersion, ShuffleMode

from .builder import build_version, version_code
from .config import VersionConfig

logger = logging.getLogger(__name__)


class VersionSetManager:
    """
    Holds the active version set and the only operations that change it.

    Invariants:
        - The version at position i always has code version_code(i);
          codes form a dense prefix of the alphabet
        - Callers only ever see tuples, never the internal list

    Example:
        >>> manager = VersionSetManager()
        >>> manager.generate(bank, 3, ShuffleMode.BOTH)
        >>> [v.code for v in manager.versions]
        ['A', 'B', 'C']
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._versions: list[ExamVersion] = []
        self._rng = rng

    @property
    def versions(self) -> tuple[ExamVersion, ...]:
        return tuple(self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[ExamVersion]:
        return iter(self.versions)

    def get(self, version_id: str) -> Optional[ExamVersion]:
        for v in self._versions:
            if v.id == version_id:
                return v
        return None

    def generate(
        self,
        bank: Iterable[Question],
        count: int,
        mode: Union[ShuffleMode, str] = ShuffleMode.BOTH,
    ) -> tuple[ExamVersion, ...]:
        """
        Replace the current set with ``count`` freshly built versions.

        Args:
            bank: Question bank (read-only)
            count: Number of versions, 1-26 (clamp beforehand with
                clamp_version_count when it comes from user input)
            mode: Shuffle mode

        Returns:
            The new version set

        Raises:
            ValueError: If count is outside 1-26 or mode is unknown
        """
        config = VersionConfig(count=count, mode=mode)
        questions = tuple(bank)
        batch = uuid.uuid4().hex[:12]
        rng = self._rng or random.Random()

        self._versions = [
            build_version(questions, config.policy, i, rng=rng, version_id=f"{batch}-{i}")
            for i in range(config.count)
        ]
        logger.info(
            f"Generated {config.count} versions ({', '.join(config.codes)}) "
            f"from {len(questions)} questions, mode={config.mode.value}"
        )
        return self.versions

    def remove(self, version_id: str) -> bool:
        """
        Remove one version and renumber the rest.

        Remaining versions are recoded by their new position (first is
        "A", second "B", ...). Only ``code`` changes; each version's
        questions stay exactly as generated.

        Args:
            version_id: Id of the version to remove

        Returns:
            True if a version was removed, False if the id was unknown
        """
        remaining = [v for v in self._versions if v.id != version_id]
        removed = len(remaining) != len(self._versions)
        if not removed:
            logger.warning(f"No version with id {version_id!r} to remove")

        self._versions = [
            v if v.code == version_code(i) else replace(v, code=version_code(i))
            for i, v in enumerate(remaining)
        ]
        if removed:
            logger.info(
                f"Removed version {version_id}; {len(self._versions)} remaining"
            )
        return removed

    def clear(self) -> None:
        """Drop every version."""
        count = len(self._versions)
        self._versions = []
        logger.info(f"Cleared {count} versions")
