"""
Module: versioning.permutation

Purpose:
    Unbiased shuffle of a sequence that never touches the input.

Key Functions:
    - shuffled(): Fisher-Yates shuffle of a copy

Used By:
    - versioning.options: Option remapping
    - versioning.builder: Question order
"""

from __future__ import annotations

import random
from typing import Iterable, Optional, TypeVar

T = TypeVar("T")


def shuffled(items: Iterable[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Return a uniformly random permutation of ``items`` as a new list.

    Walks i from n-1 down to 1, draws j uniformly from [0, i] and swaps
    positions i and j of the copy. Each call owns its own copy and
    generator, so calls are independent and reentrant.

    Args:
        items: Sequence to permute (left unmodified)
        rng: Random source; a fresh unseeded generator when omitted

    Returns:
        New list with the same elements in random order

    Example:
        >>> sorted(shuffled([3, 1, 2]))
        [1, 2, 3]
    """
    result = list(items)
    if len(result) < 2:
        return result

    rng = rng or random.Random()
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
