"""Multiset Containment — decides whether R2's readings all appear in R1.

Invariants:
    - is_contained(A, B) is True iff count(B, v) <= count(A, v) for every v
    - Inputs are never mutated (callers may reuse the same lists)
    - Total: never raises for finite numeric sequences, empty ones included
    - Result depends only on the multisets, not on order or identity

Design Decisions:
    - Frequency counting over sort + two pointers: linear time, no pointer
      bookkeeping, no in-place sort of caller data
    - Numbers compare by value (5 == 5.0) since they hash alike
"""

from collections import Counter
from typing import Sequence

Reading = int | float


def is_contained(
    primary: Sequence[Reading], secondary: Sequence[Reading],
) -> bool:
    """True if every reading of `secondary` is available in `primary`."""
    if len(secondary) > len(primary):
        return False

    remaining = Counter(primary)
    for reading in secondary:
        if remaining[reading] <= 0:
            return False
        remaining[reading] -= 1
    return True


def missing_readings(
    primary: Sequence[Reading], secondary: Sequence[Reading],
) -> Counter:
    """Readings `primary` is short of, mapped to how many are missing.

    Empty exactly when is_contained(primary, secondary) holds.
    """
    return Counter(secondary) - Counter(primary)
