from functools import cmp_to_key
from typing import Any, Callable, Mapping, Tuple, TypeVar
import logging

from .entry import AccessCountingEntry
from .errors import ForgettingMapError

logger = logging.getLogger(__name__)

# Type variables for generic comparators
K = TypeVar('K')
V = TypeVar('V')

# cmp-style ordering over (key, value) pairs: negative, zero or positive
TieBreaker = Callable[[Tuple[Any, Any], Tuple[Any, Any]], int]

def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)

def by_key(a: Tuple[K, V], b: Tuple[K, V]) -> int:
    """Order pairs by the natural ordering of their keys."""
    return _compare(a[0], b[0])

def by_value(a: Tuple[K, V], b: Tuple[K, V]) -> int:
    """Order pairs by the natural ordering of their values."""
    return _compare(a[1], b[1])

def select_least_accessed(
    entries: Mapping[K, AccessCountingEntry[V]],
    tie_break: TieBreaker
) -> K:
    """
    Find the key to evict by scanning every entry.

    The entry with the smallest access count wins. When several entries
    share that count, the tie-break comparator's minimum among their
    (key, value) pairs is chosen.

    Args:
        entries: Current map entries
        tie_break: Ordering applied to tied candidates

    Returns:
        Key of the entry to evict

    Raises:
        ForgettingMapError: If there is nothing to scan
    """
    if not entries:
        logger.error("Full scan requested on an empty map")
        raise ForgettingMapError("cannot select an eviction candidate from an empty map")

    min_count = min(entry.count for entry in entries.values())
    candidates = [
        (key, entry.value) for key, entry in entries.items()
        if entry.count == min_count
    ]

    if len(candidates) == 1:
        return candidates[0][0]

    logger.debug("Breaking tie between %d entries with count %d", len(candidates), min_count)
    return min(candidates, key=cmp_to_key(tie_break))[0]
