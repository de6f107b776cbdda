from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar
import logging

from .entry import AccessCountingEntry
from .errors import InvalidArgumentError
from .eviction import TieBreaker, select_least_accessed
from .metrics import MapMetrics

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')

# Marks "no eviction candidate cached"
_NO_CANDIDATE = object()

@dataclass
class ForgettingMapConfig:
    """Configuration for a forgetting map."""
    capacity: int = 128  # Maximum number of entries before eviction
    enable_metrics: bool = True  # Track hits, misses and evictions

    def validate(self) -> None:
        """
        Check the configuration.

        Raises:
            InvalidArgumentError: If capacity is not a positive integer
        """
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise InvalidArgumentError(f"capacity must be an int, got {type(self.capacity).__name__}")
        if self.capacity <= 0:
            raise InvalidArgumentError(f"capacity must be positive, got {self.capacity}")

class ForgettingMap(Generic[K, V]):
    """
    A fixed-capacity map that forgets its least fetched key when full.

    Every get counts as an access. When a new key is put into a full map,
    the entry with the fewest accesses is evicted; ties are broken by a
    caller-supplied comparator over (key, value) pairs.

    The map remembers a candidate for the next eviction so that most
    evictions avoid a full scan. The key inserted by an evicting put
    becomes that candidate straight away, so if it is never fetched it is
    the next one evicted, even when another untouched entry would have won
    the tie-break.

    Not thread-safe: callers sharing a map between threads must hold one
    lock around every call.
    """

    def __init__(
        self,
        capacity: int,
        tie_break: TieBreaker,
        enable_metrics: bool = True
    ):
        """
        Initialize the map.

        Args:
            capacity: Maximum number of entries before least fetched are dropped
            tie_break: Ordering applied when several entries share the lowest
                access count
            enable_metrics: Whether to keep hit/miss/eviction counters

        Raises:
            InvalidArgumentError: If capacity is not a positive integer or
                tie_break is not callable
        """
        ForgettingMapConfig(capacity=capacity, enable_metrics=enable_metrics).validate()
        if not callable(tie_break):
            raise InvalidArgumentError("tie_break must be callable")

        self._capacity = capacity
        self._tie_break = tie_break
        self._entries: Dict[K, AccessCountingEntry[V]] = {}
        # _NO_CANDIDATE rather than None, since None is a valid key
        self._current_lowest: Any = _NO_CANDIDATE
        self._metrics = MapMetrics() if enable_metrics else None

        logger.debug("Created forgetting map with capacity %d", capacity)

    @classmethod
    def from_config(
        cls,
        config: ForgettingMapConfig,
        tie_break: TieBreaker
    ) -> 'ForgettingMap[K, V]':
        """Build a map from a ForgettingMapConfig."""
        return cls(config.capacity, tie_break, enable_metrics=config.enable_metrics)

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> Optional[V]:
        """
        Get a value from the map, counting the access.

        Args:
            key: The key to look up

        Returns:
            The value if present, None otherwise
        """
        entry = self._entries.get(key)
        if entry is None:
            if self._metrics:
                self._metrics.record_miss()
            return None

        if self._has_candidate() and self._current_lowest == key:
            self._invalidate_lowest()
        if self._metrics:
            self._metrics.record_hit()
        return entry.increment_and_get()

    def put(self, key: K, value: V) -> Optional[V]:
        """
        Put a value into the map.

        Overwriting an existing key keeps its access count and never evicts.
        Adding a new key to a full map evicts the least fetched entry first.

        Args:
            key: The key to store under
            value: The value to store

        Returns:
            The previous value for the key, or None if the key is new
        """
        entry = self._entries.get(key)
        if entry is not None:
            if self._metrics:
                self._metrics.record_update()
            return entry.replace_value(value)

        if len(self._entries) >= self._capacity:
            self._remove_least_accessed()
            self._entries[key] = AccessCountingEntry.create(value)
            self._current_lowest = key
        else:
            self._entries[key] = AccessCountingEntry.create(value)

        if self._metrics:
            self._metrics.record_put()
        return None

    def size(self) -> int:
        """Number of entries currently held."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Membership tests are not accesses
        return key in self._entries

    def _has_candidate(self) -> bool:
        return self._current_lowest is not _NO_CANDIDATE

    def _invalidate_lowest(self) -> None:
        logger.debug("Eviction candidate %r was fetched, clearing it", self._current_lowest)
        self._current_lowest = _NO_CANDIDATE

    def _remove_least_accessed(self) -> None:
        """Evict the cached candidate, or full-scan when there is none."""
        if self._has_candidate():
            key = self._current_lowest
            self._current_lowest = _NO_CANDIDATE
            fast_path = True
        else:
            key = select_least_accessed(self._entries, self._tie_break)
            fast_path = False

        del self._entries[key]
        if self._metrics:
            self._metrics.record_eviction(fast_path)
        logger.debug("Evicted %r via %s", key, 'fast-path' if fast_path else 'full-scan')

    def get_stats(self) -> Dict[str, Any]:
        """
        Get map statistics.

        Returns:
            Dictionary containing size, capacity, whether an eviction
            candidate is cached (and which key) and, when enabled,
            operation metrics
        """
        has_candidate = self._has_candidate()
        stats = {
            'size': len(self._entries),
            'capacity': self._capacity,
            'has_candidate': has_candidate,
            'current_lowest': self._current_lowest if has_candidate else None
        }
        if self._metrics:
            stats.update(self._metrics.get_metrics())
        return stats

    def reset_stats(self) -> None:
        """Zero the operation counters; no-op when metrics are disabled."""
        if self._metrics:
            self._metrics.reset()

    def report_stats(self) -> Dict[str, Any]:
        """
        Log the operation counters at INFO.

        Returns:
            The logged metrics snapshot, empty when metrics are disabled
        """
        if not self._metrics:
            return {}
        return self._metrics.report()
