from dataclasses import dataclass
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

@dataclass
class MapMetrics:
    """Counters for forgetting map operations, updated inline by the map."""
    _hit_count: int = 0
    _miss_count: int = 0
    _put_count: int = 0
    _update_count: int = 0
    _fast_path_evictions: int = 0
    _full_scan_evictions: int = 0

    def record_hit(self):
        """Record a get that found its key."""
        self._hit_count += 1

    def record_miss(self):
        """Record a get for an absent key."""
        self._miss_count += 1

    def record_put(self):
        """Record the insertion of a new key."""
        self._put_count += 1

    def record_update(self):
        """Record an overwrite of an existing key."""
        self._update_count += 1

    def record_eviction(self, fast_path: bool):
        """Record an eviction and the path that chose it."""
        if fast_path:
            self._fast_path_evictions += 1
        else:
            self._full_scan_evictions += 1

    def get_metrics(self) -> Dict[str, Any]:
        """Get current metrics snapshot."""
        lookups = self._hit_count + self._miss_count
        return {
            'hits': self._hit_count,
            'misses': self._miss_count,
            'hit_rate': self._hit_count / lookups if lookups > 0 else 0,
            'puts': self._put_count,
            'updates': self._update_count,
            'fast_path_evictions': self._fast_path_evictions,
            'full_scan_evictions': self._full_scan_evictions,
            'evictions': self._fast_path_evictions + self._full_scan_evictions
        }

    def reset(self):
        """Zero every counter."""
        self._hit_count = 0
        self._miss_count = 0
        self._put_count = 0
        self._update_count = 0
        self._fast_path_evictions = 0
        self._full_scan_evictions = 0

    def report(self) -> Dict[str, Any]:
        """Log the current snapshot and return it."""
        metrics = self.get_metrics()
        logger.info("Forgetting map metrics: %s", metrics)
        return metrics
