from lfucache.eviction import by_value
from lfucache.forgetting_map import ForgettingMap
import logging
import random

def slow_square(n: int) -> int:
    """Stand-in for an expensive computation."""
    return n * n

def memoized_square(cache: ForgettingMap, n: int) -> int:
    """Look up n in the cache, computing and storing it on a miss."""
    result = cache.get(n)
    if result is None:
        result = slow_square(n)
        cache.put(n, result)
    return result

def main():
    logging.basicConfig(level=logging.INFO)

    # Create a small map; ties go to the smallest cached value
    cache = ForgettingMap(capacity=8, tie_break=by_value)
    print("Created forgetting map with capacity 8")

    # Skewed workload: low numbers are requested far more often
    for _ in range(500):
        n = min(int(random.expovariate(0.3)), 30)
        memoized_square(cache, n)

    print(f"\nFinal map size: {cache.size()} entries")
    print("Keys still cached:", sorted(k for k in range(31) if k in cache))

    stats = cache.get_stats()
    print(f"Hit rate: {stats['hit_rate']:.2%}")
    print(f"Evictions: {stats['fast_path_evictions']} fast-path, "
          f"{stats['full_scan_evictions']} full-scan")

    cache.report_stats()

if __name__ == "__main__":
    main()
