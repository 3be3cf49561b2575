"""Insert timings for the radix trie against builtin containers.

Every container receives the same keys in the same order:

  1. ``list``         -- plain append, the baseline cost of the loop.
  2. ``RadixTrie``    -- ``put`` with a ``None`` value.
  3. ``dict``         -- hashed map.
  4. ``sorted list``  -- bisect insertion of unique keys, the closest builtin
                         to a sorted map.
"""

from __future__ import annotations

import bisect
import logging
import random
import time

from radixtrie.constants import DEFAULT_BENCH_SIZE
from radixtrie.trie import RadixTrie

logger = logging.getLogger("radixtrie.bench")


def random_keys(n: int = DEFAULT_BENCH_SIZE, seed: int | None = None) -> list[str]:
    """``n`` decimal strings of random signed 32-bit integers."""
    rng = random.Random(seed)
    return [str(rng.randint(-2**31, 2**31 - 1)) for _ in range(n)]


def time_inserts(keys: list[str]) -> dict[str, float]:
    """Seconds taken to insert ``keys`` into each container."""
    timings: dict[str, float] = {}

    t0 = time.perf_counter()
    copy: list[str] = []
    for k in keys:
        copy.append(k)
    timings["list"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    trie = RadixTrie()
    for k in keys:
        trie.put(k, None)
    timings["radix trie"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    table: dict[str, None] = {}
    for k in keys:
        table[k] = None
    timings["dict"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    ordered: list[str] = []
    for k in keys:
        i = bisect.bisect_left(ordered, k)
        if i == len(ordered) or ordered[i] != k:
            ordered.insert(i, k)
    timings["sorted list"] = time.perf_counter() - t0

    for name, secs in timings.items():
        logger.info("time taken for %s: %.1f ms", name, secs * 1000)
    logger.debug("trie holds %d keys in %d nodes", len(trie), trie.node_count())
    return timings
