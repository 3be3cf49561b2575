"""Build a radix trie from a key file."""

from __future__ import annotations

import logging

from radixtrie.constants import KEY_VALUE_SEPARATOR
from radixtrie.trie import RadixTrie

log = logging.getLogger("radixtrie")


def load_file(
    path: str,
    trie: RadixTrie | None = None,
    separator: str = KEY_VALUE_SEPARATOR,
) -> RadixTrie:
    """Insert every key in ``path`` into ``trie`` (a new one if omitted).

    Lines of the form ``key<separator>value`` map the key to the value
    string.  A bare key maps to its 1-based line number.  Blank lines are
    ignored, lines with an empty key are skipped with a warning.
    """
    if trie is None:
        trie = RadixTrie()
    loaded = 0
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            if separator in line:
                key, value = line.split(separator, 1)
            else:
                key, value = line, lineno
            if not key:
                log.warning("%s:%d: empty key, skipping", path, lineno)
                continue
            trie.put(key, value)
            loaded += 1
    log.info("Loaded %s keys from %s (%s distinct)", f"{loaded:,}", path, f"{len(trie):,}")
    return trie
