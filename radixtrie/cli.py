"""Command line interface for radixtrie."""

from __future__ import annotations

import argparse
import logging
import time

from radixtrie.bench import random_keys, time_inserts
from radixtrie.constants import DEFAULT_SEED
from radixtrie.loader import load_file
from radixtrie.trie import RadixTrie

log = logging.getLogger("radixtrie")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixtrie",
        description="Radix trie -- load keys, look them up, time inserts",
    )
    parser.add_argument("--file", type=str, action="append", default=[],
                        help="Key file to load (key or key<TAB>value per line); repeatable")
    parser.add_argument("--get", type=str, action="append", default=[], metavar="KEY",
                        help="Look up KEY; repeatable")
    parser.add_argument("--list", action="store_true",
                        help="Print every entry in trie order")
    parser.add_argument("--bench", type=int, default=None, metavar="N",
                        help="Time inserting N random keys")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help="RNG seed for --bench")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def run_bench(n: int, seed: int | None) -> None:
    keys = random_keys(n, seed)
    timings = time_inserts(keys)
    print("=" * 40)
    print(f" {'Container':<15} {'Keys':>10} {'ms':>10}")
    print("-" * 40)
    for name, secs in timings.items():
        print(f" {name:<15} {len(keys):>10,} {secs * 1000:>10.1f}")
    print("=" * 40)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    trie = RadixTrie()
    t0 = time.time()
    for path in args.file:
        load_file(path, trie)
    if args.file:
        log.debug("Loaded %d keys into %d nodes in %.2fs", len(trie), trie.node_count(), time.time() - t0)

    missing = 0
    for key in args.get:
        if key in trie:
            print(f"{key}\t{trie[key]}")
        else:
            print(f"{key}\t(not found)")
            missing += 1

    if args.list:
        for key, value in trie.walk():
            print(f"{key}\t{value}")

    if args.bench is not None:
        run_bench(args.bench, args.seed)

    return 1 if missing else 0
