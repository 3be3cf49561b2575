"""Defaults shared by the loader, benchmark and CLI."""

from __future__ import annotations

# key<TAB>value lines in key files
KEY_VALUE_SEPARATOR = "\t"

DEFAULT_BENCH_SIZE = 100_000
DEFAULT_SEED: int | None = None
