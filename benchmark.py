"""
Benchmark: metacompare edit distances.

    1. Classical edit distance vs rapidfuzz (if installed) — same values?
    2. Substring edit distance: the two variants on skewed lengths
    3. All-pairs comparison of a synthetic catalogue

The point is NOT "pure Python is fast" — rapidfuzz is C++.  The point is
to know what an all-pairs run over N records costs before starting it.
"""

import sys
import os
import random
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from io import StringIO

from metacompare.core import (
    edit_distance, title_word_distance,
    _substring_edit_distance_by_sub, _substring_edit_distance_by_super,
    code_point_count,
)
from metacompare.comparers import DistancesComparer, compare_all_pairs
from metacompare.output import DistancesOutput
from metacompare.records import MetadataLine


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

STRING_PAIRS = [
    ("kitten", "sitting"),
    ("Jane Doe", "Jane Roe"),
    ("Johann Wolfgang von Goethe", "J. W. v. Goethe"),
    ("\U0001F600 smile", "a smile"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
]

VOCABULARY = [
    "the", "a", "of", "and", "great", "novel", "history", "war", "peace",
    "letters", "journey", "collected", "works", "volume", "second", "edition",
    "on", "nature", "essays", "poems", "life", "death", "city", "night",
]

AUTHORS = [
    "Jane Doe", "John Smith", "Anna Schmidt", "Johann Meyer", "Marie Dubois",
    "Pierre Martin", "Ivan Petrov", "Olga Ivanova", "Hans Müller", "Eva Novak",
]


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    import importlib
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


def _catalogue(n, rng):
    """Synthetic metadata with some near-duplicate titles."""
    records = []
    for i in range(n):
        words = [rng.choice(VOCABULARY) for _ in range(rng.randint(2, 7))]
        if records and rng.random() < 0.2:
            # Typo'd copy of an earlier title
            words = records[rng.randrange(len(records))].title.split()
            k = rng.randrange(len(words))
            words[k] = words[k] + "s"
        records.append(MetadataLine(rng.choice(AUTHORS), " ".join(words), f"f{i}"))
    return records


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_edit_distance():
    """Compare values and timing with rapidfuzz's Levenshtein."""
    print("=" * 70)
    print("  §1  CLASSICAL EDIT DISTANCE")
    print("=" * 70)
    print()

    rapidfuzz = _try_import("rapidfuzz.distance")

    for s1, s2 in STRING_PAIRS:
        t0 = time.perf_counter()
        d = edit_distance(s1, s2)
        dt = time.perf_counter() - t0

        if rapidfuzz:
            expected = rapidfuzz.Levenshtein.distance(s1, s2)
            match = "✓" if d == expected else "✗"
            ref = f"(rapidfuzz = {expected})"
        else:
            match = " "
            ref = ""

        print(f"  {match} d({s1[:25]!r}, {s2[:25]!r}) = {d}  {ref}  [{dt*1000:.3f}ms]")

    if not rapidfuzz:
        print()
        print("  rapidfuzz:        NOT INSTALLED (pip install rapidfuzz)")
    print()


def benchmark_variants():
    """Time both substring variants when one sequence is much longer."""
    print("=" * 70)
    print("  §2  SUBSTRING VARIANTS (row by sub vs row by super)")
    print("=" * 70)
    print()

    rng = random.Random(1)
    costs = (code_point_count, code_point_count, edit_distance)

    for short_len, long_len in [(3, 30), (5, 200), (10, 1000)]:
        short = [rng.choice(VOCABULARY) for _ in range(short_len)]
        long = [rng.choice(VOCABULARY) for _ in range(long_len)]

        t0 = time.perf_counter()
        d_sub = _substring_edit_distance_by_sub(short, long, *costs)
        t1 = time.perf_counter()
        d_super = _substring_edit_distance_by_super(short, long, *costs)
        t2 = time.perf_counter()

        same = "✓" if d_sub == d_super else "✗"
        print(f"  {same} {short_len:>3} words into {long_len:>5}: d={d_sub:>4}  "
              f"row {short_len + 1:>5} cells {(t1 - t0)*1000:>8.2f}ms   "
              f"row {long_len + 1:>5} cells {(t2 - t1)*1000:>8.2f}ms")

    print()


def benchmark_all_pairs():
    """How all-pairs comparison scales with the number of records."""
    print("=" * 70)
    print("  §3  ALL PAIRS")
    print("=" * 70)
    print()

    rng = random.Random(2)
    for n in [10, 50, 100, 200]:
        records = _catalogue(n, rng)
        output = DistancesOutput(StringIO())

        t0 = time.perf_counter()
        pairs = compare_all_pairs(records, DistancesComparer(output), output)
        dt = time.perf_counter() - t0

        print(f"  {n:>4} records: {pairs:>6} pairs  time={dt*1000:>9.2f}ms  "
              f"({dt*1e6/max(pairs, 1):.1f}µs/pair)")

    print()

    # Title distance alone, for a sense of the per-pair cost
    a = "The Collected Works of Jane Doe Volume Second Edition".split()
    b = "Collected Works of Jane Doe Volume 2".split()
    t0 = time.perf_counter()
    for _ in range(1000):
        title_word_distance(a, b)
    dt = time.perf_counter() - t0
    print(f"  title_word_distance, 9 vs 7 words: {dt*1000:.1f}µs/call")
    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          METADATA EDIT DISTANCES — BENCHMARK SUITE                   ║")
    print("║          metacompare v0.1.0                                          ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_edit_distance()
    benchmark_variants()
    benchmark_all_pairs()


if __name__ == "__main__":
    main()
