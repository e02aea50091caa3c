"""
metacompare.core — Edit distances for metadata comparison
==========================================================

MATHEMATICAL FRAMEWORK
══════════════════════

§1  THE PROBLEM
───────────────

Before comparing the full texts of a corpus pairwise (expensive), we want
to know which pairs of works are plausibly the same work: same author,
same or nearly the same title.  Metadata is noisy — typos, an extra
subtitle, a trailing volume number — so exact equality is too strict.

Two distances cover the two fields:

    • Author names are short strings.  The classical edit distance
      between them counts character typos.

    • Titles are sequences of WORDS.  One title is often a prefix, a
      suffix or an infix of the other ("The Great Novel" vs. "The Great
      Novel: A Romance").  The SUBSTRING edit distance measures how
      cheaply one word sequence can be turned into a piece of the other,
      without paying for the trailing or leading words of the longer one.


§2  CLASSICAL EDIT DISTANCE
───────────────────────────

DEFINITION (Levenshtein 1965):
For strings s = s₁..sₘ, t = t₁..tₙ over code points:

    D[i][0] = i
    D[0][j] = j
    D[i][j] = min(
        D[i-1][j]   + 1,                     # delete sᵢ
        D[i][j-1]   + 1,                     # insert tⱼ
        D[i-1][j-1] + (0 if sᵢ = tⱼ else 1), # substitute
    )

    edit_distance(s, t) = D[m][n]

Only one row is kept.  The row is indexed by s, the outer loop walks t.

Elements are CODE POINTS.  A Python str is already a sequence of code
points, so "\\U0001F600" is ONE element even though UTF-16 needs two
units for it:

    edit_distance("\\U0001F600", "a") = 1


§3  SUBSTRING EDIT DISTANCE
───────────────────────────

DEFINITION:
For a sequence u = u₁..uₘ (the "sub" sequence), a sequence
v = v₁..vₙ (the "super" sequence) and non-negative cost functions

    ins(v)     cost of inserting an element of v
    del(u)     cost of deleting an element of u
    sub(u, v)  cost of replacing an element of u by one of v

let

    D[0][j] = 0                               for all j   (free start)
    D[i][0] = D[i-1][0] + del(uᵢ)
    D[i][j] = min(
        D[i][j-1]   + ins(vⱼ),
        D[i-1][j]   + del(uᵢ),
        D[i-1][j-1] + sub(uᵢ, vⱼ),
    )

    substring_edit_distance(u, v) = min  D[m][j]     (free end)
                                  0≤j≤n

The free start and the free end let u match ANY contiguous window of v.
In particular, if u is a subsequence of v and ins = 0, sub(x, x) = 0,
the distance is 0.

The distance is NOT symmetric: "Great" inside "The Great Novel" costs
nothing, but "The Great Novel" inside "Great" must delete two words.
Callers that want a symmetric notion take the minimum of both
directions (see symmetric_substring_edit_distance).


§4  TWO VARIANTS
────────────────

The table has (m+1)·(n+1) cells but only one row is kept, so the
working memory is one more than the length of the axis the row is
indexed by.  Both axes work:

    Variant "by super" (row indexed by v, outer loop over u):
        row starts as all zeros (D[0][·] = 0).
        after the last u, the answer is min(row).

    Variant "by sub" (row indexed by u, outer loop over v):
        row starts as the cumulative deletion costs D[·][0].
        each outer step resets row[0] = 0 (D[0][j] = 0) and the answer
        is the minimum of row[m] over all steps (including j = 0).

substring_edit_distance picks the one whose row is indexed by the
SHORTER sequence.  The variants compute the same table, so they return
the same value; the choice only affects memory.

Inside a cell, candidates are compared in a fixed order: insertion,
then deletion if strictly cheaper, then substitution if strictly
cheaper.  With integer costs the order never changes the value.


§5  COMPLEXITY
──────────────

    time    O(m·n) cost-function calls
    memory  O(min(m, n))

Each call allocates its own row and keeps no state, so calls are
independent and may run concurrently on distinct inputs.


§6  PRECONDITIONS
─────────────────

Cost functions must return non-negative integers.  This is NOT checked
(the engine sits on the hot path of an all-pairs comparison); with
negative costs the result is meaningless.
"""

from typing import Callable, Sequence, TypeVar


U = TypeVar("U")
V = TypeVar("V")


# ═══════════════════════════════════════════════════════════════════
#  CLASSICAL EDIT DISTANCE
# ═══════════════════════════════════════════════════════════════════

def code_point_count(text: str) -> int:
    """Number of code points in `text` (one per character, BMP or not)."""
    return len(text)


def edit_distance(str1: str, str2: str) -> int:
    """
    Smallest number of code point insertions, deletions and substitutions
    transforming `str1` into `str2` (or vice versa — the distance is
    symmetric).

        edit_distance("kitten", "sitting")  → 3
        edit_distance("", "abc")            → 3
        edit_distance("\\U0001F600", "a")    → 1
    """
    row = list(range(len(str1) + 1))

    for c2 in str2:
        left_above = row[0]
        left = left_above + 1
        row[0] = left
        for i, c1 in enumerate(str1, 1):
            above = row[i]
            # Insert/delete
            left = (above if above < left else left) + 1
            # Substitute
            if c1 != c2:
                left_above += 1
            if left_above < left:
                left = left_above
            row[i] = left
            left_above = above

    return row[-1]


# ═══════════════════════════════════════════════════════════════════
#  SUBSTRING EDIT DISTANCE
# ═══════════════════════════════════════════════════════════════════

def substring_edit_distance(
    sub: Sequence[U],
    super_: Sequence[V],
    insertion_cost: Callable[[V], int],
    deletion_cost: Callable[[U], int],
    substitution_cost: Callable[[U, V], int],
) -> int:
    """
    Cheapest way to make `sub` match a window of `super_`.

    Arguments:
        sub:               the sequence to become part of the other
        super_:            the other sequence
        insertion_cost:    cost of adding an element of `super_`
        deletion_cost:     cost of deleting an element of `sub`
        substitution_cost: cost of replacing an element of `sub`
                           by an element of `super_`

    Costs must be non-negative integers.  The working row is indexed by
    the shorter of the two sequences.
    """
    if len(sub) < len(super_):
        return _substring_edit_distance_by_sub(
            sub, super_, insertion_cost, deletion_cost, substitution_cost)
    return _substring_edit_distance_by_super(
        sub, super_, insertion_cost, deletion_cost, substitution_cost)


def _substring_edit_distance_by_super(
    sub: Sequence[U],
    super_: Sequence[V],
    insertion_cost: Callable[[V], int],
    deletion_cost: Callable[[U], int],
    substitution_cost: Callable[[U, V], int],
) -> int:
    """Variant with the row indexed by `super_` (len(super_) + 1 cells)."""
    row = [0] * (len(super_) + 1)
    best = 0

    for u in sub:
        del_cost = deletion_cost(u)
        left_above = row[0]
        left = left_above + del_cost
        row[0] = left
        # Only the last row counts; restart the minimum on every row.
        best = left
        for j, v in enumerate(super_, 1):
            above = row[j]
            left = left + insertion_cost(v)
            above_cost = above + del_cost
            if above_cost < left:
                left = above_cost
            left_above += substitution_cost(u, v)
            if left_above < left:
                left = left_above
            row[j] = left
            left_above = above
            if left < best:
                best = left

    return best


def _substring_edit_distance_by_sub(
    sub: Sequence[U],
    super_: Sequence[V],
    insertion_cost: Callable[[V], int],
    deletion_cost: Callable[[U], int],
    substitution_cost: Callable[[U, V], int],
) -> int:
    """Variant with the row indexed by `sub` (len(sub) + 1 cells)."""
    del_costs = [deletion_cost(u) for u in sub]

    # D[i][0]: delete the first i elements of sub
    row = [0] * (len(sub) + 1)
    for i, del_cost in enumerate(del_costs, 1):
        row[i] = row[i - 1] + del_cost
    best = row[-1]

    for v in super_:
        ins_cost = insertion_cost(v)
        left_above = row[0]
        left = 0
        row[0] = 0
        for i, u in enumerate(sub, 1):
            above = row[i]
            left = left + del_costs[i - 1]
            above_cost = above + ins_cost
            if above_cost < left:
                left = above_cost
            left_above += substitution_cost(u, v)
            if left_above < left:
                left = left_above
            row[i] = left
            left_above = above
        if left < best:
            best = left

    return best


def symmetric_substring_edit_distance(
    a: Sequence,
    b: Sequence,
    insertion_cost: Callable[[object], int],
    deletion_cost: Callable[[object], int],
    substitution_cost: Callable[[object, object], int],
) -> int:
    """
    min(substring_edit_distance(a, b), substring_edit_distance(b, a)).

    The cost functions are used for both directions, so they must accept
    elements of either sequence (and substitution_cost both argument
    orders).  Swapping `a` and `b` gives the same result.
    """
    return min(
        substring_edit_distance(a, b, insertion_cost, deletion_cost, substitution_cost),
        substring_edit_distance(b, a, insertion_cost, deletion_cost, substitution_cost),
    )


# ═══════════════════════════════════════════════════════════════════
#  WORD SEQUENCES
# ═══════════════════════════════════════════════════════════════════

def title_word_distance(words1: Sequence[str], words2: Sequence[str]) -> int:
    """
    Substring edit distance from `words1` into `words2`.

    Adding or removing a word costs its length in code points; replacing
    a word costs the classical edit distance between the two words.
    """
    return substring_edit_distance(
        words1, words2, code_point_count, code_point_count, edit_distance)
