# src/wordsearch/distance.py
"""
Bounded Damerau-Levenshtein distance for a query prefix.

Plain Levenshtein distance counts insertions, deletions and substitutions;
Damerau-Levenshtein also counts a swap of two neighbouring characters as a
single edit. Here the query is treated as a prefix of the candidate: only the
first len(query) characters of the candidate matter, whatever follows them is
free. This is what a search box needs, since the user has usually typed only
the start of the word.

The comparison is a single greedy pass that tracks an alignment offset between
the two strings instead of filling a DP matrix, and it gives up as soon as the
budget is exceeded. It is called once per indexed word during a fuzzy scan, so
per-candidate cost matters more than optimality: for some multi-error
patterns the reported distance is higher than the true minimum.
"""

from __future__ import annotations
from typing import Optional


def bounded_prefix_distance(query: str, candidate: str, max_distance: int) -> Optional[int]:
    """
    Return the prefix edit distance between `query` and `candidate`, or None
    when it exceeds `max_distance`.

    0 means `query` is a literal prefix of `candidate`. Each query character
    past the end of `candidate` costs one.

    >>> bounded_prefix_distance("abc", "acb____", 2)
    1
    >>> bounded_prefix_distance("abcXYZ", "abc", 2) is None
    True
    """
    if max_distance < 0:
        raise ValueError("max_distance must be >= 0")

    n_query = len(query)
    n_cand = len(candidate)
    dist = 0
    # > 0: chars were skipped in candidate, < 0: chars were skipped in query
    offset = 0
    skip_next = False

    for i in range(n_query):
        if skip_next:
            skip_next = False
            continue

        j = i + offset
        if j >= n_cand:
            # query runs past the candidate: one insertion per char
            dist += 1
            if dist > max_distance:
                return None
            continue

        q = query[i]
        c = candidate[j]
        if q == c:
            continue

        dist += 1
        if dist > max_distance:
            return None

        has_next_q = i + 1 < n_query
        if j + 1 < n_cand and q == candidate[j + 1]:
            if has_next_q and query[i + 1] == c:
                # adjacent swap fixes this and the next position
                skip_next = True
            else:
                # extra char in candidate
                offset += 1
        elif has_next_q and query[i + 1] == c:
            # extra char in query
            offset -= 1
            skip_next = True
        # otherwise a substitution; alignment is unchanged

    return dist
