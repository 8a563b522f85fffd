# src/wordsearch/index.py
"""
Positional word index.

Every whitespace-delimited token of every record is normalized and stored
with its WordLocation. The index is built once by build() and is read-only
afterwards: keys are kept in a sorted list (bisect for lookups and prefix
ranges) and each bucket is frozen into a tuple.
"""

from __future__ import annotations
import bisect
import logging
import os
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .config import PROGRESS_EVERY_RECORDS
from .distance import bounded_prefix_distance
from .models import CompletionsRec, WordLocation
from .normalize import normalize
from .ranker import rank

log = logging.getLogger(__name__)

Postings = Tuple[WordLocation, ...]


def _verbose() -> bool:
    return os.environ.get("WORDSEARCH_VERBOSE") == "1"


class WordIndex:
    """
    Ordered mapping normalized word -> occurrences.

    Do not construct directly; use build() (or WordIndex.build()).
    Safe to share between threads for reading, nothing is mutated after
    construction.
    """

    __slots__ = ("_keys", "_postings", "record_count", "word_count")

    def __init__(self, postings: Dict[str, Postings], record_count: int, word_count: int) -> None:
        self._keys: List[str] = sorted(postings)
        self._postings: Dict[str, Postings] = postings
        self.record_count = record_count
        self.word_count = word_count

    # ---- Build ----
    @classmethod
    def build(cls, records: Iterable[str]) -> "WordIndex":
        buckets: Dict[str, List[WordLocation]] = defaultdict(list)
        record_count = 0
        word_count = 0
        verbose = _verbose()
        for line_idx, record in enumerate(records):
            for word_idx, token in enumerate(record.split()):
                word_count += 1
                buckets[normalize(token)].append(WordLocation(line_idx, word_idx))
            record_count += 1
            if verbose and record_count % PROGRESS_EVERY_RECORDS == 0:
                log.info("[indexed] records=%d words=%d", record_count, word_count)
        frozen = {w: tuple(locs) for w, locs in buckets.items()}
        return cls(frozen, record_count, word_count)

    # ---- Counters ----
    def size(self) -> int:
        """Number of distinct normalized words."""
        return len(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, word: object) -> bool:
        return word in self._postings

    # ---- Read ----
    def lookup(self, word: str) -> Optional[Postings]:
        """Occurrences of `word`, or None when it was never indexed."""
        i = bisect.bisect_left(self._keys, word)
        if i != len(self._keys) and self._keys[i] == word:
            return self._postings[word]
        return None

    def iter_items(self) -> Iterator[Tuple[str, Postings]]:
        """Yield (word, occurrences) in ascending key order."""
        for k in self._keys:
            yield k, self._postings[k]

    def iter_prefix(self, prefix: str) -> Iterator[Tuple[str, Postings]]:
        # Keys sharing a prefix are contiguous in sorted order, so walk from
        # the first candidate until the prefix no longer matches.
        keys = self._keys
        for i in range(bisect.bisect_left(keys, prefix), len(keys)):
            k = keys[i]
            if not k.startswith(prefix):
                break
            yield k, self._postings[k]

    def range_by_prefix(self, prefix: str) -> List[Tuple[str, Postings]]:
        """All (word, occurrences) whose word starts with `prefix`, ascending."""
        return list(self.iter_prefix(prefix))

    def longest_completion(self, prefix: str) -> str:
        """Longest indexed word starting with `prefix` ("" if none). First wins ties."""
        longest = ""
        for k, _ in self.iter_prefix(prefix):
            if len(k) > len(longest):
                longest = k
        return longest

    # ---- Queries ----
    def completions(self, prefix: str, k: int) -> CompletionsRec:
        """Top-k most frequent words starting with `prefix`."""
        return rank(((w, len(locs)) for w, locs in self.iter_prefix(prefix)), k)

    def fuzzy_completions(self, prefix: str, k: int, max_distance: int) -> CompletionsRec:
        """
        Top-k most frequent words within `max_distance` edits of `prefix`.

        Words that already start with `prefix` are skipped, they belong to
        completions(). This scans the whole index.
        """
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")

        def _survivors() -> Iterator[Tuple[str, int]]:
            for w, locs in self.iter_items():
                if w.startswith(prefix):
                    continue
                if bounded_prefix_distance(prefix, w, max_distance) is not None:
                    yield w, len(locs)

        return rank(_survivors(), k)


def build(records: Iterable[str]) -> WordIndex:
    """Index a sequence of text records (lines)."""
    return WordIndex.build(records)
