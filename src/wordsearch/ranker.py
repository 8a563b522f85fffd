# src/wordsearch/ranker.py
"""
Bounded top-K selection of completions by frequency.

The ranker makes one forward pass over (word, count) pairs and keeps a
fixed-capacity buffer ordered by descending count. Among equal counts the
entry seen first stays in front, so when the input arrives in ascending key
order the alphabetically smaller word wins a tie.
"""

from __future__ import annotations
import bisect
from typing import Iterable, List, Tuple

from .models import Completion, CompletionsRec


def _neg_frequency(c: Completion) -> int:
    return -c.frequency


class TopK:
    """
    Fixed-capacity buffer of completions, most frequent first.

    push() is O(K): a binary search for the slot plus a list insert.
    Equal counts are inserted to the right of existing ones (FIFO).
    """

    __slots__ = ("capacity", "items", "seen")

    def __init__(self, capacity: int) -> None:
        self.capacity = max(0, int(capacity))
        self.items: List[Completion] = []
        self.seen = 0

    def admits(self, count: int) -> bool:
        if self.capacity == 0:
            return False
        if len(self.items) < self.capacity:
            return True
        return count > self.items[-1].frequency

    def push(self, word: str, count: int) -> None:
        self.seen += 1
        if not self.admits(count):
            return
        if len(self.items) == self.capacity:
            self.items.pop()  # evict current minimum
        bisect.insort_right(self.items, Completion(word, count), key=_neg_frequency)

    def result(self) -> CompletionsRec:
        return CompletionsRec(results=list(self.items), total_candidates=self.seen)


def rank(entries: Iterable[Tuple[str, int]], k: int) -> CompletionsRec:
    """Select the k most frequent (word, count) pairs in a single pass."""
    top = TopK(k)
    for word, count in entries:
        top.push(word, count)
    return top.result()
