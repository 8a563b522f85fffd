# src/wordsearch/models.py
"""
Data models for the word search engine.

- WordLocation: one occurrence of a word (record index + token position).
- Completion: a ranked completion, the word and how often it occurs.
- CompletionsRec: the result of a completion query.

These classes carry no logic; indexing and ranking live in index.py and
ranker.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class WordLocation:
    """
    Position of a single occurrence.

    Attributes
    ----------
    line : int
        0-based index of the record (line) the word was read from.
    word : int
        0-based position of the whitespace-delimited token within that
        record, counted before normalization.
    """
    line: int
    word: int


@dataclass(frozen=True, slots=True)
class Completion:
    text: str
    frequency: int   # number of occurrences of `text` in the index


@dataclass(slots=True)
class CompletionsRec:
    """
    Result of completions() / fuzzy_completions().

    `results` holds at most K completions, most frequent first.
    `total_candidates` counts every distinct word that was offered to the
    ranker, whether or not it made the top-K.
    `elapsed` is wall-clock seconds for the query; the index leaves it at 0.0
    and the Engine stamps it.
    """
    results: List[Completion] = field(default_factory=list)
    total_candidates: int = 0
    elapsed: float = 0.0

    def to_dict(self) -> dict:
        return {
            "results": [{"text": c.text, "frequency": c.frequency} for c in self.results],
            "total_candidates": self.total_candidates,
            "elapsed": self.elapsed,
        }
