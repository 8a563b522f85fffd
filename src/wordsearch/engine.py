# src/wordsearch/engine.py
from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from . import config as CFG
from .index import Postings, WordIndex
from .loader import load_index
from .models import CompletionsRec

log = logging.getLogger(__name__)


@dataclass
class Suggestions:
    """Prefix and fuzzy completions for one query, as shown by the front ends."""
    prefix: str
    exact: CompletionsRec
    fuzzy: CompletionsRec = field(default_factory=CompletionsRec)
    max_distance: Optional[int] = None   # None: query too short for fuzzy search

    def to_dict(self) -> dict:
        return {
            "prefix": self.prefix,
            "completions": self.exact.to_dict(),
            "fuzzy": self.fuzzy.to_dict(),
            "max_distance": self.max_distance,
        }


def default_max_distance(prefix: str) -> Optional[int]:
    """
    Edit budget for a fuzzy query when the caller gives none.
    Too-short queries get None (no fuzzy search), short ones SHORT_MAX_DIST,
    the rest LONG_MAX_DIST.
    """
    n = len(prefix)
    if n < CFG.MIN_FUZZY_CHARS:
        return None
    return CFG.SHORT_MAX_DIST if n <= CFG.SHORT_QUERY_CHARS else CFG.LONG_MAX_DIST


class Engine:
    """
    Thin orchestration layer over a WordIndex.

    Public API (used by CLI/Flask/GUI):
      * build(path) / build_from_records(records): index a text source
      * lookup(word): occurrences of an exact word
      * complete(prefix, top_k): frequency-ranked prefix completions
      * fuzzy_complete(prefix, top_k, max_distance): typo-tolerant completions
      * suggest(prefix, top_k): both of the above
      * shutdown(): release the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[WordIndex] = None
        self.source: Optional[str] = None
        self.build_seconds: float = 0.0

    # /* ~~~ Build an index from a text file ~~~ */
    def build(self, path: str, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["WORDSEARCH_VERBOSE"] = "1"

        log.info("Building index from %s", path)
        t0 = time.perf_counter()
        idx = load_index(path)
        self._commit(idx, path, time.perf_counter() - t0)

    # /* ~~~ Build an index from records already in memory ~~~ */
    def build_from_records(self, records: Iterable[str], *, source: str = "<memory>") -> None:
        t0 = time.perf_counter()
        idx = WordIndex.build(records)
        self._commit(idx, source, time.perf_counter() - t0)

    def _commit(self, idx: WordIndex, source: str, seconds: float) -> None:
        self.index = idx
        self.source = source
        self.build_seconds = seconds
        log.info(
            "Index compressed %d records containing %d words to an index of %d items in %.3fs",
            idx.record_count, idx.word_count, idx.size(), seconds,
        )

    # ------------- query -------------

    def _require_index(self) -> WordIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or build_from_records() first.")
        return self.index

    def lookup(self, word: str) -> Optional[Postings]:
        return self._require_index().lookup(word)

    def complete(self, prefix: str, *, top_k: int = CFG.TOP_K) -> CompletionsRec:
        idx = self._require_index()
        t0 = time.perf_counter()
        rec = idx.completions(prefix, top_k)
        rec.elapsed = time.perf_counter() - t0
        log.debug("completions(%r) -> %d/%d in %.4fs",
                  prefix, len(rec.results), rec.total_candidates, rec.elapsed)
        return rec

    def fuzzy_complete(self, prefix: str, *, top_k: int = CFG.TOP_K,
                       max_distance: Optional[int] = None) -> CompletionsRec:
        idx = self._require_index()
        if max_distance is None:
            max_distance = default_max_distance(prefix)
            if max_distance is None:
                return CompletionsRec()
        t0 = time.perf_counter()
        rec = idx.fuzzy_completions(prefix, top_k, max_distance)
        rec.elapsed = time.perf_counter() - t0
        log.debug("fuzzy_completions(%r, d=%d) -> %d/%d in %.4fs",
                  prefix, max_distance, len(rec.results), rec.total_candidates, rec.elapsed)
        return rec

    # /* ~~~ what the interactive front ends show for each keystroke ~~~ */
    def suggest(self, prefix: str, *, top_k: int = CFG.TOP_K) -> Suggestions:
        exact = self.complete(prefix, top_k=top_k)
        max_distance = default_max_distance(prefix)
        if max_distance is None:
            return Suggestions(prefix=prefix, exact=exact)
        fuzzy = self.fuzzy_complete(prefix, top_k=top_k, max_distance=max_distance)
        return Suggestions(prefix=prefix, exact=exact, fuzzy=fuzzy, max_distance=max_distance)

    def best_completion(self, prefix: str) -> str:
        """Most frequent completion of `prefix`, or "" when there is none."""
        rec = self.complete(prefix, top_k=1)
        return rec.results[0].text if rec.results else ""

    def longest_completion(self, prefix: str) -> str:
        return self._require_index().longest_completion(prefix)

    def stats(self) -> dict:
        idx = self._require_index()
        return {
            "source": self.source,
            "records": idx.record_count,
            "words": idx.word_count,
            "distinct": idx.size(),
            "build_seconds": round(self.build_seconds, 4),
        }

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self.source = None
        log.info("Engine shutdown complete")
