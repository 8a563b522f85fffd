"""
Word Search Engine

In-memory, typo-tolerant prefix search over a text file. Every word of the
file is indexed with its (line, position) occurrences; queries return exact
locations, completions ranked by frequency, and fuzzy completions within a
small Damerau-Levenshtein distance of what was typed.

Main entry points:
    build(records): index a sequence of lines -> WordIndex
    Engine: build from a file, time queries, combine prefix + fuzzy results

Example Usage:
    from wordsearch import build

    idx = build(["the cat sat.", "the dog sat."])
    idx.lookup("the")                 # (WordLocation(0, 0), WordLocation(1, 0))
    idx.completions("sa", 5)          # [Completion("sat", 2)]
    idx.fuzzy_completions("cap", 5, 1)
"""

from .distance import bounded_prefix_distance
from .engine import Engine, Suggestions
from .index import WordIndex, build
from .models import Completion, CompletionsRec, WordLocation
from .normalize import normalize
from .ranker import rank

__version__ = "1.0.0"
__all__ = [
    "Engine", "Suggestions", "WordIndex", "build", "rank", "normalize",
    "bounded_prefix_distance", "Completion", "CompletionsRec", "WordLocation",
]
