from __future__ import annotations
import os
from typing import Iterator

from .config import ENCODING
from .index import WordIndex


def iter_records(path: str, encoding: str = ENCODING) -> Iterator[str]:
    """Yield the lines of a text file without their line terminators."""
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding=encoding, errors="ignore") as f:
        for raw in f:
            yield raw.rstrip("\r\n")


def load_index(path: str, encoding: str = ENCODING) -> WordIndex:
    """Read `path` line by line and index it. The Engine logs the summary."""
    return WordIndex.build(iter_records(path, encoding=encoding))
