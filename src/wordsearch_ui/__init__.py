"""Module-level API over a single shared Engine (used by the CLI)."""
from __future__ import annotations
import time
from wordsearch.config import TOP_K
from wordsearch.engine import Engine, Suggestions

_engine: Engine | None = None


def initialize(path: str, verbose: bool = False) -> Engine:
    """Build the shared engine from a text file, replacing any previous one."""
    global _engine
    t0 = time.perf_counter()
    if verbose:
        print(f"[build] indexing {path}")
    eng = Engine()
    eng.build(path, verbose=verbose)
    if _engine is not None:
        _engine.shutdown()
    _engine = eng
    if verbose:
        print(f"[ready] init complete in {time.perf_counter() - t0:.2f}s")
    return eng


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine


def suggest(prefix: str, top_k: int = TOP_K) -> Suggestions:
    """Prefix + fuzzy completions from the shared engine."""
    return get_engine().suggest(prefix, top_k=top_k)


def shutdown() -> None:
    """Release the shared engine, if any."""
    global _engine
    if _engine is not None:
        _engine.shutdown()
    _engine = None
