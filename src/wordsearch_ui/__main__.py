from __future__ import annotations
import argparse, json, os, sys
from wordsearch.config import DEFAULT_FILE, TOP_K
from wordsearch.engine import Engine, Suggestions
from wordsearch.models import CompletionsRec
from . import initialize, shutdown

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _clear_screen():
    # ANSI clear; fallback to newlines if not a TTY
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)
    else:
        print("\n" * 100)

def _print_completions(title: str, rec: CompletionsRec) -> None:
    print(_c(f"{title} ({len(rec.results)} of {rec.total_candidates} candidates, "
             f"{rec.elapsed * 1000:.2f} ms)", "32"))
    if not rec.results:
        print(_c("(no matches)", "2;37")); return
    for i, c in enumerate(rec.results, start=1):
        print(f"{i:>2}: completion '{c.text}' occurs {c.frequency} times")

def _print_suggestions(s: Suggestions) -> None:
    _print_completions("Completions", s.exact)
    if s.max_distance is None:
        print(_c("need at least two letters to compute Damerau-Levenshtein distance.", "2;37"))
    else:
        _print_completions(f"Damerau-Levenshtein (max_dist={s.max_distance})", s.fuzzy)

def _print_locations(eng: Engine, word: str) -> None:
    occurrences = eng.lookup(word)
    if occurrences is None:
        print(f"No matches of '{word}' found."); return
    print(_c(f"Observed {len(occurrences)} instances of '{word}'", "35"))
    for i, oc in enumerate(occurrences):
        print(f"{i}: line {oc.line}, word {oc.word}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word search CLI (prefix + fuzzy completion)")
    p.add_argument("path", nargs="?", default=DEFAULT_FILE, help="Text file to index")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    p.add_argument("--max-dist", type=int, default=None,
                   help="Edit budget for fuzzy completions (default: by query length)")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--lookup", default=None, help="Print the locations of an exact word")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.k < 0:
        p.error("-k must be >= 0")
    if args.max_dist is not None and args.max_dist < 0:
        p.error("--max-dist must be >= 0")

    try:
        eng = initialize(args.path, verbose=args.verbose)
    except FileNotFoundError:
        p.error(f"cannot open {args.path!r}")
    try:
        st = eng.stats()
        if not args.json:
            print(_c(f"Index compressed {st['records']} records containing {st['words']} words "
                     f"to an index of {st['distinct']} items in {st['build_seconds']}s", "35"))

        def run_query(q: str) -> Suggestions:
            if args.max_dist is None:
                s = eng.suggest(q, top_k=args.k)
            else:
                s = Suggestions(prefix=q,
                                exact=eng.complete(q, top_k=args.k),
                                fuzzy=eng.fuzzy_complete(q, top_k=args.k, max_distance=args.max_dist),
                                max_distance=args.max_dist)
            if args.json:
                print(json.dumps(s.to_dict(), ensure_ascii=False, indent=2))
            else:
                _print_suggestions(s)
            return s

        if args.lookup:
            if args.json:
                occ = eng.lookup(args.lookup) or ()
                print(json.dumps([[o.line, o.word] for o in occ]))
            else:
                _print_locations(eng, args.lookup)

        if args.q:
            run_query(args.q)

        if args.repl:
            _repl(eng, run_query)
        return 0
    finally:
        shutdown()

def _repl(eng: Engine, run_query) -> None:
    print("Type a prefix and press Enter (empty to quit).  Type '#' to reset the buffer.")
    print(_c("Commands: :accept, ?word (locations), :stats, :clear, :reset", "2;37"))
    buffer = ""
    best = ""
    while True:
        try:
            raw = input(f"{buffer}> " if buffer else "> ")
        except (EOFError, KeyboardInterrupt):
            print(); break
        cmd = raw.strip()
        if raw == "":
            print("Goodbye!"); break
        if cmd in ("#", ":reset"):
            buffer = ""; best = ""; print(_c("(reset)", "2;36")); continue
        if cmd in (":clear", ":cls"):
            _clear_screen(); continue
        if cmd == ":stats":
            print(eng.stats()); continue
        if cmd.startswith("?"):
            _print_locations(eng, cmd[1:] or buffer); continue
        if cmd == ":accept":
            if best:
                buffer = best
            else:
                print(_c("(no completion to accept)", "2;37")); continue
        else:
            buffer += raw
        s = run_query(buffer)
        best = s.exact.results[0].text if s.exact.results else ""

if __name__ == "__main__":
    sys.exit(main())
