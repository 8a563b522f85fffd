# app.py
# CustomTkinter GUI for the word search engine (dark theme).
# - Choose a text file; the index is built in a background thread.
# - Live search with debounce: completions + Damerau-Levenshtein completions.
# - Tab accepts the top completion, Enter lists the locations of the word.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from wordsearch.engine import Engine, Suggestions
from wordsearch.models import CompletionsRec
from wordsearch.config import TOP_K


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_completions(title: str, rec: CompletionsRec) -> list[str]:
    lines = [f"{title}  ({len(rec.results)} of {rec.total_candidates}, {rec.elapsed * 1000:.1f} ms)"]
    if not rec.results:
        lines.append("  (no matches)")
    for i, c in enumerate(rec.results, start=1):
        lines.append(f"  {i:>2}: '{c.text}' occurs {c.frequency} times")
    return lines


def format_suggestions(s: Suggestions) -> str:
    lines = format_completions("Completions", s.exact)
    lines.append("")
    if s.max_distance is None:
        lines.append("need at least two letters to compute Damerau-Levenshtein distance.")
    else:
        lines += format_completions(f"Damerau-Levenshtein (max_dist={s.max_distance})", s.fuzzy)
    return "\n".join(lines)


# -------------------- main app --------------------

class WordSearchApp(ctk.CTk):
    """Dark-themed GUI that indexes a text file and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Word Search")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._best: str = ""

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Word Search", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Choose File", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )

        self.lbl_source = ctk.CTkLabel(bar, text="No file selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="SEARCH:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry_query = ctk.CTkEntry(box, placeholder_text="Tab = accept completion, Enter = locations")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)
        self.entry_query.bind("<Tab>", self._on_accept)
        self.entry_query.bind("<Return>", self._on_locations)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self._set_results("(no results yet — choose a file and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a text file to begin.")

    # --------- loading (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose text file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A file is already being indexed. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Building the index…")
        self.progress.start()
        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        eng = Engine()
        try:
            eng.build(path)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(eng))

    def _on_load_ok(self, eng: Engine) -> None:
        self.progress.stop()
        self._engine.shutdown()
        self._engine = eng
        st = eng.stats()
        msg = (f"Index compressed {st['records']:,} records containing {st['words']:,} words "
               f"to an index of {st['distinct']:,} items in {st['build_seconds']}s")
        self._set_status(f"{st['distinct']:,} words indexed.")
        self._log(msg)
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while indexing.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to index file.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, ev=None) -> None:
        if ev is not None and ev.keysym in ("Tab", "Return"):
            return
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q:
            self._best = ""
            self._set_results("")
            return
        if self._engine.index is None:
            self._set_results("error: please choose a file before searching.")
            return
        s = self._engine.suggest(q, top_k=TOP_K)
        self._best = s.exact.results[0].text if s.exact.results else ""
        self._set_results(format_suggestions(s))

    def _on_accept(self, _ev=None) -> str:
        if self._best:
            self.entry_query.delete(0, "end")
            self.entry_query.insert(0, self._best)
            self._do_search()
        return "break"  # keep focus in the entry

    def _on_locations(self, _ev=None) -> str:
        q = self.entry_query.get()
        if self._engine.index is None or not q:
            return "break"
        occurrences = self._engine.lookup(q)
        if occurrences is None:
            self._set_results(f"No matches of '{q}' found.")
        else:
            lines = [f"Observed {len(occurrences)} instances of '{q}'"]
            lines += [f"{i}: line {o.line}, word {o.word}" for i, o in enumerate(occurrences)]
            self._set_results("\n".join(lines))
        return "break"

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = WordSearchApp()
    app.mainloop()
