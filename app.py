# app.py
# CustomTkinter GUI for the word-rank index (dark theme).
# - Index a folder on a background thread (keeps UI responsive).
# - Look up a word: per-file counts and ranks plus average/min/max.
# - List words whose rank is below K for a chosen aggregate.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from wordrank import FileIndex, RankType, WordReport


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_report(rep: WordReport) -> str:
    head = f"{rep.word}" + ("" if rep.known else "  (not in corpus)")
    lines = [head, f"average: {rep.average}   min: {rep.min}   max: {rep.max}", ""]
    lines.append(f"{'file':<36} {'count':>6} {'rank':>6}")
    for name, rank in rep.ranks.items():
        lines.append(f"{shorten_path(name, 36):<36} {rep.counts.get(name, 0):>6} {rank:>6}")
    return "\n".join(lines)


# -------------------- main app --------------------

class WordRankApp(ctk.CTk):
    """Dark-themed GUI that indexes a folder and queries the FileIndex."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Word Rank")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._index: Optional[FileIndex] = None
        self._loading_thread: Optional[threading.Thread] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_query_bar()
        self._build_results()
        self._build_log()

        self._set_status("Ready")

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Word Rank", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.lbl_source = ctk.CTkLabel(bar, text="No folder selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_query_bar(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        self.entry_word = ctk.CTkEntry(box, placeholder_text="Word")
        self.entry_word.grid(row=0, column=0, columnspan=2, sticky="ew", padx=12, pady=(10, 4))
        self.entry_word.bind("<Return>", lambda _ev: self._do_lookup())
        ctk.CTkButton(box, text="Look up", command=self._do_lookup).grid(
            row=0, column=2, padx=(0, 12), pady=(10, 4)
        )

        self.entry_k = ctk.CTkEntry(box, placeholder_text="K", width=80)
        self.entry_k.grid(row=1, column=0, sticky="w", padx=12, pady=(4, 10))
        self.opt_kind = ctk.CTkOptionMenu(box, values=[t.value for t in RankType])
        self.opt_kind.grid(row=1, column=1, sticky="w", padx=6, pady=(4, 10))
        ctk.CTkButton(box, text="Words below K", command=self._do_below).grid(
            row=1, column=2, padx=(0, 12), pady=(4, 10)
        )

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self._set_results("(choose a folder, then look up a word)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a folder to begin.")

    # --------- indexing (threaded) ---------

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose corpus folder")
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Indexing", "A folder is already being indexed. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Indexing…")
        self.progress.start()
        self._index = None  # no queries until the new build returns

        self._loading_thread = threading.Thread(target=self._index_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _index_worker(self, path: str) -> None:
        idx = FileIndex()
        try:
            idx.index_directory(path)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_index_error(e))
            return
        self.after(0, lambda: self._on_index_ok(idx))

    def _on_index_ok(self, idx: FileIndex) -> None:
        self.progress.stop()
        self._index = idx
        n_files, n_words = len(idx.filenames()), len(idx.vocabulary())
        self._set_status(f"{n_files:,} files, {n_words:,} words")
        for name in idx.skipped:
            self._log(f"Skipped unreadable file: {name}")
        self._log(f"Index ready ({n_files} files, {n_words} distinct words).")
        self.entry_word.focus_set()

    def _on_index_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while indexing.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Index error", "Failed to index folder.\nSee event log for details.")

    # --------- queries ---------

    def _do_lookup(self) -> None:
        word = self.entry_word.get().strip()
        if not word or not self._ready():
            return
        if not self._index.filenames():  # type: ignore[union-attr]
            self._set_results("error: no readable files were indexed in this folder.")
            return
        self._set_results(format_report(self._index.report(word)))  # type: ignore[union-attr]

    def _do_below(self) -> None:
        if not self._ready():
            return
        try:
            k = int(self.entry_k.get())
        except ValueError:
            self._set_results("error: K must be an integer.")
            return
        kind = self.opt_kind.get()
        words = self._index.words_with_rank_below(k, kind)  # type: ignore[union-attr]
        self._log(f"{len(words)} words with {kind} rank below {k}.")
        self._set_results("\n".join(words) if words else "(no words)")

    def _ready(self) -> bool:
        if self._index is None:
            self._set_results("error: please index a folder before querying.")
            return False
        return True

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


if __name__ == "__main__":
    app = WordRankApp()
    app.mainloop()
