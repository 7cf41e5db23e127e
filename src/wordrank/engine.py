# wordrank/engine.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from . import config as CFG
from . import loader
from .counter import FrequencyCounter
from .errors import UnknownFileError, UnreadableFileError
from .models import RankedWord, RankStats, RankType, WordReport, rank_key

log = logging.getLogger(__name__)

ListFiles = Callable[..., Iterable]
Tokenize = Callable[..., Sequence[str]]


class FileIndex:
    """
    Word-frequency index over a directory of text files.

    Ties together:
      - the file collaborators (list_files / tokenize, see wordrank.loader),
      - one FrequencyCounter per file,
      - one RankedWord per distinct corpus word.

    Public API:
      * index_directory(path):       list -> tokenize -> build (once per instance)
      * index_documents(docs):       build from already-tokenized (name, words) pairs
      * count_in_file(file, word):   occurrences of word in file
      * rank_in_file(file, word):    1-based frequency rank of word in file
      * average_rank(word):          truncated mean of the word's per-file ranks
      * words_with_rank_below(k, kind)

    A word absent from a file ranks at (distinct words in that file +
    UNRANKED_OFFSET) there, so it always ranks below every word present.
    Words are lower-cased both when stored and when looked up.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        list_files: ListFiles = loader.list_files,
        tokenize: Tokenize = loader.tokenize,
        unranked_offset: int = CFG.UNRANKED_OFFSET,
    ) -> None:
        self._list_files = list_files
        self._tokenize = tokenize
        self.unranked_offset = unranked_offset

        self._built: bool = False
        self._counters: Dict[str, FrequencyCounter[str]] = {}
        self._ranked: Dict[str, RankedWord] = {}
        self._unseen: RankStats = RankStats()
        self.skipped: List[str] = []  # files dropped as unreadable during the build

    @property
    def is_built(self) -> bool:
        return self._built

    # /* ~~~ Read every file of a directory and build the index ~~~ */
    def index_directory(self, directory: str | Path, *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        self._ensure_not_built()
        self.skipped = []

        log.info("Indexing directory %s", directory)
        self.index_documents(self._read_directory(directory))

    # /* ~~~ Build from (file name, words) pairs; the core of every build ~~~ */
    def index_documents(self, documents: Iterable[Tuple[str, Iterable[str]]]) -> None:
        self._ensure_not_built()

        counters: Dict[str, FrequencyCounter[str]] = {}
        vocabulary: Set[str] = set()
        for name, words in documents:
            if name in counters:
                raise ValueError(f"duplicate file name in corpus: {name!r}")
            counter: FrequencyCounter[str] = FrequencyCounter(
                w for w in map(loader.normalize_word, words) if w
            )
            counters[name] = counter
            vocabulary.update(counter.item_set())

        # default rank per file, then the rank of every word that does occur there
        defaults: Dict[str, int] = {}
        file_ranks: Dict[str, Dict[str, int]] = {}
        for name, counter in counters.items():
            defaults[name] = counter.size() + self.unranked_offset
            file_ranks[name] = {word: pos for pos, word in enumerate(counter, start=1)}

        ranked: Dict[str, RankedWord] = {}
        for word in vocabulary:
            row = {name: file_ranks[name].get(word, defaults[name]) for name in counters}
            ranked[word] = RankedWord(word=word, stats=RankStats(ranks=row))

        # Commit engine state
        self._counters = counters
        self._ranked = ranked
        self._unseen = RankStats(ranks=defaults)
        self._built = True
        log.info(
            "FileIndex build complete: files=%d words=%d skipped=%d",
            len(counters), len(ranked), len(self.skipped),
        )

    # ------------- query -------------

    def count_in_file(self, filename: str, word: str) -> int:
        return self._counter(filename).count_of(loader.normalize_word(word))

    def rank_in_file(self, filename: str, word: str) -> int:
        self._counter(filename)
        return self._stats_for(loader.normalize_word(word)).rank_in_file(filename)

    def average_rank(self, word: str) -> int:
        self._require_built()
        return self._stats_for(loader.normalize_word(word)).rank_by_type(RankType.AVERAGE)

    def words_with_rank_below(self, k: int, kind: RankType | str) -> List[str]:
        """Corpus words whose `kind` aggregate rank is < k, best first."""
        self._require_built()
        kind = RankType(kind)
        hits = [rw for rw in self._ranked.values() if rw.rank_by_type(kind) < k]
        hits.sort(key=rank_key(kind))
        return [rw.word for rw in hits]

    def words_with_average_rank_below(self, k: int) -> List[str]:
        return self.words_with_rank_below(k, RankType.AVERAGE)

    def words_with_min_rank_below(self, k: int) -> List[str]:
        return self.words_with_rank_below(k, RankType.MIN)

    def words_with_max_rank_below(self, k: int) -> List[str]:
        return self.words_with_rank_below(k, RankType.MAX)

    def ranked_word(self, word: str) -> Optional[RankedWord]:
        """The word's RankedWord, or None when it occurs in no indexed file."""
        self._require_built()
        return self._ranked.get(loader.normalize_word(word))

    def report(self, word: str) -> WordReport:
        self._require_built()
        w = loader.normalize_word(word)
        stats = self._stats_for(w)
        return WordReport(
            word=w,
            known=w in self._ranked,
            counts={name: c.count_of(w) for name, c in sorted(self._counters.items())},
            ranks=dict(sorted(stats.ranks.items())),
            average=stats.average,
            min=stats.min,
            max=stats.max,
        )

    def filenames(self) -> List[str]:
        self._require_built()
        return sorted(self._counters)

    def vocabulary(self) -> List[str]:
        self._require_built()
        return sorted(self._ranked)

    # ------------- internals -------------

    def _read_directory(self, directory: str | Path) -> Iterator[Tuple[str, List[str]]]:
        for path in self._list_files(directory):
            name = Path(path).name
            try:
                words = list(self._tokenize(path))
            except UnreadableFileError as exc:
                log.warning("Skipping unreadable file %s: %s", name, exc)
                self.skipped.append(name)
                continue
            yield name, words

    def _ensure_not_built(self) -> None:
        if self._built:
            raise RuntimeError("FileIndex already built; create a new instance to re-index.")

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("FileIndex not built. Call index_directory() first.")

    def _counter(self, filename: str) -> FrequencyCounter[str]:
        self._require_built()
        counter = self._counters.get(filename)
        if counter is None:
            raise UnknownFileError(filename)
        return counter

    def _stats_for(self, word: str) -> RankStats:
        rw = self._ranked.get(word)
        if rw is None:
            return self._unseen
        return rw.stats
