# src/wordrank/models.py
"""
Data models for the word-rank index.

This module defines the small, immutable containers produced by an index
build:

- RankType: which aggregate of a word's per-file ranks to read.
- RankStats: a word's rank in every indexed file, plus the aggregates.
- RankedWord: a real corpus word together with its RankStats.
- WordReport: everything the index knows about one word, for display.

Words that never occur in the corpus do not get a RankedWord. The index keeps
a single RankStats holding each file's default rank and answers for them
through it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple

from .errors import UnknownFileError


class RankType(str, Enum):
    AVERAGE = "average"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class RankStats:
    """
    Per-file ranks of one word.

    Attributes
    ----------
    ranks : Mapping[str, int]
        File name -> rank of the word in that file. Every indexed file has an
        entry: the word's 1-based frequency position when it occurs in the
        file, otherwise the file's default rank (distinct words + offset).
    """
    ranks: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))

    def rank_in_file(self, filename: str) -> int:
        rank = self.ranks.get(filename)
        if rank is None:
            raise UnknownFileError(filename)
        return rank

    def rank_by_type(self, kind: RankType) -> int:
        """
        Aggregate the per-file ranks.

        AVERAGE truncates: the sum is integer-divided by the number of files,
        so ranks [1, 2] average to 1.
        """
        if not self.ranks:
            raise ValueError("no per-file ranks to aggregate")
        values = self.ranks.values()
        kind = RankType(kind)
        if kind is RankType.AVERAGE:
            return sum(values) // len(values)
        if kind is RankType.MIN:
            return min(values)
        return max(values)

    @property
    def average(self) -> int:
        return self.rank_by_type(RankType.AVERAGE)

    @property
    def min(self) -> int:
        return self.rank_by_type(RankType.MIN)

    @property
    def max(self) -> int:
        return self.rank_by_type(RankType.MAX)


@dataclass(frozen=True)
class RankedWord:
    word: str
    stats: RankStats

    def rank_in_file(self, filename: str) -> int:
        return self.stats.rank_in_file(filename)

    def rank_by_type(self, kind: RankType) -> int:
        return self.stats.rank_by_type(kind)


def rank_key(kind: RankType) -> Callable[[RankedWord], Tuple[int, str]]:
    """Sort key ordering ranked words by the chosen aggregate, then by word."""
    kind = RankType(kind)

    def _key(rw: RankedWord) -> Tuple[int, str]:
        return rw.rank_by_type(kind), rw.word

    return _key


@dataclass(frozen=True)
class WordReport:
    """
    Everything the index knows about one word.

    Attributes
    ----------
    word : str
        The lower-cased query word.
    known : bool
        False when the word occurs in no indexed file; the ranks are then the
        per-file default ranks.
    counts : Dict[str, int]
        File name -> occurrences (0 where absent).
    ranks : Dict[str, int]
        File name -> rank in that file.
    average, min, max : int
        Aggregates over `ranks`, as RankStats.rank_by_type computes them.
    """
    word: str
    known: bool
    counts: Dict[str, int]
    ranks: Dict[str, int]
    average: int
    min: int
    max: int
