"""
Word Rank Index Module

This module builds an in-memory word-frequency index over a directory of
text files and answers ranking queries about it: how often a word occurs in
a file, which frequency rank it holds there, and its average / min / max rank
across the whole corpus.

Main Classes:
    FileIndex: build once from a directory, then query
    FrequencyCounter: item counts with a count-descending traversal order
    RankType: AVERAGE, MIN or MAX aggregate of a word's per-file ranks

Example Usage:
    from wordrank import FileIndex, RankType

    index = FileIndex()
    index.index_directory("/path/to/texts")

    index.count_in_file("a.txt", "cat")
    index.rank_in_file("a.txt", "cat")
    index.average_rank("cat")
    index.words_with_rank_below(5, RankType.MIN)
"""

# src/wordrank/__init__.py
from .counter import FrequencyCounter
from .engine import FileIndex
from .errors import (
    InvalidCountError,
    UnknownFileError,
    UnknownItemError,
    UnreadableFileError,
    WordRankError,
)
from .models import RankedWord, RankStats, RankType, WordReport

__version__ = "1.0.0"
__all__ = [
    "FileIndex",
    "FrequencyCounter",
    "RankType",
    "RankedWord",
    "RankStats",
    "WordReport",
    "WordRankError",
    "InvalidCountError",
    "UnknownItemError",
    "UnknownFileError",
    "UnreadableFileError",
]
