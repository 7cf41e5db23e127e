"""
Corpus Reading and Tokenization Module

Default collaborators for FileIndex.index_directory(): one lists the corpus
files of a directory, the other turns a file into its word sequence. Both
can be swapped for caller-supplied functions with the same signatures.

Key Functions:
    list_files(directory): Regular files directly inside a directory
    tokenize(path): Words of one file, lower-cased
    tokenize_text(text): Words of an in-memory string
    normalize_word(word): The lookup form of a query word

Tokenization Process:
    1. Convert to lowercase
    2. Split on every run of non-word characters (Unicode-aware \\w)
    3. Drop empty pieces
"""

# src/wordrank/loader.py
from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import List

from .config import ENCODING, GLOB_PATTERN
from .errors import UnreadableFileError

log = logging.getLogger(__name__)

# Regular expression for one word
_WORD_RE = re.compile(r"\w+")


def normalize_word(word: str) -> str:
    """
    Bring a query word into the form stored in the index.

    Must stay in step with tokenize_text(): whatever the tokenizer stores,
    a lookup of the same word typed by a user has to find it.

    Example:
        >>> normalize_word("  Cat ")
        'cat'
    """
    return word.strip().lower()


def tokenize_text(text: str) -> List[str]:
    """
    Split text into lower-cased words.

    Punctuation and whitespace both separate words; underscores and digits
    are part of a word, as \\w defines it.

    Example:
        >>> tokenize_text("Cat, dog... CAT!")
        ['cat', 'dog', 'cat']
    """
    return _WORD_RE.findall(text.lower())


def list_files(directory: str | Path) -> List[Path]:
    """
    Return the regular files directly inside `directory`.

    Sub-directories are not descended into. Entries are filtered by
    GLOB_PATTERN and sorted for a reproducible build order.

    Raises:
        FileNotFoundError: `directory` does not exist
        NotADirectoryError: `directory` is a file
    """
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(str(root))
    if not root.is_dir():
        raise NotADirectoryError(str(root))
    files = [p for p in root.glob(GLOB_PATTERN) if p.is_file()]
    files.sort()
    log.debug("Found %d corpus files in %s", len(files), root)
    return files


def tokenize(path: str | Path) -> List[str]:
    """
    Read one corpus file and return its words.

    Raises:
        UnreadableFileError: the file cannot be opened or is not valid text
            in ENCODING
    """
    p = Path(path)
    try:
        with p.open("r", encoding=ENCODING) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableFileError(str(p), str(exc)) from exc
    return tokenize_text(text)
