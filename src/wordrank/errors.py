"""
Error kinds raised by the word-rank index.

Structural errors (bad multiplicities, unknown items, unknown files) are
raised to the immediate caller and never leave a counter or index half
modified. UnreadableFileError is the one recoverable kind: the index build
catches it, logs it, and skips the file.
"""
from __future__ import annotations


class WordRankError(Exception):
    """Base class for every error raised by this package."""


class InvalidCountError(WordRankError, ValueError):
    def __init__(self, k: int, message: str | None = None) -> None:
        self.k = k
        super().__init__(message or f"invalid occurrence count: {k!r}")


class UnknownItemError(WordRankError, KeyError):
    def __init__(self, item) -> None:
        self.item = item
        super().__init__(item)

    def __str__(self) -> str:
        return f"item not present: {self.item!r}"


class UnknownFileError(WordRankError, KeyError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(filename)

    def __str__(self) -> str:
        return f"file not indexed: {self.filename!r}"


class UnreadableFileError(WordRankError, OSError):
    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"cannot read {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
