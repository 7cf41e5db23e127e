from __future__ import annotations
import os

# rank given to a word that does not occur in a file: distinct words in that file + offset
UNRANKED_OFFSET: int = 30

# reading
ENCODING: str = "utf-8"

# which directory entries count as corpus files (non-recursive)
GLOB_PATTERN: str = os.environ.get("WORDRANK_GLOB", "*")

# Progress logging (set WORDRANK_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("WORDRANK_VERBOSE") == "1"

# web harness
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
