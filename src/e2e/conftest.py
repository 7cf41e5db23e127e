from pathlib import Path
import pytest
from wordrank import FileIndex


def seed_two_files(tmp: Path) -> str:
    root = tmp / "Archive"
    root.mkdir()
    (root / "A.txt").write_text("cat dog cat\n", encoding="utf-8")
    (root / "B.txt").write_text("dog dog bird\n", encoding="utf-8")
    return str(root)


@pytest.fixture()
def two_file_index(tmp_path: Path) -> FileIndex:
    """A.txt = 'cat dog cat', B.txt = 'dog dog bird', indexed from disk."""
    idx = FileIndex()
    idx.index_directory(seed_two_files(tmp_path))
    return idx
