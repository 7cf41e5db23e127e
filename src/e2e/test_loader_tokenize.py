from pathlib import Path
import pytest
from wordrank import UnreadableFileError
from wordrank.loader import list_files, normalize_word, tokenize, tokenize_text


def test_tokenize_text_lowercases_and_splits_on_punctuation():
    assert tokenize_text("Cat, dog... CAT!\nbird") == ["cat", "dog", "cat", "bird"]
    assert tokenize_text("   ") == []


def test_normalize_word():
    assert normalize_word("  Cat ") == "cat"


def test_tokenize_missing_file(tmp_path: Path):
    with pytest.raises(UnreadableFileError) as ei:
        tokenize(tmp_path / "missing.txt")
    assert isinstance(ei.value, OSError)


def test_list_files_sorted_regular_files_only(tmp_path: Path):
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "a.md").write_text("a", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    assert [p.name for p in list_files(tmp_path)] == ["a.md", "b.txt"]


def test_list_files_rejects_a_file(tmp_path: Path):
    f = tmp_path / "x.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        list_files(f)
