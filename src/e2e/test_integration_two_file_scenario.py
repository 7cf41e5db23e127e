import pytest
from wordrank import FileIndex, RankType, UnknownFileError


@pytest.mark.e2e
def test_counts_and_ranks(two_file_index: FileIndex):
    idx = two_file_index
    assert idx.filenames() == ["A.txt", "B.txt"]
    assert idx.count_in_file("B.txt", "dog") == 2
    assert idx.count_in_file("A.txt", "cat") == 2
    assert idx.count_in_file("A.txt", "bird") == 0
    assert idx.rank_in_file("A.txt", "cat") == 1
    assert idx.rank_in_file("A.txt", "dog") == 2
    assert idx.rank_in_file("B.txt", "dog") == 1
    assert idx.rank_in_file("B.txt", "bird") == 2


@pytest.mark.e2e
def test_absent_word_takes_default_rank(two_file_index: FileIndex):
    idx = two_file_index
    # 2 distinct words per file -> 2 + 30
    assert idx.rank_in_file("A.txt", "bird") == 32
    assert idx.rank_in_file("B.txt", "cat") == 32
    assert idx.rank_in_file("A.txt", "zebra") == 32


@pytest.mark.e2e
def test_average_rank(two_file_index: FileIndex):
    idx = two_file_index
    assert idx.average_rank("dog") == 1      # (2 + 1) // 2
    assert idx.average_rank("cat") == 16     # (1 + 32) // 2
    assert idx.average_rank("bird") == 17    # (32 + 2) // 2
    assert idx.average_rank("zebra") == 32   # never seen


@pytest.mark.e2e
def test_query_words_are_lower_cased(two_file_index: FileIndex):
    idx = two_file_index
    assert idx.count_in_file("B.txt", "DOG") == 2
    assert idx.rank_in_file("A.txt", "Dog") == 2
    assert idx.average_rank("  Dog ") == 1


@pytest.mark.e2e
def test_words_with_rank_below(two_file_index: FileIndex):
    idx = two_file_index
    assert set(idx.words_with_rank_below(2, RankType.MIN)) == {"cat", "dog"}
    assert idx.words_with_min_rank_below(2) == ["cat", "dog"]
    assert idx.words_with_max_rank_below(3) == ["dog"]
    assert idx.words_with_average_rank_below(17) == ["dog", "cat"]
    assert idx.words_with_rank_below(1, "average") == []


@pytest.mark.e2e
def test_unknown_file(two_file_index: FileIndex):
    idx = two_file_index
    with pytest.raises(UnknownFileError):
        idx.count_in_file("C.txt", "cat")
    with pytest.raises(UnknownFileError):
        idx.rank_in_file("C.txt", "cat")


@pytest.mark.e2e
def test_report_and_option_lookup(two_file_index: FileIndex):
    idx = two_file_index
    rep = idx.report("Dog")
    assert rep.word == "dog" and rep.known
    assert rep.counts == {"A.txt": 1, "B.txt": 2}
    assert rep.ranks == {"A.txt": 2, "B.txt": 1}
    assert (rep.average, rep.min, rep.max) == (1, 1, 2)

    unseen = idx.report("zebra")
    assert not unseen.known
    assert unseen.ranks == {"A.txt": 32, "B.txt": 32}

    assert idx.ranked_word("zebra") is None
    assert idx.ranked_word("cat").word == "cat"
    assert "zebra" not in idx.vocabulary()
