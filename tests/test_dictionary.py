import pytest

from src.dictionary import Trie, load_dictionary


def _make_trie(words: list[str]) -> Trie:
    trie = Trie()
    for w in words:
        trie.insert(w)
    return trie


def test_is_word():
    trie = _make_trie(["cat", "car"])
    assert trie.is_word("cat")
    assert trie.is_word("car")
    assert not trie.is_word("ca")
    assert not trie.is_word("cart")


def test_is_prefix():
    trie = _make_trie(["cat"])
    assert trie.is_prefix("c")
    assert trie.is_prefix("ca")
    assert not trie.is_prefix("d")
    assert not trie.is_prefix("cats")


def test_word_is_its_own_prefix():
    """Every prefix of a word, the word included, must be reported as a prefix."""
    words = ["cat", "catalog", "dog"]
    trie = _make_trie(words)
    for w in words:
        for i in range(1, len(w) + 1):
            assert trie.is_prefix(w[:i]), w[:i]


def test_case_insensitive():
    trie = _make_trie(["Cat"])
    assert trie.is_word("cat")
    assert trie.is_word("CAT")
    assert trie.is_prefix("cA")


def test_len_counts_distinct_words():
    trie = _make_trie(["cat", "CAT", "car"])
    assert len(trie) == 2
    assert "car" in trie
    assert "dog" not in trie


def test_from_words():
    trie = Trie.from_words(["a", "ab"])
    assert trie.is_word("a")
    assert trie.is_word("ab")


def test_load_dictionary(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("Cat\n  car \nx-ray\nab\n\ndog\n")
    trie = load_dictionary(dict_file, min_length=3)
    assert trie.is_word("cat")
    assert trie.is_word("car")
    assert trie.is_word("dog")
    assert not trie.is_word("ab")
    assert not trie.is_prefix("x")
    assert len(trie) == 3


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")
