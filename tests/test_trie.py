import random

import pytest

from boggle.errors import InvalidArgumentError
from boggle.trie import TernarySearchTrie


def _make_trie(words: list[str]) -> TernarySearchTrie:
    trie = TernarySearchTrie()
    for w in words:
        trie.insert(w)
    return trie


WORDS = ["cat", "cats", "car", "care", "dog", "dig", "do", "bone", "bones", "zebra"]


def test_inserted_words_are_found():
    trie = _make_trie(WORDS)
    for w in WORDS:
        assert trie.contains_exact(w), w


def test_every_prefix_of_inserted_word():
    trie = _make_trie(WORDS)
    for w in WORDS:
        for i in range(1, len(w) + 1):
            assert trie.contains_prefix(w[:i]), w[:i]


def test_prefix_without_terminal_is_not_exact():
    trie = _make_trie(["care"])
    assert trie.contains_prefix("car")
    assert not trie.contains_exact("car")
    assert not trie.contains_exact("ca")


def test_unrelated_string_is_not_prefix():
    trie = _make_trie(WORDS)
    for s in ["x", "xy", "q", "catz", "bonez", "zz", "dx"]:
        assert not trie.contains_prefix(s), s
        assert not trie.contains_exact(s), s


def test_empty_trie():
    trie = TernarySearchTrie()
    assert len(trie) == 0
    assert not trie.contains_prefix("a")
    assert not trie.contains_exact("a")
    assert list(trie) == []


def test_reinsert_is_idempotent():
    trie = _make_trie(WORDS)
    before = {w: trie.contains_exact(w) for w in WORDS + ["ca", "bon", "zeb"]}
    size = len(trie)

    assert trie.insert("cat") is False
    assert trie.insert("bones") is False

    after = {w: trie.contains_exact(w) for w in before}
    assert before == after
    assert len(trie) == size


def test_len_counts_distinct_keys():
    trie = TernarySearchTrie()
    assert trie.insert("cat") is True
    assert trie.insert("cat") is False
    assert trie.insert("ca") is True
    assert len(trie) == 2


def test_iteration_is_sorted():
    words = list(WORDS)
    random.Random(7).shuffle(words)
    trie = _make_trie(words)
    assert list(trie) == sorted(WORDS)


def test_sorted_insertion_order():
    """Sorted input degenerates to sibling chains but must still be correct."""
    words = sorted(WORDS)
    trie = _make_trie(words)
    for w in words:
        assert trie.contains_exact(w)
    assert not trie.contains_exact("dogs")


def test_single_letter_key():
    trie = _make_trie(["a", "ab"])
    assert trie.contains_exact("a")
    assert trie.contains_exact("ab")
    assert trie.contains_prefix("a")


def test_contains_operator():
    trie = _make_trie(WORDS)
    assert "cat" in trie
    assert "ca" not in trie
    assert "" not in trie
    assert "c4t" not in trie
    assert 42 not in trie


@pytest.mark.parametrize("key", ["", "   ", "c4t", "ca t", "don't"])
def test_insert_rejects_bad_keys(key):
    trie = TernarySearchTrie()
    with pytest.raises(InvalidArgumentError):
        trie.insert(key)
    assert len(trie) == 0


@pytest.mark.parametrize("key", ["", "1", "ca-"])
def test_lookup_rejects_bad_keys(key):
    trie = _make_trie(WORDS)
    with pytest.raises(InvalidArgumentError):
        trie.contains_exact(key)
    with pytest.raises(InvalidArgumentError):
        trie.contains_prefix(key)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError, match="c4t"):
        TernarySearchTrie().insert("c4t")
