import pytest

from boggle.dictionary import Dictionary, load_dictionary
from boggle.errors import InvalidArgumentError


def test_short_words_not_stored():
    d = Dictionary.from_words(["at", "a", "cat", "do", "dog"])
    assert len(d) == 2
    assert list(d) == ["cat", "dog"]
    assert not d.is_word("at")
    assert d.is_prefix("ca")


def test_is_word_requires_min_length():
    d = Dictionary.from_words(["cat", "cats"], min_length=4)
    assert not d.is_word("cat")
    assert d.is_word("cats")
    assert d.is_prefix("cat")


def test_words_are_normalized():
    d = Dictionary.from_words(["  Cat\n", "DOG"])
    assert d.is_word("cat")
    assert d.is_word("dog")
    assert "Cat" in d


def test_add_returns_whether_new():
    d = Dictionary()
    assert d.add("cat") is True
    assert d.add("cat") is False
    assert d.add("ca") is False
    assert len(d) == 1


def test_non_alpha_word_rejected():
    with pytest.raises(InvalidArgumentError, match="c4ts"):
        Dictionary.from_words(["cat", "c4ts"])


def test_short_non_alpha_skipped():
    d = Dictionary.from_words(["a1", "cat"])
    assert list(d) == ["cat"]


def test_shuffle_does_not_change_contents():
    words = ["ant", "bee", "cat", "dog", "eel", "fox"]
    d = Dictionary.from_words(words, shuffle=True)
    assert list(d) == words


def test_bad_min_length():
    with pytest.raises(InvalidArgumentError):
        Dictionary(min_length=0)


def test_load_dictionary(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("Cat\n\nab\ndon't\ndog\ncat\nzebra\n", encoding="utf-8")
    d = load_dictionary(dict_file)
    assert list(d) == ["cat", "dog", "zebra"]
    assert d.is_word("zebra")
    assert not d.is_word("dont")


def test_load_dictionary_min_length(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("cat\ncats\nbones\n", encoding="utf-8")
    d = load_dictionary(str(dict_file), min_length=5, shuffle=False)
    assert list(d) == ["bones"]


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")
