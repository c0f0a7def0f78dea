from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable

from boggle.errors import InvalidArgumentError
from boggle.trie import TernarySearchTrie

logger = logging.getLogger("boggle")

MIN_WORD_LENGTH = 3


class Dictionary:
    """Word list backed by a ternary search trie.

    Only words of at least ``min_length`` letters are stored; shorter
    entries are skipped rather than rejected.
    """

    def __init__(self, min_length: int = MIN_WORD_LENGTH):
        if min_length < 1:
            raise InvalidArgumentError(f"Minimum word length must be positive, got {min_length}")
        self.min_length = min_length
        self.trie = TernarySearchTrie()

    @classmethod
    def from_words(cls, words: Iterable[str], min_length: int = MIN_WORD_LENGTH,
                   shuffle: bool = False) -> Dictionary:
        dictionary = cls(min_length)
        if shuffle:
            words = list(words)
            random.shuffle(words)
        for word in words:
            dictionary.add(word)
        return dictionary

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and len(word) >= self.min_length and word.lower() in self.trie

    def __iter__(self):
        return iter(self.trie)

    def add(self, word: str) -> bool:
        """Add word if long enough. Returns True if it was newly stored."""
        word = word.strip().lower()
        if len(word) < self.min_length:
            return False
        if not word.isalpha():
            raise InvalidArgumentError(f"Non-alphabetic character found in dictionary word ({word!r})")
        return self.trie.insert(word)

    def is_word(self, text: str) -> bool:
        return len(text) >= self.min_length and self.trie.contains_exact(text)

    def is_prefix(self, text: str) -> bool:
        return self.trie.contains_prefix(text)


def load_dictionary(path: str | Path, min_length: int = MIN_WORD_LENGTH,
                    shuffle: bool = True) -> Dictionary:
    """Load a one-word-per-line file into a Dictionary.

    Lines that are blank, too short or contain anything but letters are
    skipped. Words are shuffled before insertion so a sorted word list does
    not degenerate the trie into long sibling chains.
    """
    words: list[str] = []
    skipped = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if len(word) < min_length:
                continue
            if not word.isalpha():
                skipped += 1
                continue
            words.append(word)

    if skipped:
        logger.info("Skipped %d non-alphabetic entries in %s", skipped, path)

    dictionary = Dictionary.from_words(words, min_length, shuffle=shuffle)
    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary
