from __future__ import annotations

from typing import Iterator

from boggle.errors import InvalidArgumentError


class TrieNode:
    __slots__ = ("ch", "is_word", "lo", "eq", "hi")

    def __init__(self, ch: str):
        self.ch: str = ch
        self.is_word: bool = False
        self.lo: TrieNode | None = None
        self.eq: TrieNode | None = None
        self.hi: TrieNode | None = None


def _check_key(key: str, action: str):
    if not isinstance(key, str) or not key.strip():
        raise InvalidArgumentError(f"Can't {action} an empty key ({key!r})")
    if not key.isalpha():
        raise InvalidArgumentError(f"Non-alphabetic character found in key ({key!r})")


class TernarySearchTrie:
    """Ternary search trie storing keys only, with a terminal flag per node.

    Each node holds one character and three links: ``lo`` and ``hi`` point to
    siblings with a smaller or larger character at the same depth, ``eq``
    advances to the next character of the key.
    """

    def __init__(self):
        self.root: TrieNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        if not isinstance(key, str) or not key or not key.isalpha():
            return False
        return self.contains_exact(key)

    def __iter__(self) -> Iterator[str]:
        # In-order walk with an explicit stack: lo, node, eq, hi.
        stack: list[tuple[TrieNode, str, bool]] = []
        if self.root is not None:
            stack.append((self.root, "", False))
        while stack:
            node, prefix, expanded = stack.pop()
            if expanded:
                if node.is_word:
                    yield prefix + node.ch
                continue
            if node.hi is not None:
                stack.append((node.hi, prefix, False))
            if node.eq is not None:
                stack.append((node.eq, prefix + node.ch, False))
            stack.append((node, prefix, True))
            if node.lo is not None:
                stack.append((node.lo, prefix, False))

    def insert(self, key: str) -> bool:
        """Insert key. Returns True if it was not already present."""
        _check_key(key, "insert")

        if self.root is None:
            self.root = TrieNode(key[0])
        node = self.root
        idx = 0
        last = len(key) - 1
        while True:
            ch = key[idx]
            if ch < node.ch:
                if node.lo is None:
                    node.lo = TrieNode(ch)
                node = node.lo
            elif ch > node.ch:
                if node.hi is None:
                    node.hi = TrieNode(ch)
                node = node.hi
            elif idx < last:
                idx += 1
                if node.eq is None:
                    node.eq = TrieNode(key[idx])
                node = node.eq
            else:
                break

        if node.is_word:
            return False
        node.is_word = True
        self._size += 1
        return True

    def _find(self, key: str) -> TrieNode | None:
        node = self.root
        idx = 0
        last = len(key) - 1
        while node is not None:
            ch = key[idx]
            if ch < node.ch:
                node = node.lo
            elif ch > node.ch:
                node = node.hi
            elif idx < last:
                idx += 1
                node = node.eq
            else:
                return node
        return None

    def contains_exact(self, key: str) -> bool:
        _check_key(key, "look up")
        node = self._find(key)
        return node is not None and node.is_word

    def contains_prefix(self, key: str) -> bool:
        _check_key(key, "look up")
        return self._find(key) is not None
