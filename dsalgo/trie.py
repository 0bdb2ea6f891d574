"""A trie of lower-case words with insertion, lookup, counting and pruning deletion."""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    end_of_word: bool = False


def _check(word: str) -> str:
    if not set(word) <= _ALPHABET:
        raise ValueError(f"word {word!r} holds characters outside 'a'-'z'")
    return word


class Trie:
    """A set of words over the letters 'a' to 'z'."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add a word, creating nodes along its path as needed."""
        node = self._root
        for letter in _check(word):
            node = node.children.setdefault(letter, _Node())
        node.end_of_word = True

    def search(self, word: str) -> bool:
        """True if the word was inserted and not deleted since."""
        node = self._root
        for letter in _check(word):
            node = node.children.get(letter)
            if node is None:
                return False
        return node.end_of_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        def count(node: _Node) -> int:
            return node.end_of_word + sum(count(child) for child in node.children.values())

        return count(self._root)

    def _walk(self, node: _Node, prefix: str) -> Iterator[str]:
        if node.end_of_word:
            yield prefix
        for letter in sorted(node.children):
            yield from self._walk(node.children[letter], prefix + letter)

    def __iter__(self) -> Iterator[str]:
        return self._walk(self._root, "")

    def words(self) -> list[str]:
        """All stored words in alphabetical order."""
        return list(self)

    def delete(self, word: str) -> None:
        """Remove a word if present, pruning nodes that no longer lead anywhere."""
        _check(word)

        def remove(node: Optional[_Node], depth: int) -> Optional[_Node]:
            if node is None:
                return None
            if depth == len(word):
                node.end_of_word = False
                return node if node.children else None
            letter = word[depth]
            child = remove(node.children.get(letter), depth + 1)
            if child is None:
                node.children.pop(letter, None)
            else:
                node.children[letter] = child
            if not node.end_of_word and not node.children:
                return None
            return node

        self._root = remove(self._root, 0) or _Node()