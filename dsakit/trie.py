"""Prefix tree of words with lookup, removal and suggestions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words stored character by character."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def _walk(self, prefix: str) -> _TrieNode | None:
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.terminal

    def remove(self, word: str) -> None:
        """Unmark word; words that are not present are ignored."""
        node = self._walk(word)
        if node is not None:
            node.terminal = False

    @staticmethod
    def _collect(node: _TrieNode, prefix: str) -> Iterator[str]:
        if node.terminal:
            yield prefix
        for char, child in node.children.items():
            yield from Trie._collect(child, prefix + char)

    def suggestions(self, prefix: str) -> list[str]:
        """All stored words that start with prefix."""
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._collect(node, prefix))

    def suggestions_per_prefix(self, prefix: str) -> list[list[str]]:
        """Suggestions for each non-empty leading part of prefix, shortest first."""
        return [self.suggestions(prefix[:end]) for end in range(1, len(prefix) + 1)]