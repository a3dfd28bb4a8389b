from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class TrieNode:
    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_terminal: bool = False
    payload: bytes = b""


class Trie:
    """Character prefix tree; words are lowercased on insert.

    Each terminal node carries an opaque payload (the frequency column of a
    dictionary file). Readers only rely on ``children``, ``is_terminal`` and
    ``payload``.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str, payload: bytes | str = b"") -> None:
        word = word.strip().lower()
        if not word:
            return
        node = self.root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
            node = nxt
        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.payload = payload.encode("utf-8") if isinstance(payload, str) else payload

    def build(self, entries: Iterable[tuple[str, bytes | str]]) -> "Trie":
        for word, payload in entries:
            self.insert(word, payload)
        return self

    def find(self, word: str) -> TrieNode | None:
        node = self.root
        for ch in word.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self.find(word)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_terminal:
                yield prefix
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, prefix + ch))
