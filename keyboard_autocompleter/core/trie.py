# trie.py
# Prefix index (trie) over observed words.
# Each node remembers the full prefix it spells and how many times a word ended there,
# so completions can be read straight off the nodes and ranked by frequency.

from __future__ import annotations
from typing import Dict, Iterator, Optional

from ..context.normalizer import strip_trailing_punct


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    content: the prefix spelled from root up to and including this node
    is_word: True once at least one insertion terminated here
    freq: how many insertions terminated here
    """

    __slots__ = ("children", "content", "is_word", "freq")

    def __init__(self, content: str = "") -> None:
        self.children: Dict[str, TrieNode] = {}
        self.content = content
        self.is_word = False
        self.freq = 0

    def confirm_end_of_word(self) -> None:
        self.is_word = True
        self.freq += 1

    def __repr__(self) -> str:
        return f"TrieNode({self.content!r}, is_word={self.is_word}, freq={self.freq})"


class PrefixIndex:
    """
    Trie of words for prefix lookup, used by the AutoCompleter.
     - stores characters exactly as given (callers lowercase if they want to)
     - one trailing punctuation character is dropped on insert
     - nodes are created lazily and never removed
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._nodes = 1
        self._words = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word, creating any missing nodes on the way down.
        "hello!" lands on the same node as "hello"; "" (and a lone "!") land on root.
        Re-inserting a word bumps its frequency.
        """
        node = self._root
        for ch in strip_trailing_punct(word):
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode(node.content + ch)
                node.children[ch] = nxt
                self._nodes += 1
            node = nxt

        if not node.is_word:
            self._words += 1
        node.confirm_end_of_word()

    # lookup ---------------------------------------------------------
    def find_node(self, prefix: str) -> Optional[TrieNode]:
        """Follow `prefix` from root. None as soon as a character has no child."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def frequency(self, word: str) -> int:
        """Times `word` was inserted (0 if never). No punctuation handling on lookup."""
        node = self.find_node(word)
        if node is None or not node.is_word:
            return 0
        return node.freq

    def __contains__(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_word

    # traversal ------------------------------------------------------
    def iter_words(self, start: Optional[TrieNode] = None) -> Iterator[TrieNode]:
        """
        Depth-first walk yielding every word node at or below `start` (root by default).
        Explicit stack, so long words can't hit the recursion limit.
        Sibling order follows child insertion order.
        """
        stack = [start if start is not None else self._root]
        while stack:
            node = stack.pop()
            if node.is_word:
                yield node
            # reversed so the first-inserted child is visited first
            stack.extend(reversed(list(node.children.values())))

    # diagnostics ----------------------------------------------------
    @property
    def word_count(self) -> int:
        """Distinct words stored (the degenerate empty word counts once inserted)."""
        return self._words

    @property
    def node_count(self) -> int:
        """Nodes allocated, root included."""
        return self._nodes

    def __len__(self) -> int:
        return self._words
