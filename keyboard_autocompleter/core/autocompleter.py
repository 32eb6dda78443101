# autocompleter.py
"""
AutoCompleter - owns the PrefixIndex and turns fragments into ranked candidates.

Public API:
  - train(passage: str) -> None
  - train_lines(lines: Iterable[str]) -> None
  - get_words(fragment: str) -> List[Candidate]   (alias: complete)
  - stats() -> ProviderStats

Nothing is normalized here: callers lowercase (or not) before calling in.
"""

from __future__ import annotations
from typing import Iterable, List, Optional

from .candidate import Candidate, rank_candidates
from .protocols import ProviderStats
from .trie import PrefixIndex
from ..context.tokenizer import split_passage
from ..utils.logger_utils import Log


class AutoCompleter:
    """Frequency-ranked prefix completion over everything it was trained on."""

    def __init__(self, index: Optional[PrefixIndex] = None, log: Optional[Log] = None):
        self.index = index if index is not None else PrefixIndex()
        self.log = log or Log.quiet()
        self._passages = 0

    # training ---------------------------------------------------------
    def train(self, passage: str) -> None:
        """
        Insert every space-separated token of `passage`.
        "a  b" inserts "a", "" and "b"; the empty token marks the root as a word.
        """
        tokens = split_passage(passage)
        for tok in tokens:
            self.index.insert(tok)
        self._passages += 1
        self.log.debug(f"trained {len(tokens)} tokens (words={self.index.word_count})")

    def train_lines(self, lines: Iterable[str]) -> None:
        for ln in lines:
            self.train(ln)

    # completion -------------------------------------------------------
    def get_words(self, fragment: str) -> List[Candidate]:
        """
        Every word at or below `fragment`, highest confidence first.
        `fragment` itself is included only if it was inserted as a whole word.
        """
        node = self.index.find_node(fragment)
        if node is None:
            self.log.debug(f"no node for fragment {fragment!r}")
            return []
        found = [Candidate(n.content, n.freq) for n in self.index.iter_words(node)]
        return rank_candidates(found)

    complete = get_words

    def stats(self) -> ProviderStats:
        return {
            "words": self.index.word_count,
            "nodes": self.index.node_count,
            "passages": self._passages,
        }
