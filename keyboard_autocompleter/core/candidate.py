# candidate.py
# (word, confidence) snapshot returned by the AutoCompleter, plus the ranking helper.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union


@dataclass(frozen=True)
class Candidate:
    """
    One completion.
    confidence is the word's occurrence count at query time; later training
    does not change an existing Candidate.
    """
    word: str
    confidence: int

    def as_tuple(self) -> Tuple[str, int]:
        return (self.word, self.confidence)

    def __iter__(self) -> Iterator[Union[str, int]]:
        # lets callers write `for word, conf in completer.get_words(...)`
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return f"{self.word}({self.confidence})"


def rank_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Sort by confidence, highest first. Stable: ties keep their collection order."""
    return sorted(candidates, key=lambda c: c.confidence, reverse=True)
