# keyboard_autocompleter/core/protocols.py
"""
Protocol interfaces for the autocompleter core.

The CLI and TUI only need something that can absorb training text and hand back
ranked candidates, so they depend on these Protocols rather than on
AutoCompleter itself. A different ranking strategy (recency weighted, say) can
slot in behind the same two methods.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from typing_extensions import TypedDict


class ProviderStats(TypedDict):
    """Shape of AutoCompleter.stats()."""
    words: int
    nodes: int
    passages: int


@runtime_checkable
class CandidateLike(Protocol):
    """Anything with a word and a confidence (Candidate, or a test double)."""

    @property
    def word(self) -> str:
        ...

    @property
    def confidence(self) -> int:
        ...


@runtime_checkable
class AutoCompleteProvider(Protocol):
    """Minimal interface the front ends rely on."""

    def get_words(self, fragment: str) -> Sequence[CandidateLike]:
        """
        Return candidates completing `fragment`, sorted by descending confidence.
        Empty when nothing matches.
        """
        ...

    def train(self, passage: str) -> None:
        ...
