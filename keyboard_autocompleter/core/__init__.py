"""
keyboard_autocompleter.core

The engine behind the keyboard autocompleter.
Contains:
 - the prefix index (PrefixIndex / TrieNode)
 - the Candidate value type and ranking helper
 - AutoCompleter, which trains the index and answers fragment lookups
 - Protocols the front ends program against
"""

from .trie import PrefixIndex, TrieNode
from .candidate import Candidate, rank_candidates
from .autocompleter import AutoCompleter
from .protocols import AutoCompleteProvider, CandidateLike, ProviderStats

__all__ = [
    "PrefixIndex",
    "TrieNode",
    "Candidate",
    "rank_candidates",
    "AutoCompleter",
    "AutoCompleteProvider",
    "CandidateLike",
    "ProviderStats",
]
