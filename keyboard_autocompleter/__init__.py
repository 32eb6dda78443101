"""
keyboard_autocompleter

In-memory autocomplete: train on text, then ask for completions of a fragment
ranked by how often each word was seen.

    >>> from keyboard_autocompleter import AutoCompleter
    >>> ac = AutoCompleter()
    >>> ac.train("cat cats catalog cat")
    >>> [c.as_tuple() for c in ac.get_words("cat")]
    [('cat', 2), ('cats', 1), ('catalog', 1)]
"""

from .core import AutoCompleter, Candidate, PrefixIndex, TrieNode

__all__ = ["AutoCompleter", "Candidate", "PrefixIndex", "TrieNode"]

__version__ = "0.1.0"
