# keyboard_autocompleter/context/__init__.py
# text helpers shared by the core and the front ends

from .normalizer import is_punctuation, strip_trailing_punct, normalize_text
from .tokenizer import split_passage, last_token, iter_passages

__all__ = [
    "is_punctuation",
    "strip_trailing_punct",
    "normalize_text",
    "split_passage",
    "last_token",
    "iter_passages",
]
