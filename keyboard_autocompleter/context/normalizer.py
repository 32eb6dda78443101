# keyboard_autocompleter/context/normalizer.py
# character classes and caller-side normalization

import string
import unicodedata

# POSIX \p{Punct}: the 32 ASCII punctuation characters
_ASCII_PUNCT = frozenset(string.punctuation)


def is_punctuation(ch: str) -> bool:
    """
    True for ASCII punctuation and for anything Unicode files under a P* category
    (so curly quotes, the ellipsis and CJK full stops count too).
    """
    if len(ch) != 1:
        return False
    if ch in _ASCII_PUNCT:
        return True
    return unicodedata.category(ch).startswith("P")


def strip_trailing_punct(word: str) -> str:
    """
    Drop a single trailing punctuation character.
    "hello!" -> "hello", "wait..." -> "wait.." (only the last one goes).
    """
    if word and is_punctuation(word[-1]):
        return word[:-1]
    return word


def normalize_text(s: str, lowercase: bool = True) -> str:
    # the index itself never normalizes; this is for the console/TUI layer
    if not s:
        return ""
    return s.lower() if lowercase else s
