# keyboard_autocompleter/context/tokenizer.py
# passage splitting used by AutoCompleter.train

from typing import List, Iterable

SEPARATOR = " "


def split_passage(passage: str) -> List[str]:
    """
    Split on the single space character, nothing else.
    Runs of spaces give empty tokens and tabs/newlines stay inside tokens:
      "a  b" -> ["a", "", "b"]
    """
    return passage.split(SEPARATOR)


def last_token(line: str) -> str:
    """The fragment being typed at the end of a line (used by the TUI)."""
    return line.rsplit(SEPARATOR, 1)[-1]


def iter_passages(lines: Iterable[str]) -> Iterable[str]:
    """Yield lines with their line terminator removed; blank lines are skipped."""
    for ln in lines:
        ln = ln.rstrip("\r\n")
        if ln:
            yield ln
