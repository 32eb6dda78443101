# tests/conftest.py - shared fixtures

import pytest

from keyboard_autocompleter.core.autocompleter import AutoCompleter
from keyboard_autocompleter.core.trie import PrefixIndex


@pytest.fixture
def index():
    return PrefixIndex()


@pytest.fixture
def completer():
    return AutoCompleter()


@pytest.fixture
def trained():
    ac = AutoCompleter()
    ac.train("the cat sat on the mat")
    ac.train("the dog ran")
    ac.train("cat cats catalog car card care careful")
    return ac
