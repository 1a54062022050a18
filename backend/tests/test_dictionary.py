import os

import pytest

from conftest import TestConfig
from letterbank.services.game import WordSet


def test_lookup_is_exact_uppercase():
    words = WordSet(['bat', ' Cat '])
    assert words.lookup('BAT')
    assert 'CAT' in words
    assert not words.lookup('bat')
    assert not words.lookup('BATS')


def test_from_file_skips_non_alphabetic_entries():
    words = WordSet.from_file(TestConfig.DICTIONARY_PATH)
    assert len(words) == 4
    assert words.lookup('TAB')
    assert not words.lookup("DON'T")
    assert not words.lookup('CAFÉ')


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordSet.from_file(os.path.join(tmp_path, 'nope.txt'))
