import random
from collections import Counter

from conftest import letters
from letterbank import Command
from letterbank.services.game import (
    LETTER_POOL, GameState, Invalid, MissingLetters, TooShort, Valid, WordSet, build_pool, lookup_letter,
)


def test_bank_starts_full(state):
    assert len(state.bank) == 14
    assert all(letter in LETTER_POOL for letter in state.bank)
    assert state.score == 0
    assert state.word == ''


def test_word_buffer_editing(state):
    for c in 'b1a-t':
        state.append_letter(c)
    assert state.word == 'BAT'
    state.backspace()
    assert state.word == 'BA'
    state.clear_word()
    assert state.word == ''
    state.backspace()
    assert state.word == ''


def test_word_buffer_is_bounded(dictionary):
    state = GameState(dictionary, word_maxlen=5, rng=random.Random(0))
    for c in 'ABCDEFGH':
        state.append_letter(c)
    assert state.word == 'ABCDE'


def test_accept_valid_word_scores_and_refills(state):
    state.bank = letters('A2 A2 B2 T1')
    state.word = 'BAT'

    result = state.accept_word()

    assert result == Valid(5)
    assert state.score == 5
    assert state.word == ''
    assert len(state.bank) == 14
    # Only the leftover A survives from the original four, the rest are new draws
    assert state.bank[0] == letters('A2')[0]


def test_accept_removes_one_instance_per_character(dictionary):
    state = GameState(dictionary, bank_size=5, rng=random.Random(7))
    state.bank = letters('B2 A2 A2 A2 Z2')
    state.word = 'BAA'
    state.accept_word()
    remaining = Counter(letter.char for letter in state.bank[:2])
    assert remaining == Counter({'A': 1, 'Z': 1})
    assert len(state.bank) == 5


def test_rejected_words_change_nothing(state):
    state.bank = letters('A2 B2 T1 X3')
    for word, expected in [('AB', TooShort()), ('TBA', Invalid()), ('TAX', Invalid()), ('ZAP', MissingLetters(('Z', 'P')))]:
        state.word = word
        before = list(state.bank)
        assert state.accept_word() == expected
        assert state.bank == before
        assert state.word == word
        assert state.score == 0


def test_score_accumulates():
    state = GameState(WordSet(['CAT']), bank_size=3, rng=random.Random(3))
    for _ in range(2):
        state.bank = letters('C1 A2 T4')
        state.word = 'CAT'
        state.accept_word()
    assert state.score == 14


def test_apply_command_swaps_in_pool_letter(state):
    state.bank = letters('A2 E3 A2')
    assert state.apply_command(Command('A', 'Z')) is True
    assert state.bank == letters('Z2 E3 A2')


def test_apply_command_uses_pool_points(dictionary):
    state = GameState(dictionary, pool=build_pool(scored=False), bank_size=2, rng=random.Random(0))
    state.bank = letters('Q4 E3')
    state.apply_command(Command('Q', 'K'))
    assert state.bank[0] == lookup_letter('K', state.pool)
    assert state.bank[0].points == 0


def test_apply_command_absent_letter_leaves_bank(state):
    state.bank = letters('A2 E3')
    assert state.apply_command(Command('Z', 'A')) is False
    assert state.bank == letters('A2 E3')


def test_apply_command_unknown_replacement_leaves_bank(state):
    state.bank = letters('A2 E3')
    assert state.apply_command(Command('A', '?')) is False
    assert state.bank == letters('A2 E3')


def test_unscored_pool_keeps_characters():
    pool = build_pool(scored=False)
    assert [l.char for l in pool] == [l.char for l in LETTER_POOL]
    assert all(l.points == 0 for l in pool)
    assert build_pool() is LETTER_POOL
