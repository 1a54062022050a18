import os
import random
import sys
import pytest

# Ensure the backend root (containing the `letterbank` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from letterbank import create_app, open_command_channel
from letterbank.services.game import GameState, Letter, WordSet


class TestConfig:
    TESTING = True
    LISTEN_HOST = '127.0.0.1'
    LISTEN_PORT = 0
    BANK_SIZE = 14
    WORD_MAXLEN = 24
    MIN_WORD_LENGTH = 3
    TICK_MS = 16
    DICTIONARY_PATH = os.path.join(CURRENT_DIR, 'words.txt')
    SCORED_LETTERS = True
    LOG_FILE = os.devnull
    LOG_LEVEL = 'DEBUG'


def letters(spec):
    """Build a bank from "A2 A2 B2 T1" style shorthand."""
    return [Letter(tok[0], int(tok[1:])) for tok in spec.split()]


@pytest.fixture()
def channel():
    sender, receiver = open_command_channel()
    yield sender, receiver
    receiver.close()


@pytest.fixture()
def flask_app(channel):
    sender, _ = channel
    return create_app(TestConfig, command_sender=sender)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def dictionary():
    return WordSet(['BAT', 'TAB', 'CAT', 'BAA', 'ZAP', 'TEA', 'EAT'])


@pytest.fixture()
def state(dictionary):
    return GameState(dictionary, rng=random.Random(1234))
