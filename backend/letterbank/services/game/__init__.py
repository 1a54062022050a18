"""Game domain services: letter pool, appraisal, game state and the tick loop.

This package holds the pure game logic used by the terminal front end;
the HTTP listener never imports it and only talks to the game through
the command channel.
"""

from .appraisal import Invalid, MissingLetters, TooShort, Valid, WordQuality, appraise, describe
from .dictionary import WordSet
from .letters import LETTER_POOL, Letter, build_pool, draw_letter, lookup_letter
from .loop import GameLoop, KeyAction
from .state import GameState
