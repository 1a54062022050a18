import logging
import random
from typing import List, Optional, Sequence

from letterbank.channel import Command
from .appraisal import Dictionary, Valid, WordQuality, appraise
from .letters import LETTER_POOL, Letter, draw_letter, lookup_letter

logger = logging.getLogger(__name__)


class GameState:
    """Bank, word buffer and score for a single player.

    Owned by the game loop; nothing else mutates it.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        pool: Sequence[Letter] = LETTER_POOL,
        bank_size: int = 14,
        word_maxlen: int = 24,
        min_word_length: int = 3,
        rng: Optional[random.Random] = None,
    ):
        self.dictionary = dictionary
        self.pool = tuple(pool)
        self.bank_size = bank_size
        self.word_maxlen = word_maxlen
        self.min_word_length = min_word_length
        self.word = ''
        self.bank: List[Letter] = []
        self.score = 0
        self._rng = rng or random.Random()
        self.fill_bank()

    # ---- word buffer ----

    def append_letter(self, char: str) -> None:
        if len(char) != 1 or not (char.isascii() and char.isalpha()):
            return
        if len(self.word) < self.word_maxlen:
            self.word += char.upper()

    def backspace(self) -> None:
        self.word = self.word[:-1]

    def clear_word(self) -> None:
        self.word = ''

    # ---- bank and scoring ----

    def appraise(self) -> WordQuality:
        return appraise(self.word, self.bank, self.dictionary, self.min_word_length)

    def accept_word(self) -> WordQuality:
        """Score the current word if it is valid; any other result changes nothing."""
        quality = self.appraise()
        if not isinstance(quality, Valid):
            return quality

        for c in self.word:
            idx = next((i for i, letter in enumerate(self.bank) if letter.char == c), None)
            if idx is not None:
                self.bank.pop(idx)
        self.score += quality.points
        logger.info(f"[word-accepted] word={self.word} points={quality.points} score={self.score}")
        self.word = ''
        self.fill_bank()
        return quality

    def fill_bank(self) -> None:
        """Top the bank up to bank_size with uniform draws from the pool."""
        while len(self.bank) < self.bank_size:
            self.bank.append(draw_letter(self._rng, self.pool))

    def apply_command(self, command: Command) -> bool:
        """Swap one bank letter for a fresh pool letter.

        Returns False, leaving the bank untouched, when the letter to replace
        is not in the bank or the replacement is not a pool letter.
        """
        idx = next((i for i, letter in enumerate(self.bank) if letter.char == command.replace), None)
        new_letter = lookup_letter(command.replacement, self.pool)
        if idx is None or new_letter is None:
            logger.debug(f"[command-dropped] replace={command.replace} with={command.replacement}")
            return False
        self.bank[idx] = new_letter
        logger.info(f"[command-applied] replace={command.replace} with={new_letter}")
        return True
