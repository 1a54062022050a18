import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Letter:
    char: str
    points: int

    def __str__(self):
        return f"{self.char}({self.points})"


# Common letters appear twice so they are drawn more often
LETTER_POOL: Tuple[Letter, ...] = (
    Letter('A', 2), Letter('A', 2), Letter('B', 2), Letter('C', 1),
    Letter('D', 3), Letter('E', 3), Letter('E', 3), Letter('F', 5),
    Letter('G', 1), Letter('H', 1), Letter('I', 2), Letter('I', 2),
    Letter('J', 3), Letter('K', 5), Letter('L', 3), Letter('M', 4),
    Letter('N', 2), Letter('O', 2), Letter('O', 2), Letter('P', 1),
    Letter('Q', 4), Letter('R', 2), Letter('S', 1), Letter('T', 4),
    Letter('U', 2), Letter('U', 2), Letter('V', 5), Letter('W', 4),
    Letter('X', 3), Letter('Y', 4), Letter('Z', 2),
)


def build_pool(scored: bool = True) -> Tuple[Letter, ...]:
    """Return the replenishment pool, optionally with every letter worth zero."""
    if scored:
        return LETTER_POOL
    return tuple(Letter(letter.char, 0) for letter in LETTER_POOL)


def lookup_letter(char: str, pool: Sequence[Letter] = LETTER_POOL) -> Optional[Letter]:
    return next((letter for letter in pool if letter.char == char), None)


def draw_letter(rng: random.Random, pool: Sequence[Letter] = LETTER_POOL) -> Letter:
    return pool[rng.randrange(len(pool))]
