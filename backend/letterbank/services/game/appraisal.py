from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple, Union

from .letters import Letter


class Dictionary(Protocol):
    def lookup(self, word: str) -> bool:
        ...


@dataclass(frozen=True)
class TooShort:
    pass


@dataclass(frozen=True)
class Invalid:
    pass


@dataclass(frozen=True)
class MissingLetters:
    letters: Tuple[str, ...]


@dataclass(frozen=True)
class Valid:
    points: int


WordQuality = Union[TooShort, Invalid, MissingLetters, Valid]


def appraise(word: str, bank: Sequence[Letter], dictionary: Dictionary, min_length: int = 3) -> WordQuality:
    """Classify a candidate word against the bank and the dictionary.

    - Words shorter than min_length are TooShort before anything else is checked
    - Each character consumes a distinct bank letter; characters with no
      unused match are reported in input order, duplicates kept
    - Only a fully covered word is looked up in the dictionary

    Works on a copy of the bank, so it can be called every tick.
    """
    if len(word) < min_length:
        return TooShort()

    available: List[Letter] = list(bank)
    missing: List[str] = []
    points = 0
    for c in word:
        idx = next((i for i, letter in enumerate(available) if letter.char == c), None)
        if idx is None:
            missing.append(c)
            continue
        points += available.pop(idx).points

    if missing:
        return MissingLetters(tuple(missing))
    if not dictionary.lookup(word):
        return Invalid()
    return Valid(points)


def describe(quality: WordQuality, min_length: int = 3) -> str:
    """Message shown under the input box for an appraisal result."""
    match quality:
        case TooShort():
            return f"type at least {min_length} letters"
        case Invalid():
            return "that's not in my dictionary"
        case MissingLetters(letters=letters):
            return f"you're missing some letters: {', '.join(letters)}"
        case Valid(points=points):
            return f"valid word! {points} points"
    raise TypeError(f"Unknown word quality: {quality!r}")
