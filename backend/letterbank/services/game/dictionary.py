from pathlib import Path
from typing import Iterable, Union


class WordSet:
    """Exact-match word lookup over uppercase words.

    Callers pass uppercase input; there is no fuzzy matching or
    normalisation on lookup.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words = frozenset(w.strip().upper() for w in words if w.strip())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'WordSet':
        """Load a newline-delimited word list, skipping non-alphabetic entries."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary not found: {path}")
        with path.open('r', encoding='utf-8', errors='ignore') as f:
            words = [line.strip() for line in f]
        return cls(w for w in words if w.isascii() and w.isalpha())

    def lookup(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word):
        return self.lookup(word)

    def __len__(self):
        return len(self._words)
