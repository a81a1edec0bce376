"""Word list loading and membership checks."""

import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class DictionaryLoadError(Exception):
    """Raised when the word list cannot be read or yields no words."""
    pass


class Dictionary:
    """
    Immutable set of uppercase words.

    A word and its reversal are treated as the same entry, since a path
    can be read in either direction.
    """

    def __init__(self, words: Iterable[str]):
        cleaned = (w.strip().upper() for w in words)
        self._words = frozenset(w for w in cleaned if w)
        self.max_length = max((len(w) for w in self._words), default=0)

    def __contains__(self, word: str) -> bool:
        return self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def is_valid_word(self, word: str) -> bool:
        '''
        Returns True if `word` or its reverse is in the dictionary.
        '''
        word = word.upper()
        return word in self._words or word[::-1] in self._words

    @classmethod
    def from_text(cls, text: str) -> "Dictionary":
        """Build a dictionary from line-delimited text, skipping blank lines."""
        return cls(line for line in text.split('\n') if line.strip())


def load_dictionary(path: str | Path) -> Dictionary:
    """
    Load a line-delimited word list.

    Args:
        path: Path to the word list (one word per line)

    Returns:
        Dictionary built from the file

    Raises:
        DictionaryLoadError: If the file can't be read or contains no words
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Could not load word list {path}: {e}") from e

    dictionary = Dictionary.from_text(text)
    if not len(dictionary):
        raise DictionaryLoadError(f"Word list {path} contains no words")

    logger.info(f"Loaded {len(dictionary)} words from {path}")
    return dictionary
