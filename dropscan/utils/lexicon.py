"""Static English lexicon with popularity ranks."""

import logging
from importlib import resources
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Optional, Union

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3
BUNDLED_WORDLIST = 'english_words.txt'


class Lexicon:
    """Read-only word set; earlier words in the source list rank higher.

    Words shorter than three characters are dropped at load time. The rank
    of the first kept word equals the number of kept words, the last one
    ranks 1 and unknown words rank 0.
    """

    def __init__(self, words: Iterable[str] = ()):
        ordered: Dict[str, None] = {}
        for word in words:
            cleaned = word.strip().lower()
            if len(cleaned) >= MIN_WORD_LENGTH and cleaned not in ordered:
                ordered[cleaned] = None

        total = len(ordered)
        self._ranks: Dict[str, int] = {
            word: total - index for index, word in enumerate(ordered)
        }
        self._words: FrozenSet[str] = frozenset(self._ranks)

    @classmethod
    def from_text(cls, text: str) -> 'Lexicon':
        return cls(text.splitlines())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Lexicon':
        """Load a newline-delimited word list; unreadable files give an empty lexicon."""
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                lexicon = cls(f)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Word list %s unavailable (%s); using empty lexicon", path, exc)
            return cls()

        if not lexicon:
            logger.warning("Word list %s is empty", path)
        return lexicon

    @classmethod
    def bundled(cls) -> 'Lexicon':
        """Load the word list shipped with the package."""
        source = resources.files('dropscan').joinpath('data').joinpath(BUNDLED_WORDLIST)
        try:
            text = source.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Bundled word list unavailable (%s); using empty lexicon", exc)
            return cls()
        return cls.from_text(text)

    def contains(self, word: str) -> bool:
        if not isinstance(word, str):
            return False
        return word.lower() in self._words

    def rank_of(self, word: str) -> int:
        if not isinstance(word, str):
            return 0
        return self._ranks.get(word.lower(), 0)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} words)"


_default_lexicon: Optional[Lexicon] = None


def default_lexicon() -> Lexicon:
    """Process-wide lexicon, loaded from the bundled list on first use."""
    global _default_lexicon
    if _default_lexicon is None:
        _default_lexicon = Lexicon.bundled()
        logger.debug("Loaded %d lexicon words", len(_default_lexicon))
    return _default_lexicon
