"""Domain scoring - composite ranking score and human-word heuristics."""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..utils.lexicon import Lexicon, default_lexicon
from ..utils.word_validator import COMMON_WORDS, WordValidator

MIN_TOKEN_LENGTH = 3
MAX_FRAGMENT_LENGTH = 6
MIN_COMPOUND_LENGTH = 5

_NON_LABEL_CHARS = re.compile(r'[^a-z0-9-]', re.IGNORECASE)
_TOKEN_SEPARATORS = re.compile(r'[-\d\s]+')
_LAST_LABEL = re.compile(r'\.[^.]+$')
_LETTERS = re.compile(r'[^a-z]', re.IGNORECASE)
_VOWEL = re.compile(r'[aeiou]', re.IGNORECASE)


def tokenize(sld: str) -> List[str]:
    """Split a name into lowercase alphabetic tokens of 3+ characters, in order."""
    spaced = _NON_LABEL_CHARS.sub(' ', sld)
    return [
        part.lower()
        for part in _TOKEN_SEPARATORS.split(spaced)
        if len(part) >= MIN_TOKEN_LENGTH
    ]


def vowel_ratio(sld: str) -> float:
    """Share of vowels among the letters of a name (digits and hyphens ignored)."""
    letters = _LETTERS.sub('', sld)
    if not letters:
        return 0.0
    return len(_VOWEL.findall(letters)) / len(letters)


def _boost(value: Optional[float], weight: float) -> float:
    if value is None or value <= 0:
        return 0.0
    return math.log10(1 + value) * weight


def composite_score(
    length: int,
    has_hyphen: bool,
    has_number: bool,
    vowel_ratio: float,
    traffic: Optional[float] = None,
    backlinks: Optional[float] = None,
) -> float:
    """Ranking score favouring short, vowel-rich, clean names with traffic."""
    base = max(0, 120 - length * 4)
    score = base + vowel_ratio * 14
    score += _boost(traffic, 10)
    score += _boost(backlinks, 8)
    if has_hyphen:
        score -= 12
    if has_number:
        score -= 8
    # halves round up
    return math.floor(score * 100 + 0.5) / 100


@dataclass(frozen=True)
class HumanWordScore:
    """Outcome of the human-word heuristic for one name."""
    has_human_words: bool
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'has_human_words': self.has_human_words,
            'score': self.score,
        }


NO_HUMAN_WORDS = HumanWordScore(has_human_words=False, score=0)


class DomainScorer:
    """Scores domain names for word-likeness and overall rank."""

    WORD_POINTS = 12
    FRAGMENT_POINTS = 9
    COMPOUND_POINTS = 6
    PRONOUNCEABLE_POINTS = 5
    LONG_MIXED_POINTS = 2
    AFFIX_POINTS = 2
    CONSONANT_CLUSTER_PENALTY = 3
    MULTI_WORD_BONUS = 4

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        common_words: Optional[Sequence[str]] = None,
    ):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()
        self.common_words = frozenset(common_words) if common_words is not None else COMMON_WORDS
        self.validator = WordValidator()

    def is_word(self, text: str) -> bool:
        return text in self.common_words or self.lexicon.contains(text)

    def _has_word_fragment(self, token: str) -> bool:
        """Any 3-6 character slice of the token is a known word."""
        for size in range(min(MAX_FRAGMENT_LENGTH, len(token)), MIN_TOKEN_LENGTH - 1, -1):
            for start in range(len(token) - size + 1):
                if self.is_word(token[start:start + size]):
                    return True
        return False

    def _is_compound(self, token: str) -> bool:
        """Token splits into two known words, each at least 3 characters."""
        if len(token) < MIN_COMPOUND_LENGTH:
            return False
        for split_pos in range(MIN_TOKEN_LENGTH, len(token) - MIN_TOKEN_LENGTH + 1):
            if self.is_word(token[:split_pos]) and self.is_word(token[split_pos:]):
                return True
        return False

    def _score_token(self, token: str) -> Tuple[int, bool]:
        """Return (points, looks_human) for one token."""
        score = 0
        human = False

        # Dictionary evidence, strongest match only
        if self.is_word(token):
            score += self.WORD_POINTS
            human = True
        elif self._has_word_fragment(token):
            score += self.FRAGMENT_POINTS
            human = True
        elif self._is_compound(token):
            score += self.COMPOUND_POINTS
            human = True

        if self.validator.is_pronounceable(token):
            score += self.PRONOUNCEABLE_POINTS
            human = True

        if self.validator.has_vowel_and_consonant(token) and len(token) >= 5:
            score += self.LONG_MIXED_POINTS

        if self.validator.matching_prefix(token):
            score += self.AFFIX_POINTS
            human = True

        if self.validator.matching_suffix(token):
            score += self.AFFIX_POINTS
            human = True

        if self.validator.max_consonant_run(token) >= 4:
            score -= self.CONSONANT_CLUSTER_PENALTY

        return max(0, score), human

    def human_word_score(self, tokens: Sequence[str]) -> HumanWordScore:
        """Estimate whether the tokens of a name read as real words.

        A negative-list token or a noisy token anywhere in the name vetoes
        the whole result.
        """
        total = 0
        has_human = False
        has_negative = False
        is_noisy = False
        qualifying = 0

        for token in tokens:
            if self.validator.is_negative(token):
                has_negative = True
                continue
            if self.validator.is_noisy(token):
                is_noisy = True

            points, human = self._score_token(token)
            total += points
            has_human = has_human or human
            if points > 0:
                qualifying += 1

        if has_negative or is_noisy or not has_human:
            return NO_HUMAN_WORDS

        if qualifying >= 2:
            total += self.MULTI_WORD_BONUS

        return HumanWordScore(has_human_words=True, score=total)

    def trend_score(self, domain: str) -> int:
        """Offline popularity estimate built from lexicon ranks."""
        sld = _LAST_LABEL.sub('', domain)
        tokens = tokenize(sld)
        if not tokens:
            return 0

        score = 0
        for token in tokens:
            rank = self.lexicon.rank_of(token)
            if rank > 0:
                score += rank
            elif token.isalpha():
                score += 50

        # Shorter names get a small boost
        score += max(0, 20 - len(sld))
        return int(round(score))
