"""Curated word lists and letter-pattern checks for domain name tokens."""

import re
from typing import FrozenSet

VOWELS = frozenset('aeiou')
CONSONANTS = frozenset('bcdfghjklmnpqrstvwxyz')

# Short everyday words that read as "real" even when missing from the lexicon
COMMON_WORDS: FrozenSet[str] = frozenset({
    # Commerce
    'shop', 'store', 'mart', 'deal', 'deals', 'sale', 'buy', 'sell', 'pay',
    'cash', 'bank', 'coin', 'fund', 'trade', 'market', 'brand', 'price',
    'cart', 'order', 'gift', 'offer',
    # Tech
    'app', 'apps', 'web', 'net', 'cloud', 'data', 'code', 'dev', 'tech',
    'byte', 'pixel', 'node', 'stack', 'sync', 'link', 'host', 'grid', 'mesh',
    'api', 'bot', 'bots', 'chip', 'logic', 'labs', 'digital', 'cyber',
    # Places and things
    'hub', 'lab', 'kit', 'box', 'pad', 'base', 'port', 'dock', 'gate', 'home',
    'house', 'zone', 'spot', 'nest', 'hive', 'yard', 'farm', 'garden', 'cafe',
    'coffee', 'tea', 'food', 'pizza', 'bake', 'bar', 'studio', 'works',
    # Nature
    'sun', 'moon', 'star', 'sky', 'wind', 'fire', 'ice', 'rain', 'snow',
    'leaf', 'tree', 'rock', 'stone', 'river', 'ocean', 'lake', 'peak', 'wave',
    'bay', 'dawn', 'field', 'forest', 'bloom', 'seed', 'root',
    # Qualities
    'smart', 'fast', 'quick', 'swift', 'bright', 'clear', 'bold', 'pure',
    'prime', 'true', 'deep', 'free', 'easy', 'next', 'new', 'top', 'best',
    'good', 'great', 'happy', 'fresh', 'green', 'blue', 'red', 'gold',
    # Actions
    'make', 'build', 'grow', 'push', 'pull', 'snap', 'flip', 'zoom', 'jump',
    'leap', 'shift', 'spark', 'flash', 'boost', 'launch', 'drive', 'craft',
    'ship', 'get', 'run', 'fly', 'rise', 'lift', 'fix', 'mix', 'join',
    'meet', 'play', 'learn', 'find', 'seek', 'hunt', 'pick', 'save',
    # Abstract
    'mind', 'soul', 'dream', 'vision', 'quest', 'path', 'way', 'light',
    'time', 'space', 'edge', 'apex', 'idea', 'life', 'love', 'care', 'team',
    'club', 'crew', 'guide', 'plan', 'flow', 'pulse', 'core', 'one',
})

# Leading morphemes that suggest a coined but readable name
HUMAN_PREFIXES = (
    'bio', 'eco', 'hyper', 'ultra', 'micro', 'macro', 'nano', 'astro', 'aero',
    'agri', 'crypto', 'block', 'chain', 'quant', 'meta', 'auto', 'pro', 'smart',
)

# Trailing morphemes, same idea as the prefixes
HUMAN_SUFFIXES = (
    'able', 'age', 'bot', 'core', 'craft', 'dom', 'ery', 'ful', 'hub', 'ify',
    'ing', 'ism', 'ist', 'ity', 'lab', 'less', 'let', 'ly', 'ment', 'ness',
    'ology', 'scape', 'ship', 'shop', 'smith', 'space', 'ster', 'tech',
    'ville', 'ware', 'wise', 'works', 'yard',
)

# Exact tokens that veto the whole name
NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    # Spam and fraud
    'spam', 'scam', 'scams', 'fraud', 'phish', 'phishing', 'fake', 'fakes',
    'counterfeit', 'replica', 'payday',
    # Adult
    'adult', 'porn', 'porno', 'xxx', 'sex', 'sexy', 'nude', 'nudes', 'escort',
    'escorts', 'webcam', 'hookup', 'fetish',
    # Gambling
    'casino', 'casinos', 'poker', 'slots', 'slot', 'betting', 'bet', 'gamble',
    'gambling', 'lottery',
    # Drugs and pharma spam
    'viagra', 'cialis', 'levitra', 'xanax', 'valium', 'tramadol', 'oxycodone',
    'opioid', 'cocaine', 'heroin', 'meth', 'weed', 'cannabis', 'pharma',
    'pills', 'steroids',
    # Malware
    'malware', 'virus', 'trojan', 'spyware', 'ransomware', 'keylogger',
    'botnet', 'crack', 'cracked', 'warez', 'keygen', 'hack', 'hacks',
    # Offensive
    'fuck', 'shit', 'bitch', 'cunt', 'dick', 'cock', 'slut', 'whore', 'nazi',
    'rape', 'kill', 'hate',
})

PRONOUNCEABLE_MIN_RATIO = 0.18
PRONOUNCEABLE_MAX_RATIO = 0.82

_TRIPLED_LETTER = re.compile(r'(.)\1\1')
_DOUBLED_VOWEL = re.compile(r'([aeiou])\1')
_VOWEL_RUN = re.compile(r'[aeiou]{3,}')
_CONSONANT_RUN = re.compile(r'[bcdfghjklmnpqrstvwxyz]{3,}')


class WordValidator:
    """Letter-pattern checks applied to a single lowercase token."""

    def has_vowel_and_consonant(self, token: str) -> bool:
        has_vowel = any(c in VOWELS for c in token)
        has_consonant = any(c in CONSONANTS for c in token)
        return has_vowel and has_consonant

    def vowel_ratio(self, token: str) -> float:
        letters = [c for c in token if c in VOWELS or c in CONSONANTS]
        if not letters:
            return 0.0
        return sum(1 for c in letters if c in VOWELS) / len(letters)

    def max_consonant_run(self, token: str) -> int:
        longest = 0
        current = 0
        for c in token:
            if c in CONSONANTS:
                current += 1
                longest = max(longest, current)
            else:
                current = 0
        return longest

    def is_pronounceable(self, token: str) -> bool:
        """Vowels and consonants mixed in a ratio a reader can say aloud."""
        if not self.has_vowel_and_consonant(token):
            return False
        ratio = self.vowel_ratio(token)
        if ratio < PRONOUNCEABLE_MIN_RATIO or ratio > PRONOUNCEABLE_MAX_RATIO:
            return False
        return self.max_consonant_run(token) < 5

    def is_noisy(self, token: str) -> bool:
        """Detect keyboard-mash patterns.

        Any of these taints the token: a letter repeated three times, a
        doubled vowel, three vowels in a row or three consonants in a row.
        """
        return bool(
            _TRIPLED_LETTER.search(token)
            or _DOUBLED_VOWEL.search(token)
            or _VOWEL_RUN.search(token)
            or _CONSONANT_RUN.search(token)
        )

    def is_negative(self, token: str) -> bool:
        return token in NEGATIVE_WORDS

    def matching_prefix(self, token: str) -> str:
        """Return the curated prefix the token starts with, or ''."""
        for prefix in HUMAN_PREFIXES:
            if token.startswith(prefix) and len(token) - len(prefix) >= 3:
                return prefix
        return ''

    def matching_suffix(self, token: str) -> str:
        """Return the curated suffix the token ends with, or ''."""
        for suffix in HUMAN_SUFFIXES:
            if token.endswith(suffix) and len(token) - len(suffix) >= 2:
                return suffix
        return ''
