from .lexicon import Lexicon, default_lexicon
from .word_validator import WordValidator

__all__ = ['Lexicon', 'default_lexicon', 'WordValidator']
