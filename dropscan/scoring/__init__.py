from .scorer import DomainScorer, HumanWordScore, composite_score, tokenize, vowel_ratio

__all__ = ['DomainScorer', 'HumanWordScore', 'composite_score', 'tokenize', 'vowel_ratio']
