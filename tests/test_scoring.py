import pytest

from dropscan.scoring import DomainScorer, HumanWordScore, composite_score, tokenize, vowel_ratio
from dropscan.utils import Lexicon, WordValidator


def test_tokenize_drops_short_fragments():
    assert tokenize('ai-coffeeshop123') == ['coffeeshop']


def test_tokenize_splits_on_dots_and_symbols():
    assert tokenize('my.sub-Domain_x') == ['sub', 'domain']


def test_vowel_ratio_ignores_digits_and_hyphens():
    assert vowel_ratio('ai-coffeeshop123') == 0.5
    assert vowel_ratio('123-456') == 0.0


def test_composite_score_with_traffic():
    score = composite_score(
        length=16, has_hyphen=True, has_number=True, vowel_ratio=0.5, traffic=5000,
    )

    assert score == pytest.approx(79.99)


def test_composite_score_without_metrics():
    assert composite_score(4, False, False, 0.25) == 107.5


def test_composite_score_ignores_non_positive_metrics():
    assert composite_score(4, False, False, 0.25, traffic=-5, backlinks=0) == 107.5


def test_composite_score_base_floors_at_zero():
    assert composite_score(40, True, False, 0.0) == -12


def test_common_word_token(scorer):
    result = scorer.human_word_score(['shop'])

    # word 12 + pronounceable 5
    assert result == HumanWordScore(has_human_words=True, score=17)


def test_noise_vetoes_everything(scorer):
    assert scorer.human_word_score(['zzzxq']) == HumanWordScore(False, 0)
    assert scorer.human_word_score(['shop', 'zzzxq']) == HumanWordScore(False, 0)


def test_negative_word_vetoes_other_tokens(scorer):
    assert scorer.human_word_score(['casino', 'cloud']) == HumanWordScore(False, 0)


def test_no_tokens_means_no_human_words(scorer):
    assert scorer.human_word_score([]) == HumanWordScore(False, 0)


def test_multi_word_bonus(scorer):
    # cloud: 12 + 5 + 2, garden: 12 + 5 + 2, bonus 4
    assert scorer.human_word_score(['cloud', 'garden']) == HumanWordScore(True, 42)


def test_word_fragment_and_suffix(scorer):
    # fragment "table" 9 + pronounceable 5 + long mixed 2 + suffix "let" 2
    assert scorer.human_word_score(['tablet']) == HumanWordScore(True, 18)


def test_compound_split_of_long_words():
    scorer = DomainScorer(lexicon=Lexicon(['tomorrow', 'avocados']), common_words=[])

    assert not scorer._has_word_fragment('tomorrowavocados')
    assert scorer._is_compound('tomorrowavocados')
    # compound 6 + pronounceable 5 + long mixed 2
    assert scorer.human_word_score(['tomorrowavocados']) == HumanWordScore(True, 13)


def test_prefix_bonus_without_dictionary():
    scorer = DomainScorer(lexicon=Lexicon(), common_words=[])

    # pronounceable 5 + long mixed 2 + prefix "meta" 2
    assert scorer.human_word_score(['metaverse']) == HumanWordScore(True, 9)


def test_empty_lexicon_still_knows_common_words():
    scorer = DomainScorer(lexicon=Lexicon())

    assert scorer.human_word_score(['shop']).has_human_words


def test_validator_patterns():
    validator = WordValidator()

    assert validator.is_noisy('coffee')
    assert validator.is_noisy('street')
    assert validator.is_noisy('queue')
    assert not validator.is_noisy('garden')
    assert validator.is_pronounceable('garden')
    assert not validator.is_pronounceable('rhythm')
    assert validator.max_consonant_run('rhythm') == 6
    assert validator.matching_prefix('biotech') == 'bio'
    assert validator.matching_prefix('bios') == ''
    assert validator.matching_suffix('rockyard') == 'yard'


def test_trend_score_sums_ranks(scorer):
    # coffee 4 + shop 3 + (20 - 11)
    assert scorer.trend_score('coffee-shop.com') == 16


def test_trend_score_unknown_alpha_tokens(scorer):
    assert scorer.trend_score('xyzqw.io') == 65


def test_trend_score_without_tokens(scorer):
    assert scorer.trend_score('ab.com') == 0
    assert scorer.trend_score('12345.com') == 0


def test_composite_score_rounds_halves_up():
    # 56 + 7/16 * 14 = 62.125
    ratio = vowel_ratio('abecidofugahijkl')

    assert ratio == 0.4375
    assert composite_score(16, False, False, ratio) == 62.13
