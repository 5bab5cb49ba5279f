from dropscan.utils import Lexicon, default_lexicon


def test_short_words_dropped_and_ranks_follow_order():
    lexicon = Lexicon(['the', 'Apple', 'of', 'banana', 'apple'])

    assert len(lexicon) == 3
    assert not lexicon.contains('of')
    assert lexicon.rank_of('the') == 3
    assert lexicon.rank_of('apple') == 2
    assert lexicon.rank_of('banana') == 1


def test_lookups_are_case_insensitive():
    lexicon = Lexicon(['garden'])

    assert lexicon.contains('GARDEN')
    assert 'Garden' in lexicon
    assert lexicon.rank_of('GaRdEn') == 1


def test_unknown_words_rank_zero():
    lexicon = Lexicon(['garden'])

    assert lexicon.rank_of('zzz') == 0
    assert not lexicon.contains('zzz')
    assert lexicon.rank_of(None) == 0
    assert not lexicon.contains(42)


def test_empty_lexicon_degrades_to_unknown():
    lexicon = Lexicon()

    assert len(lexicon) == 0
    assert not lexicon.contains('shop')
    assert lexicon.rank_of('shop') == 0


def test_from_file_reads_crlf_lists(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"alpha\r\nbeta\r\n\r\n  gamma  \r\n")

    lexicon = Lexicon.from_file(path)

    assert lexicon.words == frozenset({'alpha', 'beta', 'gamma'})
    assert lexicon.rank_of('alpha') == 3


def test_from_file_missing_gives_empty_lexicon(tmp_path):
    lexicon = Lexicon.from_file(tmp_path / "nope.txt")

    assert len(lexicon) == 0


def test_bundled_list_ranks_common_words_higher():
    lexicon = default_lexicon()

    assert len(lexicon) > 1000
    assert lexicon.contains('shop')
    assert lexicon.rank_of('the') > lexicon.rank_of('coffee') > 0
    assert default_lexicon() is lexicon
