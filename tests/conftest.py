import pytest

from dropscan.records import RecordBuilder
from dropscan.scoring import DomainScorer
from dropscan.utils import Lexicon


@pytest.fixture
def lexicon():
    # ranks: coffee=4, shop=3, garden=2, table=1
    return Lexicon(['coffee', 'shop', 'garden', 'table'])


@pytest.fixture
def scorer(lexicon):
    return DomainScorer(lexicon=lexicon)


@pytest.fixture
def builder(scorer):
    return RecordBuilder(scorer)


@pytest.fixture
def sample_rows():
    return [
        {'domain': 'shop.com', 'price': '10', 'traffic': '100'},
        {'domain': 'cloud-garden.io', 'price': '60'},
        {'domain': 'data4u.net', 'traffic': '5000', 'backlinks': '20'},
        {'domain': 'tablet.com', 'backlinks': '3'},
        {'domain': 'casino-cloud.com', 'price': '51'},
        {'domain': 'verylongdomainnamehere.org'},
    ]


@pytest.fixture
def sample_records(builder, sample_rows):
    return builder.build_many(sample_rows)
