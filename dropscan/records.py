"""Turn raw tabular rows into scored, immutable domain records."""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .scoring.scorer import DomainScorer, composite_score, tokenize, vowel_ratio

logger = logging.getLogger(__name__)

RawRow = Mapping[str, Any]

_SCHEME = re.compile(r'^https?://', re.IGNORECASE)
_DIGIT = re.compile(r'[0-9]')


@dataclass(frozen=True)
class DomainMetrics:
    """Optional market metrics; None means unknown, not zero."""
    traffic: Optional[float] = None
    backlinks: Optional[float] = None
    price: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            'traffic': self.traffic,
            'backlinks': self.backlinks,
            'price': self.price,
        }


@dataclass(frozen=True)
class DomainRecord:
    """One normalized domain with its structural features and scores."""
    domain: str
    tld: str
    sld: str
    length: int
    has_hyphen: bool
    has_number: bool
    keywords: Tuple[str, ...]
    has_human_words: bool
    word_score: int
    score: float
    trend: int = 0
    metrics: DomainMetrics = field(default_factory=DomainMetrics)
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'domain': self.domain,
            'tld': self.tld,
            'sld': self.sld,
            'length': self.length,
            'has_hyphen': self.has_hyphen,
            'has_number': self.has_number,
            'keywords': list(self.keywords),
            'has_human_words': self.has_human_words,
            'word_score': self.word_score,
            'score': self.score,
            'trend': self.trend,
            'metrics': self.metrics.to_dict(),
        }


def number_from(value: Any) -> Optional[float]:
    """Read a metric cell; anything that is not a finite number is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.replace(',', '').replace(' ', ''))
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def normalize_domain(value: str) -> str:
    """Strip scheme and path, lowercase what is left."""
    cleaned = _SCHEME.sub('', value)
    cleaned = cleaned.split('/', 1)[0]
    return cleaned.lower()


class RecordBuilder:
    """Builds DomainRecords from rows keyed by (variously spelled) column names."""

    DOMAIN_KEYS = ('domain', 'Domain', 'Domain Name', 'name', 'Name', 'url', 'URL')
    TRAFFIC_KEYS = ('traffic', 'Traffic', 'search_volume', 'SearchVolume')
    BACKLINK_KEYS = ('backlinks', 'Backlinks', 'refdomains', 'RefDomains', 'refs')
    PRICE_KEYS = ('price', 'Price', 'bid', 'Bid', 'min_bid', 'MinBid')

    def __init__(self, scorer: Optional[DomainScorer] = None):
        self.scorer = scorer or DomainScorer()

    def _extract_domain(self, row: RawRow) -> Optional[str]:
        for key in self.DOMAIN_KEYS:
            candidate = row.get(key)
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()
        return None

    def _pick_number(self, row: RawRow, keys: Sequence[str]) -> Optional[float]:
        for key in keys:
            candidate = number_from(row.get(key))
            if candidate is not None:
                return candidate
        return None

    def build(self, row: RawRow) -> Optional[DomainRecord]:
        """Build one record, or None when the row has no usable domain."""
        if not isinstance(row, Mapping):
            return None

        value = self._extract_domain(row)
        if value is None:
            logger.debug("Dropping row without a domain column: %r", row)
            return None

        domain = normalize_domain(value)
        parts = domain.split('.')
        if len(parts) < 2:
            logger.debug("Dropping %r: no top-level suffix", value)
            return None

        tld = parts[-1]
        sld = '.'.join(parts[:-1])
        if not sld or not tld:
            logger.debug("Dropping %r: empty name or suffix", value)
            return None

        length = len(sld)
        has_hyphen = '-' in domain
        has_number = bool(_DIGIT.search(domain))
        keywords = tuple(tokenize(sld))

        metrics = DomainMetrics(
            traffic=self._pick_number(row, self.TRAFFIC_KEYS),
            backlinks=self._pick_number(row, self.BACKLINK_KEYS),
            price=self._pick_number(row, self.PRICE_KEYS),
        )

        human = self.scorer.human_word_score(keywords)

        return DomainRecord(
            domain=domain,
            tld=tld,
            sld=sld,
            length=length,
            has_hyphen=has_hyphen,
            has_number=has_number,
            keywords=keywords,
            has_human_words=human.has_human_words,
            word_score=human.score,
            score=composite_score(
                length=length,
                has_hyphen=has_hyphen,
                has_number=has_number,
                vowel_ratio=vowel_ratio(sld),
                traffic=metrics.traffic,
                backlinks=metrics.backlinks,
            ),
            trend=self.scorer.trend_score(domain),
            metrics=metrics,
            raw=dict(row),
        )

    def build_many(self, rows: Iterable[RawRow]) -> List[DomainRecord]:
        """Build every valid row, silently skipping rejected ones."""
        records = []
        for row in rows:
            record = self.build(row)
            if record is not None:
                records.append(record)
        return records
