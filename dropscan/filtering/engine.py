"""Filter, sort and paginate domain records.

Filtering is an unordered AND of independent predicates; predicate order
only affects speed. Sorting uses one key function per sort key, ascending,
and a descending request reverses it.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..records import DomainRecord
from .state import FilterState

logger = logging.getLogger(__name__)

Predicate = Callable[[DomainRecord], bool]


@dataclass(frozen=True)
class PageResult:
    """One window of the filtered, sorted records."""
    page: Tuple[DomainRecord, ...]
    total_matched: int
    total_pages: int
    current_page: int
    page_size: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'page': [record.to_dict() for record in self.page],
            'total_matched': self.total_matched,
            'total_pages': self.total_pages,
            'current_page': self.current_page,
            'page_size': self.page_size,
        }


def parse_keywords(value: str) -> List[str]:
    """Comma-separated terms, trimmed and lowercased, blanks dropped."""
    if not value:
        return []
    return [term.strip().lower() for term in value.split(',') if term.strip()]


def _normalize_tld(value: str) -> str:
    value = value.strip().lower()
    return value[1:] if value.startswith('.') else value


def _policy_predicate(policy: str, attribute: str) -> Predicate:
    if policy == 'block':
        return lambda record: not getattr(record, attribute)
    return lambda record: getattr(record, attribute)


def build_predicates(filters: FilterState) -> List[Predicate]:
    """One predicate per active filter; inactive filters add nothing."""
    predicates: List[Predicate] = []

    if filters.length_min:
        length_min = filters.length_min
        predicates.append(lambda r: r.length >= length_min)
    if filters.length_max:
        length_max = filters.length_max
        predicates.append(lambda r: r.length <= length_max)

    if filters.hyphens != 'any':
        predicates.append(_policy_predicate(filters.hyphens, 'has_hyphen'))
    if filters.digits != 'any':
        predicates.append(_policy_predicate(filters.digits, 'has_number'))

    if filters.price_max is not None:
        price_max = filters.price_max
        predicates.append(
            lambda r: r.metrics.price is None or r.metrics.price <= price_max
        )

    if filters.human_words == 'require':
        predicates.append(lambda r: r.has_human_words)

    if filters.traffic_min is not None:
        traffic_min = filters.traffic_min
        predicates.append(lambda r: (r.metrics.traffic or 0) >= traffic_min)
    if filters.backlinks_min is not None:
        backlinks_min = filters.backlinks_min
        predicates.append(lambda r: (r.metrics.backlinks or 0) >= backlinks_min)

    if filters.trend_mode == 'require':
        trend_min = filters.trend_min or 0
        predicates.append(lambda r: r.trend >= trend_min)

    tlds = {_normalize_tld(tld) for tld in filters.selected_tlds if tld and tld.strip()}
    if tlds:
        predicates.append(lambda r: r.tld in tlds)

    search = filters.search.strip().lower()
    if search:
        predicates.append(lambda r: search in r.domain)

    include_terms = parse_keywords(filters.include)
    if include_terms:
        predicates.append(lambda r: all(term in r.domain for term in include_terms))

    exclude_terms = parse_keywords(filters.exclude)
    if exclude_terms:
        predicates.append(
            lambda r: not any(term in r.domain or term in r.keywords for term in exclude_terms)
        )

    return predicates


def filter_records(records: Iterable[DomainRecord], filters: FilterState) -> List[DomainRecord]:
    predicates = build_predicates(filters)
    return [record for record in records if all(p(record) for p in predicates)]


def _missing_low(value: Optional[float]) -> tuple:
    """Sort key placing undefined values below every defined one."""
    return (value is not None, value if value is not None else 0.0)


def _missing_high(value: Optional[float]) -> tuple:
    """Sort key placing undefined values above every defined one."""
    return (value is None, value if value is not None else 0.0)


# Ascending order for each key; the domain name makes the order total.
SORT_KEY_FUNCS: Dict[str, Callable[[DomainRecord], tuple]] = {
    'score': lambda r: (r.score, r.word_score, r.length, r.domain),
    'length': lambda r: (r.length, r.domain),
    'alphabetical': lambda r: (r.domain,),
    'tld': lambda r: (r.tld, r.domain),
    'traffic': lambda r: (_missing_low(r.metrics.traffic), r.domain),
    'backlinks': lambda r: (_missing_low(r.metrics.backlinks), r.domain),
    'price': lambda r: (_missing_high(r.metrics.price), r.domain),
    'trend': lambda r: (r.trend, r.score, r.domain),
}


def sort_records(
    records: Iterable[DomainRecord], sort_by: str = 'score', sort_dir: str = 'desc'
) -> List[DomainRecord]:
    key = SORT_KEY_FUNCS.get(sort_by, SORT_KEY_FUNCS['score'])
    return sorted(records, key=key, reverse=(sort_dir == 'desc'))


def paginate(records: Sequence[DomainRecord], page: int, page_size: int) -> PageResult:
    """Clamp the requested page into range and slice it out."""
    total = len(records)
    total_pages = max(1, math.ceil(total / page_size))
    current = min(max(1, page), total_pages)
    start = (current - 1) * page_size
    return PageResult(
        page=tuple(records[start:start + page_size]),
        total_matched=total,
        total_pages=total_pages,
        current_page=current,
        page_size=page_size,
    )


def evaluate(records: Sequence[DomainRecord], filters: FilterState, page: int = 1) -> PageResult:
    """Filter, sort and window the full record set for one configuration."""
    matched = filter_records(records, filters)
    ordered = sort_records(matched, filters.sort_by, filters.sort_dir)
    result = paginate(ordered, page, filters.page_size)
    logger.debug(
        "Matched %d of %d records, page %d/%d",
        result.total_matched, len(records), result.current_page, result.total_pages,
    )
    return result
