"""Aggregate counts used to populate filter options."""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from ..records import DomainRecord


@dataclass(frozen=True)
class TldFacet:
    tld: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'tld': self.tld, 'count': self.count}


def tld_facets(records: Iterable[DomainRecord]) -> List[TldFacet]:
    """Distinct TLDs with their record counts, most common first then by name."""
    counts = Counter(record.tld for record in records)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [TldFacet(tld=tld, count=count) for tld, count in ordered]
