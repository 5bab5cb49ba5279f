"""Interactive scanning session over one loaded domain list."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import LoadError
from .filtering.engine import evaluate
from .filtering.facets import TldFacet, tld_facets
from .filtering.state import FilterState
from .records import DomainRecord, RawRow, RecordBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionView:
    """Everything a display needs to render the current state."""
    records: Tuple[DomainRecord, ...]
    total_loaded: int
    total_matched: int
    total_pages: int
    current_page: int
    loading: bool
    error: Optional[str]
    tld_facets: Tuple[TldFacet, ...]

    @property
    def top_pick(self) -> Optional[DomainRecord]:
        return self.records[0] if self.records else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'records': [record.to_dict() for record in self.records],
            'total_loaded': self.total_loaded,
            'total_matched': self.total_matched,
            'total_pages': self.total_pages,
            'current_page': self.current_page,
            'loading': self.loading,
            'error': self.error,
            'tld_facets': [facet.to_dict() for facet in self.tld_facets],
        }


class LoadHandle:
    """Accumulates records for one load; stale handles are ignored on commit."""

    def __init__(self, session: 'DomainSession', generation: int, source: Any = None):
        self._session = session
        self.generation = generation
        self.source = source
        self.records: List[DomainRecord] = []
        self.rows_seen = 0
        self._finished = False

    @property
    def stale(self) -> bool:
        return self.generation != self._session.generation

    @property
    def active(self) -> bool:
        return not self._finished and not self.stale

    def add(self, row: RawRow) -> Optional[DomainRecord]:
        if not self.active:
            return None
        self.rows_seen += 1
        record = self._session.builder.build(row)
        if record is not None:
            self.records.append(record)
        return record

    def complete(self):
        if not self.active:
            return
        self._finished = True
        self._session._commit(self, error=None)

    def fail(self, message: str):
        """Stop loading with an error; rows accumulated so far are kept."""
        if not self.active:
            return
        self._finished = True
        self._session._commit(self, error=message)

    def cancel(self):
        self._finished = True
        cancel = getattr(self.source, 'cancel', None)
        if callable(cancel):
            cancel()


class DomainSession:
    """Holds the full record set and the filter state, recomputes views on demand.

    Nothing is cached between views: every call to view() filters, sorts and
    pages the current record set from scratch.
    """

    def __init__(
        self,
        builder: Optional[RecordBuilder] = None,
        filters: Optional[FilterState] = None,
    ):
        self.builder = builder or RecordBuilder()
        self.default_filters = filters or FilterState()
        self.filters = self.default_filters
        self.page = 1
        self.records: Tuple[DomainRecord, ...] = ()
        self.error: Optional[str] = None
        self.generation = 0
        self._pending: Optional[LoadHandle] = None

    @property
    def loading(self) -> bool:
        return self._pending is not None and self._pending.active

    def begin_load(self, source: Any = None) -> LoadHandle:
        """Start a new load, abandoning any load still in progress."""
        if self._pending is not None and self._pending.active:
            logger.info("Abandoning unfinished load of %s", self._pending.source)
            self._pending.cancel()
        self.generation += 1
        self.error = None
        self._pending = LoadHandle(self, self.generation, source)
        return self._pending

    def _commit(self, handle: LoadHandle, error: Optional[str]):
        self.records = tuple(handle.records)
        self.error = error
        self._pending = None
        if error:
            logger.error("Load stopped after %d rows: %s", handle.rows_seen, error)
        else:
            logger.info(
                "Loaded %d domains from %d rows", len(self.records), handle.rows_seen
            )

    def load(self, rows: Iterable[RawRow], source: Any = None) -> LoadHandle:
        """Consume rows synchronously, replacing the current record set."""
        handle = self.begin_load(source if source is not None else rows)
        try:
            for row in rows:
                if not handle.active:
                    break
                handle.add(row)
        except LoadError as exc:
            handle.fail(str(exc))
        else:
            handle.complete()
        return handle

    def update_filters(self, patch: Optional[Mapping[str, Any]] = None, **changes: Any) -> FilterState:
        """Merge a partial patch over the current filters and go back to page 1."""
        merged = dict(patch or {})
        merged.update(changes)
        self.filters = self.filters.merge_patch(merged)
        self.page = 1
        return self.filters

    def replace_filters(self, filters: FilterState) -> FilterState:
        self.filters = filters
        self.page = 1
        return self.filters

    def toggle_sort(self, key: str) -> FilterState:
        self.filters = self.filters.toggle_sort(key)
        self.page = 1
        return self.filters

    def reset(self) -> FilterState:
        return self.replace_filters(self.default_filters)

    def set_page(self, page: int) -> int:
        self.page = max(1, page)
        return self.page

    def next_page(self) -> int:
        view = self.view()
        return self.set_page(min(view.total_pages, view.current_page + 1))

    def previous_page(self) -> int:
        view = self.view()
        return self.set_page(view.current_page - 1)

    def view(self) -> SessionView:
        result = evaluate(self.records, self.filters, self.page)
        return SessionView(
            records=result.page,
            total_loaded=len(self.records),
            total_matched=result.total_matched,
            total_pages=result.total_pages,
            current_page=result.current_page,
            loading=self.loading,
            error=self.error,
            tld_facets=tuple(tld_facets(self.records)),
        )
