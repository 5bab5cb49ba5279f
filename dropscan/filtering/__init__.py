from .engine import PageResult, build_predicates, evaluate, filter_records, paginate, parse_keywords, sort_records
from .facets import TldFacet, tld_facets
from .state import FilterState, default_sort_dir

__all__ = [
    'FilterState', 'default_sort_dir',
    'PageResult', 'build_predicates', 'evaluate', 'filter_records', 'paginate',
    'parse_keywords', 'sort_records',
    'TldFacet', 'tld_facets',
]
