"""Filter and sort configuration.

A FilterState is a frozen value. Every change goes through merge(), which
returns a new state and leaves the old one untouched.
"""

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import ConfigurationError

POLICIES = ('any', 'allow', 'block')
REQUIRE_MODES = ('any', 'require')
SORT_KEYS = ('score', 'length', 'alphabetical', 'tld', 'traffic', 'backlinks', 'price', 'trend')
SORT_DIRS = ('asc', 'desc')
ASCENDING_BY_DEFAULT = ('price', 'length')

MIN_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 500

INT_FIELDS = ('length_min', 'length_max', 'max_results', 'trend_min')
OPTIONAL_FLOAT_FIELDS = ('price_max', 'traffic_min', 'backlinks_min')


def default_sort_dir(sort_by: str) -> str:
    """Direction a sort key starts in when first selected."""
    return 'asc' if sort_by in ASCENDING_BY_DEFAULT else 'desc'


@dataclass(frozen=True)
class FilterState:
    search: str = ''
    include: str = ''
    exclude: str = ''
    selected_tlds: Tuple[str, ...] = ()
    length_min: int = 1
    length_max: int = 32
    hyphens: str = 'any'
    digits: str = 'any'
    human_words: str = 'any'
    sort_by: str = 'score'
    sort_dir: str = 'desc'
    max_results: int = DEFAULT_PAGE_SIZE
    price_max: Optional[float] = None
    traffic_min: Optional[float] = None
    backlinks_min: Optional[float] = None
    trend_mode: str = 'any'
    trend_min: int = 0

    def __post_init__(self):
        if isinstance(self.selected_tlds, str):
            object.__setattr__(self, 'selected_tlds', (self.selected_tlds,))
        elif not isinstance(self.selected_tlds, tuple):
            object.__setattr__(self, 'selected_tlds', tuple(self.selected_tlds))
        for name in INT_FIELDS:
            object.__setattr__(self, name, self._coerce_number(name, int))
        for name in OPTIONAL_FLOAT_FIELDS:
            if getattr(self, name) is not None:
                object.__setattr__(self, name, self._coerce_number(name, float))
        self._check_choice('hyphens', POLICIES)
        self._check_choice('digits', POLICIES)
        self._check_choice('human_words', REQUIRE_MODES)
        self._check_choice('trend_mode', REQUIRE_MODES)
        self._check_choice('sort_by', SORT_KEYS)
        self._check_choice('sort_dir', SORT_DIRS)

    def _coerce_number(self, name: str, kind: type):
        value = getattr(self, name)
        if name == 'max_results' and value is None:
            return DEFAULT_PAGE_SIZE
        number = None
        if not isinstance(value, bool):
            try:
                number = float(value)
            except (TypeError, ValueError, OverflowError):
                number = None
        if number is None or not math.isfinite(number):
            raise ConfigurationError(f"Invalid {name} {value!r}; expected a number")
        return kind(number)

    def _check_choice(self, name: str, choices: Tuple[str, ...]):
        value = getattr(self, name)
        if value not in choices:
            raise ConfigurationError(
                f"Invalid {name} {value!r}; expected one of {', '.join(choices)}"
            )

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'FilterState':
        """Build a state from defaults overlaid with a mapping of field values."""
        return cls().merge_patch(data or {})

    def merge_patch(self, patch: Mapping[str, Any]) -> 'FilterState':
        unknown = sorted(set(patch) - set(self.field_names()))
        if unknown:
            raise ConfigurationError(f"Unknown filter setting(s): {', '.join(unknown)}")
        return replace(self, **patch)

    def merge(self, **patch: Any) -> 'FilterState':
        """Return a copy with the given fields replaced."""
        return self.merge_patch(patch)

    def toggle_sort(self, key: str) -> 'FilterState':
        """Same key flips the direction; a new key starts in its default direction."""
        if key == self.sort_by:
            return replace(self, sort_dir='asc' if self.sort_dir == 'desc' else 'desc')
        return self.merge(sort_by=key, sort_dir=default_sort_dir(key))

    @property
    def page_size(self) -> int:
        return max(MIN_PAGE_SIZE, self.max_results or DEFAULT_PAGE_SIZE)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['selected_tlds'] = list(self.selected_tlds)
        return data
