"""
views/filters.py — client-side filter chain applied to a fetched list.

A record is kept when the search term (case-insensitive substring)
matches at least one search field AND every active categorical filter
matches exactly. A categorical filter set to ``"all"`` is inactive.
Filtering never reorders records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from agneby_shared.constants import ALL


@dataclass(frozen=True)
class CategoricalFilter:
    """Exact-match filter driven by one select control."""

    param: str
    field: str
    options: tuple[str, ...]
    # Maps control values to stored values ("on-duty" -> True).
    value_map: Mapping[str, Any] = field(default_factory=dict)

    def is_active(self, value: str | None) -> bool:
        return bool(value) and value != ALL

    def target(self, value: str) -> Any:
        return self.value_map.get(value, value)

    def matches(self, record: Any, value: str | None) -> bool:
        if not self.is_active(value):
            return True
        return getattr(record, self.field, None) == self.target(value)  # type: ignore[arg-type]


def matches_search(record: Any, fields: Iterable[str], term: str | None) -> bool:
    if not term:
        return True
    needle = term.lower()
    for name in fields:
        value = getattr(record, name, None)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


@dataclass(frozen=True)
class FilterChain:
    search_fields: tuple[str, ...]
    filters: tuple[CategoricalFilter, ...] = ()

    @property
    def params(self) -> tuple[str, ...]:
        return tuple(f.param for f in self.filters)

    def get(self, param: str) -> CategoricalFilter:
        for f in self.filters:
            if f.param == param:
                return f
        raise KeyError(f"Unknown filter: {param}")

    def apply(
        self,
        records: Sequence[Any],
        search: str | None = None,
        values: Mapping[str, str | None] | None = None,
    ) -> list[Any]:
        values = values or {}
        return [
            r for r in records
            if matches_search(r, self.search_fields, search)
            and all(f.matches(r, values.get(f.param)) for f in self.filters)
        ]
