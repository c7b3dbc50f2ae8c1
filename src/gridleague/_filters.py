"""Query filter builder for PostgREST-style row filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Parameters the REST layer reads verbatim rather than as column filters.
_PASSTHROUGH_KEYS = frozenset({"select", "order", "limit", "offset", "on_conflict"})


@dataclass(frozen=True)
class Filter:
    """Represents a comparison filter on a table column.

    Usage:
        # Equality
        Filter(eq=3)  # produces: race_id=eq.3

        # Range filter
        Filter(gte=5, lte=10)  # produces: race_id=gte.5&race_id=lte.10

        # Membership
        Filter(in_=(1, 2, 3))  # produces: race_id=in.(1,2,3)
    """

    eq: int | float | str | None = None
    neq: int | float | str | None = None
    gt: int | float | str | None = None
    gte: int | float | str | None = None
    lt: int | float | str | None = None
    lte: int | float | str | None = None
    in_: tuple[int | float | str, ...] | None = None

    def to_params(self, key: str) -> list[tuple[str, str]]:
        """Convert this filter to a list of (column, operator.value) pairs."""
        params: list[tuple[str, str]] = []
        for op in ("eq", "neq", "gt", "gte", "lt", "lte"):
            value = getattr(self, op)
            if value is not None:
                params.append((key, f"{op}.{value}"))
        if self.in_ is not None:
            joined = ",".join(str(v) for v in self.in_)
            params.append((key, f"in.({joined})"))
        return params


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Plain values become equality filters. Filter instances become operator filters.
    ``select``, ``order``, ``limit``, ``offset`` and ``on_conflict`` pass through as-is.

    Args:
        **kwargs: Keyword arguments where keys are column names and values are
                  either plain values (for equality) or Filter instances.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if key in _PASSTHROUGH_KEYS:
            params.append((key, str(value)))
        elif isinstance(value, Filter):
            params.extend(value.to_params(key))
        else:
            params.append((key, f"eq.{value}"))
    return params
