from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from car_compare.domain.car import CarRecord


MIN_CARS_TO_COMPARE = 2
MISSING_VALUE = "—"


class ViewMode(str, Enum):
    CATALOG = "catalog"
    COMPARISON = "comparison"


def can_compare(selected_count: int) -> bool:
    """Comparison needs at least MIN_CARS_TO_COMPARE selected cars."""
    return selected_count >= MIN_CARS_TO_COMPARE


@dataclass(frozen=True, slots=True)
class ComparisonRow:
    attribute: str
    # One formatted value per compared car, same order as ComparisonTable.cars
    values: tuple[str, ...]
    # Decided on the raw values: 1 and "1" differ even though both render as "1"
    differs: bool = False


@dataclass(frozen=True, slots=True)
class ComparisonTable:
    cars: tuple[CarRecord, ...]
    rows: tuple[ComparisonRow, ...]


def format_value(value: Any) -> str:
    if value is None:
        return MISSING_VALUE
    if isinstance(value, bool):
        return "✅" if value else "❌"
    return str(value)


def _raw_values_differ(values: Sequence[Any]) -> bool:
    # A missing attribute counts as null
    encoded = {json.dumps(value, sort_keys=True, default=str) for value in values}
    return len(encoded) > 1


def build_comparison(
    cars: Sequence[CarRecord], only_differences: bool = False, term: str | None = None
) -> ComparisonTable:
    """
    Lay the given cars side by side.

    Rows are the union of the cars' attribute names in first-seen order.
    A car lacking an attribute shows MISSING_VALUE in that row.

    Args:
        cars: Columns, in selection order
        only_differences: Keep only rows whose raw values are not all equal
        term: Keep only rows whose attribute name contains it (case-insensitive).
            Applied before only_differences.
    """
    columns = tuple(cars)

    attribute_names: dict[str, None] = {}
    for car in columns:
        for name in car.attributes:
            attribute_names.setdefault(name, None)

    needle = (term or "").strip().lower()
    names = [name for name in attribute_names if needle in name.lower()]

    rows = []
    for name in names:
        raw = [car.attributes.get(name) for car in columns]
        rows.append(
            ComparisonRow(
                attribute=name,
                values=tuple(format_value(value) for value in raw),
                differs=_raw_values_differ(raw),
            )
        )

    if only_differences:
        rows = [row for row in rows if row.differs]

    return ComparisonTable(cars=columns, rows=tuple(rows))
