"""Grouping of catalog records into maker/model tiles."""

from __future__ import annotations

from typing import Sequence

from car_compare.domain.car import CarGroup, CarRecord


def group_cars(cars: Sequence[CarRecord]) -> list[CarGroup]:
    """
    Partition records into groups keyed by "<maker> <model>".

    Groups come out in the order their key is first seen and every group
    keeps the relative input order of its editions.
    """
    buckets: dict[str, list[CarRecord]] = {}
    for car in cars:
        buckets.setdefault(car.group_key, []).append(car)

    return [
        CarGroup(model_name=model_name, editions=tuple(editions))
        for model_name, editions in buckets.items()
    ]


def filter_groups(groups: Sequence[CarGroup], term: str | None) -> list[CarGroup]:
    """
    Keep the editions whose "maker model year edition" text contains term.

    Matching is case-insensitive. Groups left without editions are dropped.
    A blank term returns the groups unchanged.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(groups)

    filtered: list[CarGroup] = []
    for group in groups:
        matches = tuple(car for car in group.editions if needle in _search_text(car))
        if matches:
            filtered.append(CarGroup(model_name=group.model_name, editions=matches))
    return filtered


def _search_text(car: CarRecord) -> str:
    year = car.attributes.get("year")
    parts = (car.maker, car.model, "" if year is None else str(year), car.edition or "")
    return " ".join(parts).lower()


class GroupingCache:
    """
    Memoizes group_cars() for the most recent input.

    The cache key is the content of the input (a tuple of records compared
    with ==), so passing a new list with the same records reuses the last
    result while any added, removed, reordered or changed record triggers
    a recomputation.
    """

    def __init__(self) -> None:
        self._fingerprint: tuple[CarRecord, ...] | None = None
        self._groups: list[CarGroup] = []
        self.computations = 0

    def groups_for(self, cars: Sequence[CarRecord]) -> list[CarGroup]:
        fingerprint = tuple(cars)
        if fingerprint != self._fingerprint:
            self._groups = group_cars(fingerprint)
            self._fingerprint = fingerprint
            self.computations += 1
        return list(self._groups)
