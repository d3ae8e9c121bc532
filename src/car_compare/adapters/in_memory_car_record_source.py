from __future__ import annotations

from car_compare.domain.car import CarRecord, CatalogQuery
from car_compare.ports.car_record_source import CarRecordSource


class InMemoryCarRecordSource(CarRecordSource):
    """
    Canonical contract implementation for tests and local runs.

    - Stores cars in insertion order
    - Applies the limit as a prefix of the stored list
    """

    def __init__(self, cars: list[CarRecord]) -> None:
        self._cars = cars

    async def fetch_cars(self, query: CatalogQuery) -> list[CarRecord]:
        # Trust that UseCase has validated inputs (contract programming)
        return list(self._cars[: query.limit])
