from __future__ import annotations

from abc import ABC, abstractmethod

from car_compare.domain.car import CarRecord, CatalogQuery
from car_compare.domain.errors import InternalError


class CarRecordSourceError(InternalError):
    """Raised when the car record source cannot deliver a catalog."""

    pass


class CarRecordSource(ABC):
    """
    Port for the catalog data source.

    Contract (Preconditions):
        - query must be pre-validated by caller (UseCase)
        - Implementations return at most query.limit records, in source order
        - Any failure to deliver is raised as CarRecordSourceError
    """

    @abstractmethod
    async def fetch_cars(self, query: CatalogQuery) -> list[CarRecord]:
        """
        Fetch one bounded page of car records.

        Precondition: query must be validated by caller (UseCase).

        Args:
            query: Catalog query (limit) - pre-validated

        Returns:
            Car records in source order

        Raises:
            CarRecordSourceError: If the source is unreachable or answers garbage
        """
        ...
