from __future__ import annotations

import logging
from dataclasses import dataclass, field

from car_compare.domain.car import CarRecord, CatalogQuery
from car_compare.ports.car_record_source import CarRecordSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadCarCatalogRequest:
    query: CatalogQuery = field(default_factory=CatalogQuery)


@dataclass(frozen=True, slots=True)
class LoadCarCatalogResponse:
    cars: list[CarRecord]
    failed: bool = False


class LoadCarCatalog:
    """
    Fetch the car catalog from the record source.

    A failing source is not an error for the caller: the failure is logged
    and an empty catalog comes back with failed=True. No retries.
    """

    def __init__(self, car_record_source: CarRecordSource) -> None:
        self._source = car_record_source

    async def execute(self, request: LoadCarCatalogRequest) -> LoadCarCatalogResponse:
        """
        Execute catalog load.

        Args:
            request: Load parameters (catalog query)

        Returns:
            Response with the fetched cars, or an empty list if the fetch failed

        Raises:
            CatalogQueryValidationError: If the query limit is invalid
        """
        request.query.validate()

        try:
            cars = await self._source.fetch_cars(request.query)
        except Exception as exc:
            logger.error(
                "Error fetching cars",
                exc_info=exc,
                extra={"error_type": type(exc).__name__, "limit": request.query.limit},
            )
            return LoadCarCatalogResponse(cars=[], failed=True)

        logger.info("Car catalog loaded", extra={"count": len(cars)})
        return LoadCarCatalogResponse(cars=cars)
