"""HTTP implementation of CarRecordSource."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from car_compare.domain.car import CarRecord, CatalogQuery
from car_compare.ports.car_record_source import CarRecordSource, CarRecordSourceError

logger = logging.getLogger(__name__)

CARS_PATH = "/api/cars"
_IDENTITY_FIELDS = ("id", "maker", "model", "edition")


class HttpCarRecordSource(CarRecordSource):
    """
    Fetches the catalog from GET {base_url}/api/cars?limit=<N>.

    - Expects a JSON body shaped like {"cars": [ {...}, ... ]}
    - id, maker and model are required per record; records lacking one are skipped
    - Every other field of a record lands in CarRecord.attributes, in body order
    - No retries, no auth headers, no timeout beyond what the client carries
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize source with an HTTP client.

        Args:
            client: Async client whose base_url points at the catalog API
        """
        self._client = client

    async def fetch_cars(self, query: CatalogQuery) -> list[CarRecord]:
        try:
            response = await self._client.get(CARS_PATH, params={"limit": query.limit})
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            raise CarRecordSourceError(
                "Car record source answered with an error status",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise CarRecordSourceError(
                "Car record source is unreachable", error_type=type(exc).__name__
            ) from exc
        except ValueError as exc:  # body is not JSON
            raise CarRecordSourceError("Car record source returned invalid JSON") from exc

        if not isinstance(body, dict):
            raise CarRecordSourceError("Car record source returned an unexpected payload")

        raw_cars = body.get("cars") or []
        if not isinstance(raw_cars, list):
            raise CarRecordSourceError("Car record source returned an unexpected payload")

        cars: list[CarRecord] = []
        for raw in raw_cars:
            car = self._to_domain(raw)
            if car is None:
                logger.warning("Skipping malformed car record", extra={"record": raw})
                continue
            cars.append(car)
        return cars

    def _to_domain(self, raw: Any) -> CarRecord | None:
        """
        Convert a JSON object into a CarRecord.

        Returns:
            CarRecord, or None if the object lacks id, maker or model
        """
        if not isinstance(raw, dict):
            return None
        if raw.get("id") is None or raw.get("maker") is None or raw.get("model") is None:
            return None

        edition = raw.get("edition")
        return CarRecord(
            id=raw["id"],
            maker=str(raw["maker"]),
            model=str(raw["model"]),
            edition=str(edition) if edition else None,
            attributes={key: value for key, value in raw.items() if key not in _IDENTITY_FIELDS},
        )
