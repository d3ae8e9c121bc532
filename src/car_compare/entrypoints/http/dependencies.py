"""
Dependency injection for FastAPI routes.

Key principle: the view session is a single long-lived object owned by the
application (created in the lifespan), so routes fetch it from app.state
instead of building one per request.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from car_compare.adapters.http_car_record_source import HttpCarRecordSource
from car_compare.domain.car import CatalogQuery
from car_compare.domain.errors import InternalError
from car_compare.infra.config import api_base_url, catalog_limit
from car_compare.use_cases.compare_view_session import CompareViewSession
from car_compare.use_cases.load_car_catalog import LoadCarCatalog


def build_http_client() -> httpx.AsyncClient:
    """
    Create the client used to reach the car record source.

    The base URL comes from configuration; no timeout is applied to the fetch.
    """
    return httpx.AsyncClient(base_url=api_base_url(), timeout=None)


def build_compare_view_session(client: httpx.AsyncClient) -> CompareViewSession:
    """
    Wire a view session on top of the HTTP record source.

    Args:
        client: Async HTTP client pointing at the car record source

    Returns:
        CompareViewSession: Fresh session in catalog mode with an empty catalog

    Raises:
        CatalogQueryValidationError: If the configured catalog limit is invalid
    """
    query = CatalogQuery(limit=catalog_limit())
    query.validate()

    source = HttpCarRecordSource(client=client)
    return CompareViewSession(
        load_catalog=LoadCarCatalog(car_record_source=source),
        query=query,
    )


def get_compare_view_session(request: Request) -> CompareViewSession:
    """
    Returns the application's view session.

    Raises:
        InternalError: If the app was started without its lifespan
    """
    session = getattr(request.app.state, "compare_view_session", None)
    if session is None:
        raise InternalError("Compare view session is not initialized")
    return session
