"""
Test suite for the catalog and selection routes.

Routes are exercised against a real CompareViewSession backed by the
in-memory record source, injected through dependency overrides.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_compare.adapters.in_memory_car_record_source import InMemoryCarRecordSource
from car_compare.domain.car import CarRecord
from car_compare.entrypoints.http.dependencies import get_compare_view_session
from car_compare.entrypoints.http.exception_handlers import register_exception_handlers
from car_compare.entrypoints.http.routes.catalog import router
from car_compare.ports.car_record_source import CarRecordSource, CarRecordSourceError
from car_compare.use_cases.compare_view_session import CompareViewSession
from car_compare.use_cases.load_car_catalog import LoadCarCatalog


@pytest.fixture
def cars() -> list[CarRecord]:
    return [
        CarRecord(id=1, maker="Audi", model="A4", attributes={"year": 2022}),
        CarRecord(id=2, maker="Audi", model="A4", edition="Avant", attributes={"year": 2023}),
        CarRecord(id=3, maker="BMW", model="X5", attributes={"year": 2021}),
    ]


@pytest.fixture
def session(cars: list[CarRecord]) -> CompareViewSession:
    return CompareViewSession(LoadCarCatalog(InMemoryCarRecordSource(cars)))


@pytest.fixture
def app(session: CompareViewSession) -> FastAPI:
    """Create a test FastAPI app with the catalog router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_compare_view_session] = lambda: session
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    client = TestClient(app, raise_server_exceptions=False)
    client.post("/v1/catalog/reload")
    return client


# ==============================================================================
# GET /v1/catalog
# ==============================================================================


def test_get_catalog_returns_groups(client: TestClient) -> None:
    response = client.get("/v1/catalog")

    assert response.status_code == 200
    data = response.json()

    assert data["mode"] == "catalog"
    assert data["total"] == 3
    assert [group["model_name"] for group in data["groups"]] == ["Audi A4", "BMW X5"]
    assert [car["id"] for car in data["groups"][0]["editions"]] == [1, 2]
    assert data["groups"][0]["editions"][1]["label"] == "Audi A4 Avant"
    assert data["groups"][0]["editions"][0]["attributes"] == {"year": 2022}


@pytest.mark.parametrize(
    "cars",
    [[CarRecord(id=1.5, maker="Audi", model="A4"), CarRecord(id="x-5", maker="BMW", model="X5")]],
)
def test_get_catalog_with_fractional_and_textual_ids(client: TestClient) -> None:
    response = client.get("/v1/catalog")

    assert response.status_code == 200
    assert [group["editions"][0]["id"] for group in response.json()["groups"]] == [1.5, "x-5"]

    toggled = client.post("/v1/selection/1.5")

    assert toggled.status_code == 200
    assert [car["id"] for car in toggled.json()["selected"]] == [1.5]


def test_get_catalog_starts_without_selection(client: TestClient) -> None:
    data = client.get("/v1/catalog").json()

    assert data["selected"] == []
    assert data["selected_count"] == 0
    assert data["can_compare"] is False
    assert all(
        car["selected"] is False for group in data["groups"] for car in group["editions"]
    )


def test_get_catalog_with_search_term(client: TestClient) -> None:
    data = client.get("/v1/catalog", params={"q": "avant"}).json()

    assert data["total"] == 1
    assert data["groups"][0]["model_name"] == "Audi A4"
    assert [car["id"] for car in data["groups"][0]["editions"]] == [2]


def test_get_catalog_search_term_too_long(client: TestClient) -> None:
    response = client.get("/v1/catalog", params={"q": "x" * 201})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_get_catalog_marks_selected_cars(client: TestClient) -> None:
    client.post("/v1/selection/3")

    data = client.get("/v1/catalog").json()

    bmw = data["groups"][1]["editions"][0]
    assert bmw["selected"] is True
    assert [car["id"] for car in data["selected"]] == [3]


# ==============================================================================
# POST /v1/catalog/reload
# ==============================================================================


def test_reload_catalog(client: TestClient) -> None:
    response = client.post("/v1/catalog/reload")

    assert response.status_code == 200
    assert response.json()["total"] == 3


def test_reload_with_failing_source_returns_empty_catalog(
    client: TestClient, session: CompareViewSession
) -> None:
    source = AsyncMock(spec=CarRecordSource)
    source.fetch_cars.side_effect = CarRecordSourceError("down")
    session._load_catalog = LoadCarCatalog(source)

    response = client.post("/v1/catalog/reload")

    assert response.status_code == 200
    assert response.json()["groups"] == []
    assert response.json()["total"] == 0


# ==============================================================================
# POST /v1/selection/{car_id}
# ==============================================================================


def test_toggle_selects_and_unselects(client: TestClient) -> None:
    client.post("/v1/selection/1")
    client.post("/v1/selection/2")
    response = client.post("/v1/selection/1")

    assert response.status_code == 200
    data = response.json()
    assert [car["id"] for car in data["selected"]] == [2]
    assert data["selected_count"] == 1
    assert data["can_compare"] is False


def test_toggle_two_cars_enables_comparison(client: TestClient) -> None:
    client.post("/v1/selection/1")
    data = client.post("/v1/selection/3").json()

    assert data["can_compare"] is True
    assert [car["label"] for car in data["selected"]] == ["Audi A4", "BMW X5"]


def test_toggle_unknown_car_returns_404(client: TestClient) -> None:
    response = client.post("/v1/selection/99")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Car with identifier '99' not found",
        "code": "NOT_FOUND",
    }


def test_toggle_during_comparison_returns_409(
    client: TestClient, session: CompareViewSession
) -> None:
    client.post("/v1/selection/1")
    client.post("/v1/selection/2")
    session.enter_comparison()

    response = client.post("/v1/selection/3")

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"
    assert [car.id for car in session.selected] == [1, 2]


# ==============================================================================
# DELETE /v1/selection
# ==============================================================================


def test_clear_selection(client: TestClient) -> None:
    client.post("/v1/selection/1")
    client.post("/v1/selection/3")

    response = client.delete("/v1/selection")

    assert response.status_code == 200
    assert response.json()["selected"] == []
    assert response.json()["selected_count"] == 0


def test_clear_empty_selection_returns_409(client: TestClient) -> None:
    response = client.delete("/v1/selection")

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"
