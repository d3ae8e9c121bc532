from __future__ import annotations

import pytest

from car_compare.domain.car import (
    MAX_CATALOG_LIMIT,
    CarRecord,
    CatalogQuery,
    CatalogQueryValidationError,
)
from car_compare.domain.errors import ValidationError


def test_group_key_joins_maker_and_model() -> None:
    assert CarRecord(id=1, maker="Audi", model="A4").group_key == "Audi A4"


def test_label_includes_edition_when_present() -> None:
    assert CarRecord(id=1, maker="Audi", model="A4", edition="Avant").label == "Audi A4 Avant"


def test_label_without_edition_has_no_trailing_space() -> None:
    assert CarRecord(id=1, maker="Audi", model="A4").label == "Audi A4"


def test_records_compare_by_content() -> None:
    first = CarRecord(id=1, maker="Audi", model="A4", attributes={"year": 2022})
    second = CarRecord(id=1, maker="Audi", model="A4", attributes={"year": 2022})

    assert first == second


def test_records_with_attributes_are_hashable() -> None:
    first = CarRecord(id=1, maker="Audi", model="A4", attributes={"year": 2022})
    second = CarRecord(id=1, maker="Audi", model="A4", attributes={"year": 2022})

    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_default_query_is_valid() -> None:
    CatalogQuery().validate()


def test_max_limit_is_valid() -> None:
    CatalogQuery(limit=MAX_CATALOG_LIMIT).validate()


@pytest.mark.parametrize(
    ("limit", "code"),
    [(0, "LIMIT_TOO_SMALL"), (-1, "LIMIT_TOO_SMALL"), (MAX_CATALOG_LIMIT + 1, "LIMIT_TOO_LARGE")],
)
def test_invalid_limit_raises(limit: int, code: str) -> None:
    with pytest.raises(CatalogQueryValidationError) as exc_info:
        CatalogQuery(limit=limit).validate()

    assert exc_info.value.message == "Invalid catalog query"
    assert [(e["field"], e["code"]) for e in exc_info.value.errors] == [("limit", code)]


def test_query_error_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        CatalogQuery(limit=0).validate()
