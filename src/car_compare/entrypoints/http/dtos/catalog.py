from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CarResponseDTO(BaseModel):
    id: str | int | float
    maker: str
    model: str
    edition: str | None = None
    label: str
    selected: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)


class CarGroupResponseDTO(BaseModel):
    model_name: str
    editions: list[CarResponseDTO]


class CatalogQueryDTO(BaseModel):
    """Query parameters for browsing the grouped catalog."""

    q: str | None = Field(
        default=None,
        description="Case-insensitive search over maker, model, year and edition",
        examples=["audi a4"],
        max_length=200,
    )


class SelectionResponseDTO(BaseModel):
    mode: str
    selected: list[CarResponseDTO]
    selected_count: int
    can_compare: bool


class CatalogResponseDTO(SelectionResponseDTO):
    groups: list[CarGroupResponseDTO]
    total: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "mode": "catalog",
                "groups": [
                    {
                        "model_name": "Audi A4",
                        "editions": [
                            {
                                "id": 1,
                                "maker": "Audi",
                                "model": "A4",
                                "edition": "Avant",
                                "label": "Audi A4 Avant",
                                "selected": True,
                                "attributes": {"year": 2022},
                            }
                        ],
                    }
                ],
                "total": 1,
                "selected": [],
                "selected_count": 1,
                "can_compare": False,
            }
        }
    )


class ModeResponseDTO(BaseModel):
    mode: str
    can_compare: bool
