from pydantic import BaseModel, ConfigDict, Field

from car_compare.entrypoints.http.dtos.catalog import CarResponseDTO


class ComparisonQueryDTO(BaseModel):
    """Query parameters for the side-by-side comparison."""

    q: str | None = Field(
        default=None,
        description="Case-insensitive filter on attribute names, applied before only_differences",
        examples=["fuel"],
        max_length=200,
    )
    only_differences: bool = Field(
        default=False,
        description="Only return attributes whose values differ between the compared cars",
        examples=[True],
    )


class ComparisonRowDTO(BaseModel):
    attribute: str
    values: list[str] = Field(description="One formatted value per compared car, in column order")


class ComparisonResponseDTO(BaseModel):
    """Side-by-side comparison of the selected cars."""

    cars: list[CarResponseDTO]
    rows: list[ComparisonRowDTO]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cars": [
                    {"id": 1, "maker": "Audi", "model": "A4", "label": "Audi A4"},
                    {"id": 3, "maker": "BMW", "model": "X5", "label": "BMW X5"},
                ],
                "rows": [
                    {"attribute": "year", "values": ["2022", "2021"]},
                    {"attribute": "hybrid", "values": ["❌", "✅"]},
                ],
            }
        }
    )
