from __future__ import annotations

from car_compare.domain.comparison import ComparisonTable
from car_compare.entrypoints.http.dtos.comparison import ComparisonResponseDTO, ComparisonRowDTO
from car_compare.entrypoints.http.mappers.catalog_mapper import CatalogMapper


class ComparisonMapper:
    """Maps the domain comparison table to its REST response."""

    @staticmethod
    def to_response(table: ComparisonTable) -> ComparisonResponseDTO:
        return ComparisonResponseDTO(
            cars=[CatalogMapper.to_car_response(car, selected=True) for car in table.cars],
            rows=[
                ComparisonRowDTO(attribute=row.attribute, values=list(row.values))
                for row in table.rows
            ],
        )
