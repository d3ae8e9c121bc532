from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from car_compare.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class CatalogQueryValidationError(ValidationError):
    """Raised when catalog query parameters are invalid."""

    pass


MAX_CATALOG_LIMIT = 200
DEFAULT_CATALOG_LIMIT = 100

# Ids are whatever JSON scalar the record source uses for them
CarId = str | int | float


@dataclass(frozen=True)
class CarRecord:
    id: CarId
    maker: str
    model: str
    edition: str | None = None
    # Remaining display fields in source order (year, price, fuel_type, ...)
    attributes: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def group_key(self) -> str:
        return f"{self.maker} {self.model}"

    @property
    def label(self) -> str:
        return " ".join(part for part in (self.maker, self.model, self.edition) if part)


@dataclass(frozen=True, slots=True)
class CarGroup:
    model_name: str
    editions: tuple[CarRecord, ...]


@dataclass(frozen=True, slots=True)
class CatalogQuery:
    limit: int = DEFAULT_CATALOG_LIMIT

    def validate(self) -> None:
        """
        Validate catalog query parameters.

        Raises:
            CatalogQueryValidationError: If the limit is outside 1..MAX_CATALOG_LIMIT
        """
        if self.limit <= 0:
            raise CatalogQueryValidationError(
                errors=[
                    {"field": "limit", "message": "Must be greater than 0", "code": "LIMIT_TOO_SMALL"}
                ],
                message="Invalid catalog query",
            )
        if self.limit > MAX_CATALOG_LIMIT:
            raise CatalogQueryValidationError(
                errors=[
                    {
                        "field": "limit",
                        "message": f"Must be less than or equal to {MAX_CATALOG_LIMIT}",
                        "code": "LIMIT_TOO_LARGE",
                    }
                ],
                message="Invalid catalog query",
            )
