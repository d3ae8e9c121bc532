from __future__ import annotations

from car_compare.domain.car import CarId, CarRecord


class SelectionStore:
    """
    Cars picked for comparison, in the order they were picked.

    - Identity is the car id, never the object
    - Backed by an insertion-ordered dict for O(1) toggle and membership
    - A car toggled back in is appended at the end
    """

    def __init__(self) -> None:
        self._cars: dict[CarId, CarRecord] = {}

    def toggle(self, car: CarRecord) -> bool:
        """Select or unselect car. Returns True when car is selected afterwards."""
        if car.id in self._cars:
            del self._cars[car.id]
            return False
        self._cars[car.id] = car
        return True

    def clear(self) -> None:
        self._cars.clear()

    def is_selected(self, car: CarRecord) -> bool:
        return car.id in self._cars

    @property
    def cars(self) -> list[CarRecord]:
        return list(self._cars.values())

    @property
    def ids(self) -> list[CarId]:
        return list(self._cars)

    def __len__(self) -> int:
        return len(self._cars)
