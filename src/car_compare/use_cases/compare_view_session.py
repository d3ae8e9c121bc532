"""Catalog/comparison view session.

Holds the state of one browsing session: the loaded catalog, the cars picked
for comparison and which of the two screens is shown.

State machine:
    CATALOG --enter_comparison() [>= 2 selected]--> COMPARISON
    COMPARISON --back_to_catalog()--> CATALOG

Every operation except load() is synchronous and total; a transition or
mutation that is not allowed in the current state returns False and leaves
the state untouched. All calls are expected on a single event loop.
"""

from __future__ import annotations

import logging

from car_compare.domain.car import CarGroup, CarRecord, CatalogQuery
from car_compare.domain.comparison import (
    ComparisonTable,
    ViewMode,
    build_comparison,
    can_compare,
)
from car_compare.domain.grouping import GroupingCache
from car_compare.domain.selection import SelectionStore
from car_compare.use_cases.load_car_catalog import LoadCarCatalog, LoadCarCatalogRequest

logger = logging.getLogger(__name__)


class CompareViewSession:
    def __init__(self, load_catalog: LoadCarCatalog, query: CatalogQuery | None = None) -> None:
        """
        Initialize an empty session in catalog mode.

        Args:
            load_catalog: Use case that fetches the catalog
            query: Catalog query sent on every load (default limit when omitted)
        """
        self._load_catalog = load_catalog
        self._query = query or CatalogQuery()
        self._cars: list[CarRecord] = []
        self._grouping = GroupingCache()
        self._selection = SelectionStore()
        self._mode = ViewMode.CATALOG
        self._closed = False
        self._load_generation = 0

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    async def load(self) -> bool:
        """
        Fetch the catalog and make it current.

        The previous catalog stays visible while the fetch is pending. A
        failed fetch leaves an empty catalog. The result is dropped if the
        session was closed, or a later load() was started, while the fetch
        was pending; only the most recently started load can apply.

        Returns:
            True if the fetched catalog was applied
        """
        self._load_generation += 1
        generation = self._load_generation

        response = await self._load_catalog.execute(LoadCarCatalogRequest(query=self._query))

        if self._closed:
            logger.info("Session closed during catalog load, discarding result")
            return False
        if generation != self._load_generation:
            logger.info(
                "Superseded catalog load, discarding result",
                extra={"generation": generation, "latest": self._load_generation},
            )
            return False

        self._cars = response.cars
        return True

    @property
    def cars(self) -> list[CarRecord]:
        return list(self._cars)

    @property
    def groups(self) -> list[CarGroup]:
        return self._grouping.groups_for(self._cars)

    def find_car(self, car_id: str) -> CarRecord | None:
        """Look a car up by id; ids from a URL arrive as strings so compare textually."""
        for car in self._cars:
            if str(car.id) == car_id:
                return car
        return None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def selected(self) -> list[CarRecord]:
        return self._selection.cars

    def is_selected(self, car: CarRecord) -> bool:
        return self._selection.is_selected(car)

    def toggle(self, car: CarRecord) -> bool:
        """Toggle car in the selection. Only applied in catalog mode."""
        if self._mode is not ViewMode.CATALOG:
            return False
        self._selection.toggle(car)
        return True

    def clear(self) -> bool:
        """Empty the selection. Only applied in catalog mode with a non-empty selection."""
        if self._mode is not ViewMode.CATALOG or len(self._selection) == 0:
            return False
        self._selection.clear()
        return True

    # ------------------------------------------------------------------
    # Mode transitions
    # ------------------------------------------------------------------

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def can_compare(self) -> bool:
        return self._mode is ViewMode.CATALOG and can_compare(len(self._selection))

    def enter_comparison(self) -> bool:
        if not self.can_compare:
            logger.info(
                "Comparison rejected",
                extra={"mode": self._mode.value, "selected": len(self._selection)},
            )
            return False
        self._mode = ViewMode.COMPARISON
        return True

    def back_to_catalog(self) -> None:
        self._mode = ViewMode.CATALOG

    def comparison(
        self, only_differences: bool = False, term: str | None = None
    ) -> ComparisonTable:
        return build_comparison(
            self._selection.cars, only_differences=only_differences, term=term
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
