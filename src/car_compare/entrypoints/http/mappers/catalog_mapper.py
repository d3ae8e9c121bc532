from __future__ import annotations

from car_compare.domain.car import CarGroup, CarRecord
from car_compare.entrypoints.http.dtos.catalog import (
    CarGroupResponseDTO,
    CarResponseDTO,
    CatalogResponseDTO,
    ModeResponseDTO,
    SelectionResponseDTO,
)
from car_compare.use_cases.compare_view_session import CompareViewSession


class CatalogMapper:
    """Maps view session state to REST response DTOs."""

    @staticmethod
    def to_car_response(car: CarRecord, selected: bool = False) -> CarResponseDTO:
        """
        Converts a domain CarRecord to its REST representation.

        Args:
            car: Domain car record
            selected: Whether the car is currently picked for comparison

        Returns:
            CarResponseDTO: REST response DTO
        """
        return CarResponseDTO(
            id=car.id,
            maker=car.maker,
            model=car.model,
            edition=car.edition,
            label=car.label,
            selected=selected,
            attributes=dict(car.attributes),
        )

    @staticmethod
    def to_group_response(group: CarGroup, session: CompareViewSession) -> CarGroupResponseDTO:
        return CarGroupResponseDTO(
            model_name=group.model_name,
            editions=[
                CatalogMapper.to_car_response(car, selected=session.is_selected(car))
                for car in group.editions
            ],
        )

    @staticmethod
    def to_selection_response(session: CompareViewSession) -> SelectionResponseDTO:
        selected = session.selected
        return SelectionResponseDTO(
            mode=session.mode.value,
            selected=[CatalogMapper.to_car_response(car, selected=True) for car in selected],
            selected_count=len(selected),
            can_compare=session.can_compare,
        )

    @staticmethod
    def to_catalog_response(
        session: CompareViewSession, groups: list[CarGroup]
    ) -> CatalogResponseDTO:
        """
        Converts the session and the groups to show into the catalog response.

        Args:
            session: Current view session
            groups: Groups to render (already filtered by the search term)

        Returns:
            CatalogResponseDTO: groups, selection panel and mode
        """
        selection = CatalogMapper.to_selection_response(session)
        return CatalogResponseDTO(
            **selection.model_dump(),
            groups=[CatalogMapper.to_group_response(group, session) for group in groups],
            total=sum(len(group.editions) for group in groups),
        )

    @staticmethod
    def to_mode_response(session: CompareViewSession) -> ModeResponseDTO:
        return ModeResponseDTO(mode=session.mode.value, can_compare=session.can_compare)
