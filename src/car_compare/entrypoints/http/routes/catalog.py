from fastapi import APIRouter, Depends

from car_compare.domain.errors import ConflictError, NotFoundError
from car_compare.domain.grouping import filter_groups
from car_compare.entrypoints.http.dependencies import get_compare_view_session
from car_compare.entrypoints.http.dtos.catalog import (
    CatalogQueryDTO,
    CatalogResponseDTO,
    SelectionResponseDTO,
)
from car_compare.entrypoints.http.error_responses import ErrorResponse
from car_compare.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from car_compare.use_cases.compare_view_session import CompareViewSession


router = APIRouter(tags=["Catalog"])


@router.get(
    "/catalog",
    response_model=CatalogResponseDTO,
    summary="Browse grouped catalog",
    description="""
    Return the loaded catalog grouped by maker and model, together with the
    current selection and view mode.

    ## Grouping
    - Group name is "<maker> <model>"
    - Groups appear in the order their first edition appears in the source
    - Editions keep source order inside a group

    ## Search
    - `q` filters editions by maker, model, year and edition (case-insensitive)
    - Groups without matching editions are omitted

    ## Example
    ```
    GET /v1/catalog?q=audi
    ```
    """,
)
async def get_catalog(
    query: CatalogQueryDTO = Depends(),
    session: CompareViewSession = Depends(get_compare_view_session),
) -> CatalogResponseDTO:
    groups = filter_groups(session.groups, query.q)
    return CatalogMapper.to_catalog_response(session, groups)


@router.post(
    "/catalog/reload",
    response_model=CatalogResponseDTO,
    summary="Reload catalog from the car record source",
    description="""
    Fetch the catalog again. A failing source is logged and leaves an empty
    catalog; the response is still 200. The selection is kept.
    """,
)
async def reload_catalog(
    session: CompareViewSession = Depends(get_compare_view_session),
) -> CatalogResponseDTO:
    await session.load()
    return CatalogMapper.to_catalog_response(session, session.groups)


@router.post(
    "/selection/{car_id}",
    response_model=SelectionResponseDTO,
    summary="Toggle a car in the comparison selection",
    description="""
    Select the car if it is not selected, unselect it otherwise.
    Newly selected cars are appended to the end of the selection.
    Only allowed while the catalog is shown.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Car is not in the loaded catalog"},
        409: {"model": ErrorResponse, "description": "Comparison is currently shown"},
    },
)
async def toggle_selection(
    car_id: str,
    session: CompareViewSession = Depends(get_compare_view_session),
) -> SelectionResponseDTO:
    car = session.find_car(car_id)
    if car is None:
        raise NotFoundError(resource="Car", identifier=car_id)

    if not session.toggle(car):
        raise ConflictError("Selection cannot change while the comparison is shown")

    return CatalogMapper.to_selection_response(session)


@router.delete(
    "/selection",
    response_model=SelectionResponseDTO,
    summary="Clear the comparison selection",
    responses={
        409: {
            "model": ErrorResponse,
            "description": "Selection is already empty or comparison is currently shown",
        },
    },
)
async def clear_selection(
    session: CompareViewSession = Depends(get_compare_view_session),
) -> SelectionResponseDTO:
    if not session.clear():
        raise ConflictError(
            "Selection can only be cleared from the catalog when it is not empty",
            selected_count=len(session.selected),
        )

    return CatalogMapper.to_selection_response(session)
