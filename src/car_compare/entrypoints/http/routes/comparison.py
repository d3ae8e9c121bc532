from fastapi import APIRouter, Depends

from car_compare.domain.comparison import MIN_CARS_TO_COMPARE, ViewMode
from car_compare.domain.errors import ConflictError
from car_compare.entrypoints.http.dependencies import get_compare_view_session
from car_compare.entrypoints.http.dtos.catalog import ModeResponseDTO
from car_compare.entrypoints.http.dtos.comparison import (
    ComparisonQueryDTO,
    ComparisonResponseDTO,
)
from car_compare.entrypoints.http.error_responses import ErrorResponse
from car_compare.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from car_compare.entrypoints.http.mappers.comparison_mapper import ComparisonMapper
from car_compare.use_cases.compare_view_session import CompareViewSession


router = APIRouter(tags=["Comparison"])


@router.post(
    "/comparison",
    response_model=ModeResponseDTO,
    summary="Show the comparison",
    description=f"""
    Switch from the catalog to the comparison view.

    Requires at least {MIN_CARS_TO_COMPARE} selected cars. The selection is
    kept as it is.
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Not enough cars selected"},
    },
)
async def enter_comparison(
    session: CompareViewSession = Depends(get_compare_view_session),
) -> ModeResponseDTO:
    if not session.enter_comparison():
        raise ConflictError(
            f"At least {MIN_CARS_TO_COMPARE} cars must be selected to compare",
            selected_count=len(session.selected),
        )
    return CatalogMapper.to_mode_response(session)


@router.delete(
    "/comparison",
    response_model=ModeResponseDTO,
    summary="Back to the catalog",
    description="Leave the comparison view. Always allowed; the selection is kept.",
)
async def leave_comparison(
    session: CompareViewSession = Depends(get_compare_view_session),
) -> ModeResponseDTO:
    session.back_to_catalog()
    return CatalogMapper.to_mode_response(session)


@router.get(
    "/comparison",
    response_model=ComparisonResponseDTO,
    summary="Side-by-side comparison of the selected cars",
    description="""
    Return the selected cars as columns and the union of their attributes as
    rows. Missing values are rendered as "—", booleans as ✅ / ❌.

    ## Filters
    - `q` keeps attributes whose name contains it (case-insensitive)
    - `only_differences` then keeps attributes whose values are not all equal

    Only available while the comparison view is shown.
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Comparison view is not shown"},
    },
)
async def get_comparison(
    query: ComparisonQueryDTO = Depends(),
    session: CompareViewSession = Depends(get_compare_view_session),
) -> ComparisonResponseDTO:
    if session.mode is not ViewMode.COMPARISON:
        raise ConflictError("Comparison view is not shown")

    table = session.comparison(only_differences=query.only_differences, term=query.q)
    return ComparisonMapper.to_response(table)
