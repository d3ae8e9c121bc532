from fastapi import APIRouter, Query

from car_compare.domain.translations import (
    translate_allowed_payment_methods,
    translate_status,
)
from car_compare.entrypoints.http.dtos.labels import (
    PaymentMethodsLabelResponseDTO,
    StatusLabelResponseDTO,
)


router = APIRouter(prefix="/labels", tags=["Labels"])


@router.get(
    "/status/{status}",
    response_model=StatusLabelResponseDTO,
    summary="Localized label for a status code",
    description="Unknown status codes map to \"Непознат\".",
)
def get_status_label(status: str) -> StatusLabelResponseDTO:
    return StatusLabelResponseDTO(status=status, label=translate_status(status))


@router.get(
    "/payment-methods",
    response_model=PaymentMethodsLabelResponseDTO,
    summary="Localized labels for payment method codes",
    description="""
    Concatenate the labels of the given payment methods in request order.
    Each label is followed by a space. Unknown codes are left out.

    ## Example
    ```
    GET /v1/labels/payment-methods?method=cash&method=card
    ```
    """,
)
def get_payment_methods_label(
    method: list[str] = Query(default=[], description="Payment method code, repeatable"),
) -> PaymentMethodsLabelResponseDTO:
    return PaymentMethodsLabelResponseDTO(
        methods=method,
        label=translate_allowed_payment_methods(method),
    )
