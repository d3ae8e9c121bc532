from pydantic import BaseModel, Field


class StatusLabelResponseDTO(BaseModel):
    status: str
    label: str


class PaymentMethodsLabelResponseDTO(BaseModel):
    methods: list[str]
    label: str = Field(description="Labels in input order, each followed by a space")
