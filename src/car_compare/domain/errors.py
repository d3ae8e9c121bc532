"""Domain errors.

Every failure the domain reports carries a stable ``error_code``. The HTTP
entrypoint maps that code to a status and renders the error; nothing in
here knows about HTTP.
"""

from typing import Any, TypedDict


class FieldError(TypedDict):
    field: str
    message: str
    code: str


class DomainError(Exception):
    """Root of the domain error tree.

    ``context`` holds extra values worth logging (ids, counts). It is not
    shown to API clients.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """One or more values broke a domain rule.

    Each violation names the offending field, so clients can point at it:

        CatalogQuery(limit=0).validate()
        -> errors=[{"field": "limit", "message": "Must be greater than 0",
                    "code": "LIMIT_TOO_SMALL"}]
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self, errors: list[FieldError], message: str = "Validation failed", **context: Any
    ) -> None:
        super().__init__(message, **context)
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class NotFoundError(DomainError):
    """The referenced resource is not there (e.g. a car id outside the loaded catalog)."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        message = (
            f"{resource} with identifier '{identifier}' not found"
            if identifier
            else f"{resource} not found"
        )
        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """The operation is not allowed in the current view state.

    Entering the comparison with fewer than two cars, or changing the
    selection while the comparison is shown.
    """

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """Something outside the caller's control failed. Always logged."""

    error_code: str = "INTERNAL_ERROR"
