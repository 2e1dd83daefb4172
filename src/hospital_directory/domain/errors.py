"""Errors raised by the domain and use cases.

None of these know about HTTP. Each carries a stable ``error_code`` that the
entrypoint maps to a status code, plus free-form context for logging.
"""

from typing import Any


class DomainError(Exception):
    """Root of every business failure in the directory."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """
    Input that breaks a field rule or a required-parameter rule.

    Either a single message (missing search term, missing lat/lng) or a list
    of per-field problems collected while validating an entity, each shaped
    ``{"field", "message", "code"}``.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[dict[str, str]] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class FilterValidationError(ValidationError):
    """Bad listing filter or sort parameter."""


class PagingValidationError(ValidationError):
    """Page or limit outside the accepted range."""


class GeoValidationError(ValidationError):
    """Nearby search without a usable center or radius."""


class NotFoundError(DomainError):
    """A hospital, medical test or offering that does not exist."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """
        Args:
            resource: Entity name used in the message, e.g. "Hospital"
            identifier: The id that was looked up, when there is one
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """
    A write that would break a uniqueness or reference rule.

    Duplicate hospital phone, a second offering for the same (hospital,
    test) pair, or deleting a hospital or test that offerings still point to.
    """

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """An unexpected condition; surfaces as a generic server error."""

    error_code: str = "INTERNAL_ERROR"
