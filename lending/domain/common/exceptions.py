"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when input is
malformed, a referenced aggregate is missing, or an aggregate invariant
prevents an operation. They are translated to HTTP responses by the
exception handlers registered in ``lending.main``.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Malformed ISBN, blank borrower name, invalid email address.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Borrowing a book whose id does not exist.
    """

    def __init__(
        self, entity_type: str, entity_id: object, *, key_name: str = "id"
    ) -> None:
        message = f"{entity_type} with {key_name} '{entity_id}' was not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """
    Raised when an aggregate invariant prevents an otherwise valid operation.

    Example: Borrowing a book that is already borrowed.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule
