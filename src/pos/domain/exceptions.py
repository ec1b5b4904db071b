"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A quantity was non-numeric, zero or negative."""


class EmptyCartError(ValidationError):
    """Checkout was attempted with nothing in the cart."""


class CheckoutInProgressError(ValidationError):
    """A sale submission is pending for this session."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ServiceError(DomainException):
    """An external collaborator (catalog, customers, sales, storage) failed."""
