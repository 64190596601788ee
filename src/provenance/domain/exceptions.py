"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer (or any other host) can catch them uniformly and display a
user-friendly message. None of them is transient: retrying the same call
against the same state fails the same way.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An input value is malformed (e.g. the reserved product ID 0)."""


class EntityNotFoundError(DomainException):
    """A requested product does not exist."""


class AlreadyExistsError(DomainException):
    """A product with the requested ID has already been registered."""


class NotOwnerError(DomainException):
    """The caller is not the product's current owner."""


class NoHistoryError(DomainException):
    """A product has no recorded provenance steps."""


class StorageError(DomainException):
    """Persisted registry state could not be read or written."""
