"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the service layer can catch them uniformly and turn them into failed
results.  Each class carries an ``ErrorKind`` tag; the set of kinds is closed.
"""

from enum import Enum


class ErrorKind(Enum):
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_STATE = "INVALID_STATE"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION_FAILED


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = ErrorKind.VALIDATION_FAILED


class InvalidStateError(ValidationError):
    """The aggregate is not in a state that allows the requested operation."""

    kind = ErrorKind.INVALID_STATE


class AlreadyExistsError(ValidationError):
    """An entity with the same natural key is already stored."""

    kind = ErrorKind.ALREADY_EXISTS


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND
