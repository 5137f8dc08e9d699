"""Domain-level exceptions.

Every failure the data-access layer can report is a subclass of
DomainException so callers (the facade, the CLI) can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was missing or violated a field rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The store rejected a write or reported no affected rows."""


class StoreUnavailableError(DomainException):
    """The relational store could not be reached."""


class SchemaMissingError(StoreUnavailableError):
    """The store is reachable but its tables have not been created."""
