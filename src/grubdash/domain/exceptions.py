"""Domain-level exceptions.

Every failure a request can end in is a subclass of DomainException so
the pipeline and the CLI layer can render them uniformly.  Each class
carries the status code of the response it turns into.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"message": self.message}


class ValidationError(DomainException):
    """A field is missing, malformed or out of range."""

    status_code = 400


class IdMismatchError(DomainException):
    """The body id conflicts with the route id."""

    status_code = 400


class NotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404


class MethodNotAllowedError(DomainException):
    """The resource exists but does not support the requested action."""

    status_code = 405


class InternalError(DomainException):
    """Unexpected failure while handling a request."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
