"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single problem with one input field, e.g. ``items[0].quantity``."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    Optionally carries the individual field errors that caused it, so a
    caller validating a whole payload gets every problem at once.
    """

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors: list[FieldError] = list(errors or [])

    @classmethod
    def from_field_errors(cls, errors: list[FieldError]) -> ValidationError:
        summary = ", ".join(str(e) for e in errors)
        return cls(f"Validation failed: {summary}", errors)


class InvalidTransitionError(ValidationError):
    """A status change that the workflow does not allow."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
