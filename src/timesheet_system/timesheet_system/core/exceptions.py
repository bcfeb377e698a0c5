from __future__ import annotations

from typing import Mapping


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeError(ValidationError):
    """Raised when a clock time component is non-numeric or out of range."""


class FormValidationError(ValidationError):
    """Raised when one or more form fields fail validation.

    `errors` maps the field name to a user-facing message.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""
