"""
Error kinds raised at the service boundary.

Messages are fixed strings so storage and crypto details never reach a
caller. When a failure wraps a lower-level exception it is chained with
``raise ... from exc`` and stays available as ``__cause__`` for logs.
"""

from __future__ import annotations

from typing import Literal

ErrorKind = Literal["validation", "bad_request", "permission_denied", "not_found", "internal"]


class CredentialError(Exception):
    """Base error for the credential and link services."""

    kind: ErrorKind = "internal"
    default_message = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CredentialError):
    """Input failed a declared field rule."""

    kind: ErrorKind = "validation"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is invalid")


class BadRequestError(CredentialError):
    """Login against an unknown email. Deliberately generic."""

    kind: ErrorKind = "bad_request"
    default_message = "bad request"


class PermissionDeniedError(CredentialError):
    """Wrong password, or a token that is invalid, expired or wrongly signed."""

    kind: ErrorKind = "permission_denied"
    default_message = "permission denied"


class ObjectNotFoundError(CredentialError):
    kind: ErrorKind = "not_found"
    default_message = "object not found"


class InternalError(CredentialError):
    """Hashing, signing or storage failure not attributable to the caller."""

    kind: ErrorKind = "internal"
    default_message = "internal server error"


class ConfigurationError(Exception):
    """Required configuration is missing or invalid; the process must not start."""
