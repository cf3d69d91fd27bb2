"""
Credentials component - Port interfaces.

Adapters raise the errors declared here; the service translates them into
boundary errors.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from anchorly.domain.entities import Claims, Token, User


class UserRepoPort(Protocol):
    """Repository interface for users. Exceptions mean storage failure."""

    def create(self, user: User) -> User:
        """Persist a new user and return it with its assigned id."""
        ...

    def get_by_id(self, user_id: str) -> User | None: ...

    def get_by_email(self, email: str) -> User | None: ...


class PasswordHasherPort(Protocol):
    def hash(self, plain: str) -> str: ...

    def verify(self, hashed: str, plain: str) -> bool: ...


class TokenIssuerPort(Protocol):
    def issue(self, subject_id: str) -> Token: ...


class TokenVerifierPort(Protocol):
    def verify(self, token: str) -> Claims: ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


# --- Adapter errors ---


class PasswordHashingError(Exception):
    """Hashing backend failed, or a stored hash is malformed."""


class TokenSigningError(Exception):
    """A token could not be signed."""


class TokenError(Exception):
    """Token rejected during verification."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Token error: {reason}")


class MalformedTokenError(TokenError):
    def __init__(self) -> None:
        super().__init__("token could not be parsed")


class AlgorithmNotAllowedError(TokenError):
    """Header names an algorithm outside the HMAC family."""

    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__(f"signing algorithm {algorithm!r} is not allowed")


class InvalidSignatureError(TokenError):
    def __init__(self) -> None:
        super().__init__("signature verification failed")


class InvalidClaimsError(TokenError):
    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(f"claim {claim!r} is missing or invalid")


class TokenExpiredError(TokenError):
    def __init__(self, expired_at_ms: int) -> None:
        self.expired_at_ms = expired_at_ms
        super().__init__("token has expired")
