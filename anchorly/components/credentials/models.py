"""
Credentials component - Data models.

Plaintext passwords only appear on input models. Outputs carry the stored
``User`` (hash only) or a token.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from anchorly.domain.entities import Claims, Token, User
from anchorly.domain.errors import ErrorKind

# --- Input Models ---


@dataclass(frozen=True)
class CreateUserInput:
    """New account request. ``password`` is plaintext."""

    username: str
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class LoginInput:
    """Login credentials. Never persisted."""

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class AuthenticateInput:
    token: str = field(repr=False)


@dataclass(frozen=True)
class GetUserInput:
    user_id: str


# --- Output Models ---


@dataclass(frozen=True)
class UserOutput:
    user: User | None = None
    success: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None


@dataclass(frozen=True)
class LoginOutput:
    token: Token | None = None
    success: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None


@dataclass(frozen=True)
class AuthOutput:
    claims: Claims | None = None
    success: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None
