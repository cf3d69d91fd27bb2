from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- User & Auth ---


class User(BaseModel):
    """Stored user. Holds the password hash only; plaintext never lives here."""

    id: str | None = None  # assigned by the repository on create
    username: str
    email: str
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=_utcnow)


class Token(BaseModel):
    value: str


class Claims(BaseModel):
    iss: str
    sub: str
    aud: str
    exp: int  # epoch milliseconds


# --- Links ---


class Link(BaseModel):
    id: str | None = None
    title: str
    href: str
    user_id: str
    created_at: datetime = Field(default_factory=_utcnow)
