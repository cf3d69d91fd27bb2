"""
Field validation rules.

A rule is a callable returning ``None`` when the value passes and a short
reason when it fails. ``validate`` applies rules in order and stops at the
first failure. Empty values are only rejected by ``required``; the other
rules skip them. Nothing in this module raises for bad input.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlparse
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

Rule = Callable[[object], str | None]

USERNAME_LENGTH = (4, 250)
PASSWORD_LENGTH = (8, 500)
TITLE_LENGTH = (4, 250)


@dataclass(frozen=True)
class FieldError:
    """First failed rule for a field."""

    field: str
    message: str
    reason: str


def _is_empty(value: object) -> bool:
    return value is None or value == ""


# --- Rules ---


def required(value: object) -> str | None:
    if _is_empty(value):
        return "cannot be blank"
    return None


def length(min_len: int, max_len: int) -> Rule:
    """Length in characters, inclusive on both ends."""

    def rule(value: object) -> str | None:
        if _is_empty(value):
            return None
        size = len(str(value))
        if size < min_len or size > max_len:
            return f"the length must be between {min_len} and {max_len}"
        return None

    return rule


def is_utf8(value: object) -> str | None:
    """Text that can be stored and hashed, so no lone surrogates."""
    if _is_empty(value):
        return None
    try:
        str(value).encode("utf-8")
    except UnicodeEncodeError:
        return "must be valid UTF-8 text"
    return None


def is_email(value: object) -> str | None:
    if _is_empty(value):
        return None
    try:
        validate_email(str(value), check_deliverability=False)
    except EmailNotValidError:
        return "must be a valid email address"
    return None


def is_url(value: object) -> str | None:
    if _is_empty(value):
        return None
    text = str(value)
    if any(ch.isspace() for ch in text):
        return "must be a valid URL"
    try:
        parsed = urlparse(text)
    except ValueError:
        return "must be a valid URL"
    if not parsed.scheme or not parsed.netloc:
        return "must be a valid URL"
    return None


def is_uuid(value: object) -> str | None:
    """Canonical hyphenated UUID, any version."""
    if _is_empty(value):
        return None
    text = str(value)
    try:
        parsed = UUID(text)
    except ValueError:
        return "must be a valid UUID"
    if str(parsed) != text.lower():
        return "must be a valid UUID"
    return None


# --- Runner ---


def validate(
    field: str, value: object, *rules: Rule, message: str | None = None
) -> FieldError | None:
    for rule in rules:
        reason = rule(value)
        if reason is not None:
            return FieldError(field=field, message=message or f"{field} is invalid", reason=reason)
    return None


def validate_new_user(username: str, email: str, password: str) -> FieldError | None:
    """Check username, email and plaintext password in that order."""
    return (
        validate("username", username, required, is_utf8, length(*USERNAME_LENGTH))
        or validate("email", email, required, is_email)
        or validate("password", password, required, is_utf8, length(*PASSWORD_LENGTH))
    )


def validate_new_link(title: str, href: str, user_id: str) -> FieldError | None:
    """Check title, href and owning user reference in that order."""
    return (
        validate("title", title, required, is_utf8, length(*TITLE_LENGTH))
        or validate("href", href, required, is_utf8, is_url)
        or validate("user", user_id, required, is_uuid, message="user is required")
    )
