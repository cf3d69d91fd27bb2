"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from anchorly.domain.entities import Link
from anchorly.domain.errors import ErrorKind

# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    title: str
    href: str
    user_id: str


@dataclass(frozen=True)
class GetLinkInput:
    """Input for getting a link."""

    link_id: str


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link operation."""

    link: Link | None
    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
