"""
Links component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from anchorly.domain.entities import Link


class LinkRepoPort(Protocol):
    """Repository interface for links."""

    def create(self, link: Link) -> Link:
        """Persist a new link and return it with its assigned id."""
        ...

    def get_by_id(self, link_id: str) -> Link | None: ...


class UserLookupPort(Protocol):
    """Answers whether a user id refers to an existing user."""

    def exists(self, user_id: str) -> bool: ...
