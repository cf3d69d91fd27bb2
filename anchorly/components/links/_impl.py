"""
LinkService - Bookmarked link creation and lookup.

Functional Core - validates fields in a fixed order, then hands off to the
repository port.
"""

from __future__ import annotations

import logging

from anchorly.domain.entities import Link
from anchorly.domain.errors import InternalError, ObjectNotFoundError, ValidationError
from anchorly.domain.validation import validate_new_link

from .models import CreateLinkInput
from .ports import LinkRepoPort, UserLookupPort

logger = logging.getLogger(__name__)


class LinkService:
    def __init__(self, repo: LinkRepoPort, users: UserLookupPort) -> None:
        self._repo = repo
        self._users = users

    def create(self, inp: CreateLinkInput) -> Link:
        """
        Create a link owned by an existing user.

        Raises:
            ValidationError: title, href or user reference rejected.
            InternalError: the repository failed.
        """
        error = validate_new_link(inp.title, inp.href, inp.user_id)
        if error:
            raise ValidationError(error.field, error.message)
        if not self._users.exists(inp.user_id):
            raise ValidationError("user", "user is required")

        try:
            created = self._repo.create(Link(title=inp.title, href=inp.href, user_id=inp.user_id))
        except Exception as e:
            logger.warning("Link repository create failed", exc_info=True)
            raise InternalError() from e

        logger.info("Created link %s for user %s", created.id, created.user_id)
        return created

    def get_by_id(self, link_id: str) -> Link:
        try:
            link = self._repo.get_by_id(link_id)
        except Exception as e:
            logger.warning("Link lookup failed", exc_info=True)
            raise InternalError() from e
        if link is None:
            raise ObjectNotFoundError()
        return link
