"""In-memory repository adapters.

Suitable for tests and single-process dev runs. Stored models are copied on
the way in and out so callers never share a mutable instance with the store.
"""

from uuid import uuid4

from anchorly.adapters.errors import DuplicateKeyError
from anchorly.domain.entities import Link, User


class InMemoryUserRepo:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._by_email: dict[str, str] = {}  # email -> user_id

    def create(self, user: User) -> User:
        if user.email in self._by_email:
            raise DuplicateKeyError(user.email)
        user_id = user.id or str(uuid4())
        if user_id in self._users:
            raise DuplicateKeyError(user_id)

        stored = user.model_copy(update={"id": user_id})
        self._users[user_id] = stored
        self._by_email[stored.email] = user_id
        return stored.model_copy()

    def get_by_id(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_by_email(self, email: str) -> User | None:
        user_id = self._by_email.get(email)
        if user_id is None:
            return None
        return self._users[user_id].model_copy()

    def clear(self) -> None:
        """Remove all users - useful for testing."""
        self._users.clear()
        self._by_email.clear()


class InMemoryLinkRepo:
    def __init__(self) -> None:
        self._links: dict[str, Link] = {}

    def create(self, link: Link) -> Link:
        link_id = link.id or str(uuid4())
        if link_id in self._links:
            raise DuplicateKeyError(link_id)
        stored = link.model_copy(update={"id": link_id})
        self._links[link_id] = stored
        return stored.model_copy()

    def get_by_id(self, link_id: str) -> Link | None:
        link = self._links.get(link_id)
        return link.model_copy() if link else None
