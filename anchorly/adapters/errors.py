class StorageError(Exception):
    """Base class for repository adapter errors."""


class DuplicateKeyError(StorageError):
    """Raised when a unique key (id or email) is already taken."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate key: {key}")
