from argon2 import PasswordHasher
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from anchorly.components.credentials.ports import PasswordHashingError


class Argon2PasswordHasher:
    """Salted argon2id hashing. Cost parameters default to argon2-cffi's profile."""

    def __init__(
        self,
        time_cost: int | None = None,
        memory_cost: int | None = None,
        parallelism: int | None = None,
    ) -> None:
        params = {
            name: value
            for name, value in (
                ("time_cost", time_cost),
                ("memory_cost", memory_cost),
                ("parallelism", parallelism),
            )
            if value is not None
        }
        self.ph = PasswordHasher(**params)

    def hash(self, plain: str) -> str:
        try:
            return str(self.ph.hash(plain))
        except (HashingError, OSError, UnicodeError) as e:
            raise PasswordHashingError("password hashing failed") from e

    def verify(self, hashed: str, plain: str) -> bool:
        try:
            return bool(self.ph.verify(hashed, plain))
        except (VerifyMismatchError, UnicodeError):
            # Text that cannot be encoded was never hashed, so it cannot match.
            return False
        except (InvalidHashError, VerificationError) as e:
            raise PasswordHashingError("stored password hash is malformed") from e
