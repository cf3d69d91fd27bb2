from datetime import UTC, datetime, timedelta

import pytest

from anchorly.adapters.auth.passwords import Argon2PasswordHasher
from anchorly.config import Settings

TEST_SECRET = b"test-signing-secret"


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2025, 1, 1, 9, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def hasher() -> Argon2PasswordHasher:
    # Cheap parameters keep the suite fast; production uses the library defaults.
    return Argon2PasswordHasher(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.fixture
def settings() -> Settings:
    return Settings(token_key=TEST_SECRET, hash_time_cost=1, hash_memory_cost=1024)
