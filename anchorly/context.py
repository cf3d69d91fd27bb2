from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from anchorly.adapters.clock import SystemClock
from anchorly.adapters.memory import InMemoryLinkRepo, InMemoryUserRepo
from anchorly.adapters.sqlite.migrator import SQLiteMigrator
from anchorly.adapters.sqlite.repos import SQLiteLinkRepo, SQLiteUserRepo
from anchorly.components.credentials import CredentialService, TimePort, UserRepoPort
from anchorly.components.links import LinkRepoPort, LinkService
from anchorly.config import Settings


@dataclass
class ServiceContext:
    """Process-wide wiring of adapters and services. Built once at startup."""

    settings: Settings
    credentials: CredentialService
    links: LinkService
    user_repo: UserRepoPort
    link_repo: LinkRepoPort
    clock: TimePort

    @classmethod
    def create(cls, settings: Settings, clock: TimePort | None = None) -> ServiceContext:
        clock = clock or SystemClock()

        user_repo: UserRepoPort
        link_repo: LinkRepoPort
        db_path = settings.db_path
        if db_path is not None:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            SQLiteMigrator(db_path).run_migrations()
            user_repo = SQLiteUserRepo(db_path)
            link_repo = SQLiteLinkRepo(db_path)
        else:
            user_repo = InMemoryUserRepo()
            link_repo = InMemoryLinkRepo()

        credentials = CredentialService.from_settings(settings, user_repo, clock)
        links = LinkService(repo=link_repo, users=credentials)

        return cls(
            settings=settings,
            credentials=credentials,
            links=links,
            user_repo=user_repo,
            link_repo=link_repo,
            clock=clock,
        )
