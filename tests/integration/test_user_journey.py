"""
End-to-end journey through the credential core with real adapters:
argon2 hashing, JWT tokens and SQLite storage.
"""

from dataclasses import replace
from datetime import timedelta

import pytest

from anchorly.components.credentials import CreateUserInput, CredentialService, LoginInput
from anchorly.components.credentials.ports import TokenExpiredError
from anchorly.components.links import CreateLinkInput, LinkService
from anchorly.context import ServiceContext
from anchorly.domain.errors import BadRequestError, PermissionDeniedError


@pytest.fixture
def ctx(tmp_path, settings, clock):
    return ServiceContext.create(replace(settings, data_dir=tmp_path), clock=clock)


def test_create_login_authenticate_expire(ctx, clock):
    service: CredentialService = ctx.credentials

    user = service.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password="longpassword1")
    )
    assert user.password_hash != "longpassword1"

    with pytest.raises(PermissionDeniedError):
        service.login(LoginInput(email="a@example.com", password="wrong"))

    token = service.login(LoginInput(email="a@example.com", password="longpassword1"))
    assert token.value

    assert service.authenticate(token.value).sub == user.id

    clock.advance(timedelta(hours=3, seconds=1))
    with pytest.raises(PermissionDeniedError) as exc_info:
        service.authenticate(token.value)
    assert isinstance(exc_info.value.__cause__, TokenExpiredError)


def test_unknown_email_is_bad_request(ctx):
    with pytest.raises(BadRequestError):
        ctx.credentials.login(LoginInput(email="ghost@example.com", password="longpassword1"))


def test_links_for_existing_user(ctx):
    links: LinkService = ctx.links
    owner = ctx.credentials.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password="longpassword1")
    )

    link = links.create(
        CreateLinkInput(title="Python docs", href="https://docs.python.org", user_id=owner.id)
    )

    assert links.get_by_id(link.id) == link


def test_state_survives_new_context(ctx, clock):
    ctx.credentials.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password="longpassword1")
    )

    reopened = ServiceContext.create(ctx.settings, clock=clock)

    token = reopened.credentials.login(LoginInput(email="a@example.com", password="longpassword1"))
    assert reopened.credentials.authenticate(token.value)
