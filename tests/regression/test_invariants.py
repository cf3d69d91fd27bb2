"""
Security invariants that must hold across the credential core.
"""

import base64
import json
from datetime import timedelta

import pytest
from jose import jwt

from anchorly.adapters.auth.tokens import JWTTokenIssuer, JWTTokenVerifier, epoch_ms
from anchorly.adapters.memory import InMemoryUserRepo
from anchorly.components.credentials import (
    CreateUserInput,
    CredentialService,
    LoginInput,
    run_create_user,
    run_login,
)
from anchorly.components.credentials.ports import AlgorithmNotAllowedError
from anchorly.domain.errors import PermissionDeniedError, ValidationError

SECRET = b"regression-secret"
PASSWORD = "longpassword1"


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


@pytest.fixture
def service(hasher, clock):
    return CredentialService(
        user_repo=InMemoryUserRepo(),
        hasher=hasher,
        token_issuer=JWTTokenIssuer(SECRET, clock),
        token_verifier=JWTTokenVerifier(SECRET, clock),
    )


def test_plaintext_password_never_stored_or_returned(service):
    user = service.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password=PASSWORD)
    )

    assert PASSWORD not in user.password_hash
    assert PASSWORD not in repr(user)
    assert PASSWORD not in repr(CreateUserInput("alice01", "a@example.com", PASSWORD))


def test_expiry_is_issue_time_plus_lifetime(service, clock):
    service.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password=PASSWORD)
    )
    issued_at = clock.now_utc()

    token = service.login(LoginInput(email="a@example.com", password=PASSWORD))

    assert service.authenticate(token.value).exp == epoch_ms(issued_at + timedelta(hours=3))


@pytest.mark.parametrize("alg", ["none", "RS256", "ES256"])
def test_non_hmac_algorithms_rejected_before_signature(clock, alg):
    token = f"{_b64({'alg': alg, 'typ': 'JWT'})}.{_b64({'sub': 'x'})}.sig"

    with pytest.raises(AlgorithmNotAllowedError):
        JWTTokenVerifier(SECRET, clock).verify(token)


def test_forged_token_denied(service):
    user = service.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password=PASSWORD)
    )
    claims = {"iss": "anchorly.com", "sub": user.id, "aud": user.id, "exp": 2**62}
    forged = jwt.encode(
        claims,
        b"attacker-secret",
        algorithm="HS256",
    )

    with pytest.raises(PermissionDeniedError):
        service.authenticate(forged)


def test_failures_expose_only_fixed_messages(service):
    run_create_user(
        CreateUserInput(username="alice01", email="a@example.com", password=PASSWORD), service
    )

    wrong = run_login(LoginInput(email="a@example.com", password="wrong-password"), service)
    unknown = run_login(LoginInput(email="ghost@example.com", password=PASSWORD), service)

    assert (wrong.error, wrong.error_kind) == ("permission denied", "permission_denied")
    assert (unknown.error, unknown.error_kind) == ("bad request", "bad_request")
    assert wrong.token is None
    assert unknown.token is None


def test_unencodable_password_rejected_on_create(service):
    with pytest.raises(ValidationError) as exc_info:
        service.create_user(
            CreateUserInput(username="alice01", email="a@example.com", password="longpass\ud800")
        )

    assert exc_info.value.field == "password"
    assert exc_info.value.message == "password is invalid"


def test_unencodable_password_denied_on_login(service):
    service.create_user(
        CreateUserInput(username="alice01", email="a@example.com", password=PASSWORD)
    )

    with pytest.raises(PermissionDeniedError):
        service.login(LoginInput(email="a@example.com", password="\ud800"))

    result = run_login(LoginInput(email="a@example.com", password="longpass\ud800"), service)
    assert (result.success, result.error_kind) == (False, "permission_denied")
