"""
Credentials component - Shell functions.

Run the service and fold boundary errors into output models.
"""

from __future__ import annotations

from anchorly.domain.errors import CredentialError

from ._impl import CredentialService
from .models import (
    AuthenticateInput,
    AuthOutput,
    CreateUserInput,
    GetUserInput,
    LoginInput,
    LoginOutput,
    UserOutput,
)


def run_create_user(inp: CreateUserInput, service: CredentialService) -> UserOutput:
    try:
        user = service.create_user(inp)
    except CredentialError as e:
        return UserOutput(success=False, error=e.message, error_kind=e.kind)
    return UserOutput(user=user, success=True)


def run_login(inp: LoginInput, service: CredentialService) -> LoginOutput:
    try:
        token = service.login(inp)
    except CredentialError as e:
        return LoginOutput(success=False, error=e.message, error_kind=e.kind)
    return LoginOutput(token=token, success=True)


def run_authenticate(inp: AuthenticateInput, service: CredentialService) -> AuthOutput:
    try:
        claims = service.authenticate(inp.token)
    except CredentialError as e:
        return AuthOutput(success=False, error=e.message, error_kind=e.kind)
    return AuthOutput(claims=claims, success=True)


def run_get_user(inp: GetUserInput, service: CredentialService) -> UserOutput:
    try:
        user = service.get_by_id(inp.user_id)
    except CredentialError as e:
        return UserOutput(success=False, error=e.message, error_kind=e.kind)
    return UserOutput(user=user, success=True)
