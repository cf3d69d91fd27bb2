"""
Credentials component - Account creation, login and session tokens.
"""

from ._impl import CredentialService
from .component import (
    run_authenticate,
    run_create_user,
    run_get_user,
    run_login,
)
from .models import (
    AuthenticateInput,
    AuthOutput,
    CreateUserInput,
    GetUserInput,
    LoginInput,
    LoginOutput,
    UserOutput,
)
from .ports import (
    PasswordHasherPort,
    TimePort,
    TokenIssuerPort,
    TokenVerifierPort,
    UserRepoPort,
)

__all__ = [
    # Service
    "CredentialService",
    # Entry points
    "run_authenticate",
    "run_create_user",
    "run_get_user",
    "run_login",
    # Models
    "AuthenticateInput",
    "AuthOutput",
    "CreateUserInput",
    "GetUserInput",
    "LoginInput",
    "LoginOutput",
    "UserOutput",
    # Ports
    "PasswordHasherPort",
    "TimePort",
    "TokenIssuerPort",
    "TokenVerifierPort",
    "UserRepoPort",
]
