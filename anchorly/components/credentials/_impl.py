"""
CredentialService - account creation, login and token authentication.

Functional Core - orchestrates validation, hashing, storage and tokens
behind ports. Every failure leaves as a CredentialError subclass; the
lower-level exception is chained for logs and never shown to callers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from anchorly.domain.entities import Claims, Token, User
from anchorly.domain.errors import (
    BadRequestError,
    CredentialError,
    InternalError,
    ObjectNotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from anchorly.domain.validation import validate_new_user

from .models import CreateUserInput, LoginInput
from .ports import (
    PasswordHasherPort,
    PasswordHashingError,
    TimePort,
    TokenError,
    TokenIssuerPort,
    TokenSigningError,
    TokenVerifierPort,
    UserRepoPort,
)

if TYPE_CHECKING:
    from anchorly.config import Settings

logger = logging.getLogger(__name__)


class CredentialService:
    """
    Stateless credential orchestrator.

    Constructed once per process. The signing secret lives inside the token
    issuer and verifier, which refuse to build without one.
    """

    def __init__(
        self,
        user_repo: UserRepoPort,
        hasher: PasswordHasherPort,
        token_issuer: TokenIssuerPort,
        token_verifier: TokenVerifierPort,
    ) -> None:
        self._users = user_repo
        self._hasher = hasher
        self._issuer = token_issuer
        self._verifier = token_verifier

    @classmethod
    def from_settings(
        cls, settings: Settings, user_repo: UserRepoPort, clock: TimePort
    ) -> CredentialService:
        """Wire the argon2 hasher and JWT issuer/verifier from configuration."""
        from anchorly.adapters.auth.passwords import Argon2PasswordHasher
        from anchorly.adapters.auth.tokens import JWTTokenIssuer, JWTTokenVerifier

        return cls(
            user_repo=user_repo,
            hasher=Argon2PasswordHasher(
                time_cost=settings.hash_time_cost,
                memory_cost=settings.hash_memory_cost,
            ),
            token_issuer=JWTTokenIssuer(
                settings.token_key,
                clock,
                issuer=settings.token_issuer,
                lifetime=settings.token_lifetime,
            ),
            token_verifier=JWTTokenVerifier(
                settings.token_key, clock, issuer=settings.token_issuer
            ),
        )

    # --- Accounts ---

    def create_user(self, inp: CreateUserInput) -> User:
        error = validate_new_user(inp.username, inp.email, inp.password)
        if error:
            raise ValidationError(error.field, error.message)

        try:
            password_hash = self._hasher.hash(inp.password)
        except PasswordHashingError as e:
            logger.warning("Password hashing failed during user creation", exc_info=True)
            raise InternalError() from e

        try:
            created = self._users.create(
                User(username=inp.username, email=inp.email, password_hash=password_hash)
            )
        except Exception as e:
            logger.warning("User repository create failed", exc_info=True)
            raise InternalError() from e

        logger.info("Created user %s", created.id)
        return created

    def get_by_id(self, user_id: str) -> User:
        try:
            user = self._users.get_by_id(user_id)
        except Exception as e:
            logger.warning("User lookup by id failed", exc_info=True)
            raise InternalError() from e
        if user is None:
            raise ObjectNotFoundError()
        return user

    def get_by_email(self, email: str) -> User:
        try:
            user = self._users.get_by_email(email)
        except Exception as e:
            logger.warning("User lookup by email failed", exc_info=True)
            raise InternalError() from e
        if user is None:
            raise ObjectNotFoundError()
        return user

    def exists(self, user_id: str) -> bool:
        """True only when a lookup by id succeeds."""
        try:
            self.get_by_id(user_id)
        except CredentialError:
            return False
        return True

    # --- Sessions ---

    def login(self, inp: LoginInput) -> Token:
        try:
            user = self.get_by_email(inp.email)
        except ObjectNotFoundError as e:
            # Unknown email is reported as bad_request, never not_found.
            raise BadRequestError() from e

        try:
            matches = self._hasher.verify(user.password_hash, inp.password)
        except PasswordHashingError as e:
            logger.warning("Stored password hash for user %s is unusable", user.id, exc_info=True)
            raise InternalError() from e
        if not matches:
            raise PermissionDeniedError()

        try:
            token = self._issuer.issue(user.id or "")
        except TokenSigningError as e:
            logger.warning("Token signing failed for user %s", user.id, exc_info=True)
            raise InternalError() from e

        logger.info("User %s logged in", user.id)
        return token

    def authenticate(self, token: str) -> Claims:
        """Verify a session token and return its claims."""
        try:
            return self._verifier.verify(token)
        except TokenError as e:
            logger.debug("Token rejected: %s", e.reason)
            raise PermissionDeniedError() from e

    def current_user(self, token: str) -> User:
        """Authenticate, then load the token's subject."""
        claims = self.authenticate(token)
        try:
            return self.get_by_id(claims.sub)
        except ObjectNotFoundError as e:
            raise PermissionDeniedError() from e
