"""
Session tokens: JWT compact serialization signed with an HMAC algorithm.

Tokens are stateless, so validity is the signature plus ``exp``. ``exp`` is
written in epoch milliseconds, which jose would misread as seconds, so
claim checks run here against the injected clock instead of inside jose.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JOSEError

from anchorly.components.credentials.ports import (
    AlgorithmNotAllowedError,
    InvalidClaimsError,
    InvalidSignatureError,
    MalformedTokenError,
    TimePort,
    TokenExpiredError,
    TokenSigningError,
)
from anchorly.domain.entities import Claims, Token
from anchorly.domain.errors import ConfigurationError

ALGORITHM = "HS256"
HMAC_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})
DEFAULT_ISSUER = "anchorly.com"
DEFAULT_LIFETIME = timedelta(hours=3)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# jose only checks the signature; claims are checked by JWTTokenVerifier.
_DECODE_OPTIONS = {
    "verify_signature": True,
    "verify_aud": False,
    "verify_iat": False,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


def epoch_ms(moment: datetime) -> int:
    """Whole milliseconds since the Unix epoch for an aware datetime."""
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def _require_secret(secret: bytes) -> bytes:
    if not secret:
        raise ConfigurationError("token signing secret must not be empty")
    return bytes(secret)


class JWTTokenIssuer:
    def __init__(
        self,
        secret: bytes,
        clock: TimePort,
        *,
        issuer: str = DEFAULT_ISSUER,
        lifetime: timedelta = DEFAULT_LIFETIME,
        algorithm: str = ALGORITHM,
    ) -> None:
        if not isinstance(algorithm, str) or algorithm not in HMAC_ALGORITHMS:
            raise ConfigurationError(f"unsupported signing algorithm: {algorithm}")
        if lifetime <= timedelta(0):
            raise ConfigurationError("token lifetime must be positive")
        self._secret = _require_secret(secret)
        self._clock = clock
        self._issuer = issuer
        self._lifetime = lifetime
        self._algorithm = algorithm

    def issue(self, subject_id: str) -> Token:
        if not subject_id:
            raise TokenSigningError("token subject must not be empty")

        expires_at = self._clock.now_utc() + self._lifetime
        claims: dict[str, Any] = {
            "iss": self._issuer,
            "sub": subject_id,
            "aud": subject_id,
            "exp": epoch_ms(expires_at),
        }
        try:
            value: str = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except JOSEError as e:
            raise TokenSigningError("token signing failed") from e
        return Token(value=value)


class JWTTokenVerifier:
    """
    Verify a token: parse, algorithm check, signature, claims, expiry.

    Each step stops at the first failure with a TokenError subclass.
    """

    def __init__(self, secret: bytes, clock: TimePort, *, issuer: str = DEFAULT_ISSUER) -> None:
        self._secret = _require_secret(secret)
        self._clock = clock
        self._issuer = issuer

    def verify(self, token: str) -> Claims:
        if not isinstance(token, str) or not token:
            raise MalformedTokenError()
        try:
            header = jwt.get_unverified_header(token)
        except JOSEError as e:
            raise MalformedTokenError() from e

        # Only the HMAC family may be used with the shared secret.
        algorithm = header.get("alg")
        if not isinstance(algorithm, str) or algorithm not in HMAC_ALGORITHMS:
            raise AlgorithmNotAllowedError(algorithm)

        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[algorithm], options=_DECODE_OPTIONS
            )
        except JOSEError as e:
            raise InvalidSignatureError() from e

        claims = self._check_claims(payload)
        if epoch_ms(self._clock.now_utc()) >= claims.exp:
            raise TokenExpiredError(claims.exp)
        return claims

    def _check_claims(self, payload: dict[str, Any]) -> Claims:
        exp = payload.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, int | float) or not math.isfinite(exp):
            raise InvalidClaimsError("exp")
        if payload.get("iss") != self._issuer:
            raise InvalidClaimsError("iss")
        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise InvalidClaimsError("sub")
        aud = payload.get("aud")
        if aud != sub:
            raise InvalidClaimsError("aud")
        return Claims(iss=self._issuer, sub=sub, aud=sub, exp=int(exp))
