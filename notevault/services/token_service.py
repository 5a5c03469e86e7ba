"""
NoteVault Backend — JWT Token Issuer
====================================

What:  Issues and verifies signed access tokens (JWT, HMAC).
How:   python-jose encodes the claims {sub, email, iat, exp} with the
       configured secret and algorithm; decoding checks the signature and
       the expiry. Any failure becomes an AuthError (401).
Who:   AuthService (issue) and the access guard (verify).

Token claims:
    sub:    user id as a string (JWT requires a string subject)
    email:  email at the time of issue
    iat:    issued-at timestamp
    exp:    expiry timestamp = iat + JWT_TOKEN_LIFE seconds
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from notevault.config import settings
from notevault.exceptions import AuthError
from notevault.services.auth_base import TokenClaims, TokenIssuer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Could not validate credentials"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JWTTokenIssuer(TokenIssuer):
    """
    HMAC-signed JWT implementation of TokenIssuer.

    Args:
        secret: Signing secret (JWT_TOKEN_SECRET)
        lifetime_seconds: Validity window of each token (JWT_TOKEN_LIFE)
        algorithm: HS256 / HS384 / HS512
        clock: Source of "now"; injectable for tests
    """

    def __init__(
        self,
        secret: str,
        lifetime_seconds: int,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._secret = secret
        self.lifetime_seconds = lifetime_seconds
        self.algorithm = algorithm
        self._clock = clock or _utcnow

    def issue(self, user_id: int, email: str) -> str:
        issued_at = self._clock()
        claims = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.lifetime_seconds),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Raises:
            AuthError (401): bad signature, malformed token, missing or
                non-numeric subject, missing email, or expired token.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.info("Rejected expired access token")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE, context={"reason": "expired"})
        except JWTError as e:
            logger.info("Rejected invalid access token: %s", type(e).__name__)
            raise AuthError(INVALID_CREDENTIALS_MESSAGE, context={"reason": "invalid"})

        try:
            user_id = int(payload["sub"])
            email = str(payload["email"])
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        except (KeyError, TypeError, ValueError):
            raise AuthError(INVALID_CREDENTIALS_MESSAGE, context={"reason": "malformed_claims"})

        return TokenClaims(user_id=user_id, email=email, expires_at=expires_at)


# ── Singleton Instance ────────────────────────────────────────────────────
token_issuer = JWTTokenIssuer(
    secret=settings.jwt_token_secret,
    lifetime_seconds=settings.jwt_token_life,
    algorithm=settings.jwt_algorithm,
)
