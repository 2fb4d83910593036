"""Token Issuer — exchanges the static API key for a signed, time-limited bearer token.

Invariants:
    - issue() succeeds iff the presented key equals the configured secret, byte for byte
    - An empty configured secret rejects every key
    - An empty signing secret disables tokens entirely: issue() and verify() both refuse
    - Tokens carry only sub/iat/exp: one credential tier, no per-user claims
    - verify() rejects bad signature, malformed, expired or foreign-subject tokens
      with the same UnauthorizedError (caller cannot tell which)
    - Nothing stored server-side (stateless verification)

Design Decisions:
    - PyJWT HS256 over hand-rolled HMAC tokens: standard claims and expiry checks
    - hmac.compare_digest on UTF-8 bytes: exact equality without timing leak
"""

import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from app.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedToken:
    """Bearer token plus its lifetime in seconds."""
    access_token: str
    expires_in: int
    token_type: str = "bearer"


class TokenIssuer:
    """Validates the API key and signs/verifies JWT bearer tokens."""

    def __init__(
        self,
        api_key: str,
        signing_secret: str,
        algorithm: str = "HS256",
        expires_in_seconds: int = 3600,
        subject: str = "figma-copy-updater",
    ):
        self._api_key = api_key
        self._signing_secret = signing_secret
        self._algorithm = algorithm
        self._expires_in = expires_in_seconds
        self._subject = subject

    def issue(self, presented_key: str) -> IssuedToken:
        """Sign a token for a matching key, else raise UnauthorizedError."""
        if not self._signing_secret:
            logger.warning("Token request rejected: signing secret not configured")
            raise UnauthorizedError("Invalid API key")
        if not self._key_matches(presented_key):
            logger.warning("Token request rejected: invalid API key")
            raise UnauthorizedError("Invalid API key")
        now = datetime.now(timezone.utc)
        payload = {
            "sub": self._subject,
            "iat": now,
            "exp": now + timedelta(seconds=self._expires_in),
        }
        token = jwt.encode(payload, self._signing_secret, algorithm=self._algorithm)
        return IssuedToken(access_token=token, expires_in=self._expires_in)

    def verify(self, token: str) -> dict:
        """Decode and validate a bearer token. Returns its claims."""
        if not self._signing_secret:
            logger.warning("Bearer token rejected: signing secret not configured")
            raise UnauthorizedError("Invalid or expired token")
        try:
            claims = jwt.decode(
                token,
                self._signing_secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.InvalidTokenError as e:
            logger.info(f"Bearer token rejected: {e}")
            raise UnauthorizedError("Invalid or expired token") from e
        if claims.get("sub") != self._subject:
            logger.info("Bearer token rejected: unexpected subject")
            raise UnauthorizedError("Invalid or expired token")
        return claims

    def _key_matches(self, presented_key: str | None) -> bool:
        if not self._api_key or presented_key is None:
            return False
        return hmac.compare_digest(
            presented_key.encode("utf-8"), self._api_key.encode("utf-8"),
        )
