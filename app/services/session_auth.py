"""Signed session tokens carried in the ``token`` cookie."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi import Response

from app.config import settings
from app.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

COOKIE_NAME = "token"
ALGORITHM = "HS256"
_REGISTERED_CLAIMS = {"exp", "iat"}


class SessionAuthenticator:
    """Issues and verifies HS256 session tokens.

    Tokens expire a fixed ``ttl`` after issuance and are never renewed.
    Nothing is kept server side, so ``clear`` only asks the client to
    drop its cookie.
    """

    def __init__(self, secret: str, ttl: timedelta = timedelta(hours=24), secure_cookie: bool = False):
        self._secret = secret
        self._ttl = ttl
        self._secure_cookie = secure_cookie

    def issue(self, claims: dict[str, Any], now: datetime | None = None) -> str:
        if not claims.get("email"):
            raise ValueError("claims must include an email")
        issued_at = now or datetime.now(timezone.utc)
        payload = {**claims, "iat": issued_at, "exp": issued_at + self._ttl}
        logger.info("Issued session token for %s", claims["email"])
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> dict[str, Any]:
        if not token:
            raise AuthenticationError()
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.debug("Rejected expired session token")
            raise AuthenticationError() from e
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected invalid session token: %s", e)
            raise AuthenticationError() from e

        if not payload.get("email"):
            raise AuthenticationError()
        return {k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS}

    def _cookie_options(self) -> dict[str, Any]:
        return {
            "httponly": True,
            "secure": self._secure_cookie,
            "samesite": "none" if self._secure_cookie else "strict",
        }

    def attach(self, response: Response, token: str) -> None:
        response.set_cookie(COOKIE_NAME, token, **self._cookie_options())

    def clear(self, response: Response) -> None:
        response.delete_cookie(COOKIE_NAME, **self._cookie_options())


def get_authenticator() -> SessionAuthenticator:
    return SessionAuthenticator(
        secret=settings.access_token_secret,
        ttl=timedelta(hours=settings.token_ttl_hours),
        secure_cookie=settings.is_production,
    )
