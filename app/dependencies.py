from fastapi import Cookie, Depends

from app.services.session_auth import COOKIE_NAME, SessionAuthenticator, get_authenticator
from app.utils.exceptions import AuthorizationError


async def get_session_claims(
    token: str | None = Cookie(default=None, alias=COOKIE_NAME),
    authenticator: SessionAuthenticator = Depends(get_authenticator),
) -> dict:
    return authenticator.verify(token)


async def require_path_owner(email: str, claims: dict = Depends(get_session_claims)) -> dict:
    """Allow the request only when the session email equals the ``{email}`` path segment."""
    if claims.get("email") != email:
        raise AuthorizationError()
    return claims
