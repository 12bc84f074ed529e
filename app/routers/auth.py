from fastapi import APIRouter, Depends, Response

from app.schemas.auth import TokenRequest
from app.services.session_auth import SessionAuthenticator, get_authenticator

router = APIRouter(tags=["auth"])


@router.post("/jwt")
async def issue_token(
    request: TokenRequest,
    response: Response,
    authenticator: SessionAuthenticator = Depends(get_authenticator),
):
    token = authenticator.issue(request.model_dump())
    authenticator.attach(response, token)
    return {"success": True}


@router.post("/logout")
async def logout(response: Response, authenticator: SessionAuthenticator = Depends(get_authenticator)):
    authenticator.clear(response)
    return {"success": True}
