# auth.py (router)
import logging
import os
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Cookie, Depends, Header, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from dependencies import get_current_user
from errors import AuthError
from identity import IdentityClient, get_identity_client
from schemas.auth import AuthResult, LoginIn, SignUpIn
from services.profiles import ensure_profile

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth")

COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() in ("true", "1", "yes")
ACCESS_COOKIE = "access_token_cookie"
REFRESH_COOKIE = "refresh_token_cookie"


def _user_out(user: dict) -> dict:
    return {"id": str(user.get("id")), "email": user.get("email")}


def _clear_cookies(response: Response) -> None:
    response.delete_cookie(ACCESS_COOKIE)
    response.delete_cookie(REFRESH_COOKIE)


@router.post("/signup", response_model=AuthResult)
def sign_up(
    payload: SignUpIn,
    db: Session = Depends(get_db),
    identity: IdentityClient = Depends(get_identity_client),
):
    user = identity.sign_up(payload.email, payload.password)
    # profile shares the provider's user id
    ensure_profile(db, UUID(str(user["id"])))
    logger.info("Signed up %s", user["id"])
    return {"success": True, "message": "Account created successfully", "user": _user_out(user)}


@router.post("/login", response_model=AuthResult)
def login(
    payload: LoginIn,
    response: Response,
    identity: IdentityClient = Depends(get_identity_client),
):
    session = identity.sign_in(payload.email, payload.password)
    max_age = session.get("expires_in")
    response.set_cookie(ACCESS_COOKIE, session["access_token"], max_age=max_age,
                        httponly=True, secure=COOKIE_SECURE, samesite="lax")
    if session.get("refresh_token"):
        response.set_cookie(REFRESH_COOKIE, session["refresh_token"],
                            httponly=True, secure=COOKIE_SECURE, samesite="lax")
    return {"success": True, "user": _user_out(session.get("user") or {})}


@router.post("/logout", response_model=AuthResult)
def logout(
    response: Response,
    authorization: Optional[str] = Header(None),
    access_token_cookie: Optional[str] = Cookie(None),
    identity: IdentityClient = Depends(get_identity_client),
):
    token = None
    if authorization and authorization.startswith("Bearer "):
        token = authorization.split(" ", 1)[1]
    elif access_token_cookie:
        token = access_token_cookie
    if token:
        try:
            identity.sign_out(token)
        except AuthError as exc:
            # provider refused the token; still drop our cookies, then report it
            logger.warning("Provider rejected sign-out: %s", exc.message)
            failed = JSONResponse(status_code=exc.status_code, content=exc.to_dict())
            _clear_cookies(failed)
            return failed
    _clear_cookies(response)
    return {"success": True}


@router.get("/session", response_model=AuthResult)
def get_session(user: dict = Depends(get_current_user)):
    return {"success": True, "user": {"id": str(user["user_id"]), "email": user["email"]}}
