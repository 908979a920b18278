from fastapi import Depends, HTTPException, Cookie, Header, status
from typing import Optional
from uuid import UUID
import jwt
import os
import logging
from dotenv import load_dotenv #for .env files
from db import get_db
from sqlalchemy.orm import Session

from services.profiles import ensure_profile

load_dotenv()

logger = logging.getLogger(__name__)

# tokens are issued by the identity provider and signed with the project's shared secret
JWT_ALGORITHM = "HS256"
JWT_SECRET = os.getenv("SECRET_KEY", "your_default_jwt_secret_key")
JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "authenticated")


def get_current_user(authorization: Optional[str] = Header(None),
                     access_token_cookie: Optional[str] = Cookie(None),
                     refresh_token_cookie: Optional[str] = Cookie(None)) -> dict:
    #Determine which token to use:
    token_value = None
    if authorization:
        if authorization.startswith('Bearer '):
            token_value = authorization.split(' ', 1)[1]
        else:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail='Invalid authentication scheme in header'
            )
    elif access_token_cookie:
        token_value = access_token_cookie
    elif refresh_token_cookie:
        #The refresh token is exchanged by the client against the provider, not here.
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token expired.Please refresh"
        )
    else:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not Authenticated: No token provided"
        )
    try:
        payload = jwt.decode(token_value, JWT_SECRET, algorithms=[JWT_ALGORITHM], audience=JWT_AUDIENCE)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail='Access token expired.Please refresh.'
        )
    except jwt.InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Access Token"
        )

    sub = payload.get("sub")
    try:
        user_id = UUID(str(sub))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing UserId")
    return {"user_id": user_id, "email": payload.get("email")}


def get_current_profile_id(db: Session = Depends(get_db),
                           user: dict = Depends(get_current_user)) -> UUID:
    # profile normally exists since sign-up, but users created straight in the provider don't have one yet
    ensure_profile(db, user["user_id"])
    return user["user_id"]
