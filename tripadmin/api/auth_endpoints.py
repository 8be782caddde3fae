"""Authentication endpoints: personal access tokens for the admin API."""

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from tripadmin.core.db import get_db
from tripadmin.core.dependencies import bearer_scheme, get_current_user
from tripadmin.core.exceptions import AuthenticationError
from tripadmin.models.user import User
from tripadmin.schemas.base import Envelope, Message
from tripadmin.schemas.user import LoginRequest, Token, UserRead
from tripadmin.services.token_service import TokenService

router = APIRouter(prefix="/auth", tags=["auth"])


def _envelope(data=None, error: str | None = None, status: str = "ok"):
    return {"status": status, "data": data, "error": error}


@router.post("/login", response_model=Envelope)
def login_user(payload: LoginRequest, db: Session = Depends(get_db)):
    result = TokenService(db).login(payload.email, payload.password)
    if result is None:
        raise AuthenticationError("Invalid credentials")
    user, token = result
    return _envelope(data={"user": UserRead.model_validate(user), "token": Token(access_token=token)})


@router.get("/me", response_model=Envelope)
def read_current_user(user: User = Depends(get_current_user)):
    return _envelope(data={"user": UserRead.model_validate(user)})


@router.post("/logout", response_model=Envelope)
def logout_user(
    user: User = Depends(get_current_user),
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db),
):
    TokenService(db).revoke(credentials.credentials)
    db.commit()
    return _envelope(data=Message(message="Logged out"))
