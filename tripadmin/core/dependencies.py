"""
FastAPI dependencies for bearer token authentication.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tripadmin.core.db import get_db
from tripadmin.core.exceptions import AuthenticationError, AuthorizationError
from tripadmin.models.user import User
from tripadmin.services.token_service import TokenService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError()
    user = TokenService(db).authenticate(credentials.credentials)
    if user is None:
        raise AuthenticationError("Invalid or revoked token")
    return user


def get_current_admin(user: User = Depends(get_current_user)) -> User:
    if not user.can_access_admin():
        raise AuthorizationError()
    return user
