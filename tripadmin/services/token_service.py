"""
Token Service - issues, revokes and checks personal access tokens
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tripadmin.config import get_settings
from tripadmin.core.jwt import decode_token, encode_token, new_token_id
from tripadmin.core.security import verify_password
from tripadmin.models.personal_access_token import PersonalAccessToken
from tripadmin.models.user import User

logger = logging.getLogger(__name__)


class TokenService:
    """Bearer tokens backed by ``personal_access_tokens`` rows"""

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    def create_token(self, user: User, name: str) -> Tuple[PersonalAccessToken, str]:
        """
        Issue a new token for a user

        Args:
            user: Token owner
            name: Label stored with the token

        Returns:
            The persisted token row and the signed bearer token
        """
        expires_minutes = self.settings.security.token_expires_minutes
        row = PersonalAccessToken(
            user_id=user.id,
            name=name,
            token_id=new_token_id(),
            expires_at=datetime.utcnow() + timedelta(minutes=expires_minutes) if expires_minutes else None,
        )
        self.db.add(row)
        self.db.flush()
        token = encode_token(str(user.id), row.token_id, name, expires_minutes=expires_minutes)
        logger.info(f"Issued token '{name}' for user {user.id}", extra={"user_id": user.id})
        return row, token

    def revoke_tokens(self, user: User) -> int:
        """Delete every token of a user; returns how many were removed"""
        result = self.db.execute(
            delete(PersonalAccessToken).where(PersonalAccessToken.user_id == user.id)
        )
        self.db.flush()
        self.db.expire(user, ["tokens"])
        logger.info(f"Revoked {result.rowcount} tokens for user {user.id}", extra={"user_id": user.id})
        return result.rowcount

    def revoke(self, token: str) -> bool:
        """Delete the row behind one bearer token"""
        payload = decode_token(token)
        if not payload or not payload.get("jti"):
            return False
        result = self.db.execute(
            delete(PersonalAccessToken).where(PersonalAccessToken.token_id == payload["jti"])
        )
        self.db.flush()
        return result.rowcount > 0

    def authenticate(self, token: str) -> Optional[User]:
        """
        Resolve a bearer token to its user

        Returns:
            The user, or None when the token is malformed, expired or revoked
        """
        payload = decode_token(token)
        if not payload or not payload.get("jti") or not payload.get("sub"):
            return None

        row = self.db.execute(
            select(PersonalAccessToken).where(PersonalAccessToken.token_id == payload["jti"])
        ).scalar_one_or_none()
        if row is None or str(row.user_id) != str(payload["sub"]):
            return None

        row.last_used_at = datetime.utcnow()
        self.db.commit()
        return row.user

    def login(self, email: str, password: str, name: str = "api-login") -> Optional[Tuple[User, str]]:
        """Check credentials and issue a fresh token"""
        user = self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()
        if user is None or not verify_password(password, user.hashed_password):
            logger.info("Rejected login", extra={"email": email})
            return None
        _, token = self.create_token(user, name)
        self.db.commit()
        return user, token
