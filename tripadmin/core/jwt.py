"""JWT issue / verify utilities for personal access tokens"""
from datetime import datetime, timedelta
from typing import Dict, Any
import uuid

import jwt

from tripadmin.config import get_settings

settings = get_settings()


def new_token_id() -> str:
    return uuid.uuid4().hex


def _build_payload(subject: str, token_id: str, name: str, expires_minutes: int | None) -> Dict[str, Any]:
    now = datetime.utcnow()
    payload: Dict[str, Any] = {
        "sub": subject,
        "jti": token_id,
        "name": name,
        "iat": now,
    }
    if expires_minutes:
        payload["exp"] = now + timedelta(minutes=expires_minutes)
    return payload


def encode_token(subject: str, token_id: str, name: str, expires_minutes: int | None = None) -> str:
    payload = _build_payload(subject, token_id, name, expires_minutes)
    return jwt.encode(payload, settings.security.jwt_secret, algorithm=settings.security.jwt_algorithm)


def decode_token(token: str) -> Dict[str, Any] | None:
    try:
        return jwt.decode(
            token,
            settings.security.jwt_secret,
            algorithms=[settings.security.jwt_algorithm],
        )
    except jwt.PyJWTError:
        return None
