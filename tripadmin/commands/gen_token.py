"""
Issue a bearer token for exercising the API from its documentation UI.

Every run revokes the previous tokens of the test user, so only the token
printed last is valid.

Usage: tripadmin-gen-token [--create-tables]
"""
import argparse
import logging
from datetime import datetime
from typing import Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from tripadmin.config import get_settings
from tripadmin.core.db import Base, db_session, engine
from tripadmin.core.logging import configure_logging
from tripadmin.core.security import hash_password
from tripadmin.models.user import User
from tripadmin.services.token_service import TokenService

logger = logging.getLogger(__name__)

TEST_USER_EMAIL = "test@example.com"
TEST_USER_NAME = "Test User"
TEST_USER_PASSWORD = "password"
TOKEN_NAME = "api-test-token"

RULE = "=" * 60


def issue_test_token(session: Session) -> Tuple[User, str]:
    """Find-or-create the test user, revoke its tokens and issue a new one."""
    user = session.execute(select(User).where(User.email == TEST_USER_EMAIL)).scalar_one_or_none()
    if user is None:
        user = User(
            name=TEST_USER_NAME,
            email=TEST_USER_EMAIL,
            hashed_password=hash_password(TEST_USER_PASSWORD),
            email_verified_at=datetime.utcnow(),
        )
        session.add(user)
        session.flush()
        logger.info(f"Created test user {TEST_USER_EMAIL}", extra={"user_id": user.id})

    service = TokenService(session)
    service.revoke_tokens(user)
    _, token = service.create_token(user, TOKEN_NAME)
    return user, token


def render_banner(email: str, password: str, token: str, docs_url: str) -> str:
    return "\n".join([
        RULE,
        "API TEST AUTHENTICATION CREDENTIALS",
        RULE,
        f"Email:        {email}",
        f"Password:     {password}",
        f"Bearer Token: {token}",
        RULE,
        "HOW TO USE IN SWAGGER:",
        f"1. Visit: {docs_url}",
        "2. Click the 'Authorize' button",
        f"3. Enter: Bearer {token}",
        "4. Click 'Authorize' then 'Close'",
        "5. Try any protected endpoint",
        RULE,
    ])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate an API test token for the documentation UI")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(level=settings.log_level.value, json_format=settings.log_json, fmt=settings.log_format)

    if args.create_tables:
        import tripadmin.models  # noqa: F401

        Base.metadata.create_all(bind=engine)

    with db_session() as session:
        user, token = issue_test_token(session)

    print(render_banner(user.email, TEST_USER_PASSWORD, token, settings.api_docs_url))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
