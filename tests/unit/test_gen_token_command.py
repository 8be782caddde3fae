"""
Unit tests for the API test token command
"""
from sqlalchemy import select

from tripadmin.commands.gen_token import (
    TEST_USER_EMAIL,
    TOKEN_NAME,
    issue_test_token,
    render_banner,
)
from tripadmin.models import PersonalAccessToken, User
from tripadmin.services.token_service import TokenService


def _tokens(db_session, user):
    return db_session.execute(
        select(PersonalAccessToken).where(PersonalAccessToken.user_id == user.id)
    ).scalars().all()


def test_creates_test_user_and_token(db_session):
    user, token = issue_test_token(db_session)
    db_session.commit()

    assert user.email == TEST_USER_EMAIL
    assert user.name == "Test User"
    assert user.is_admin is False
    rows = _tokens(db_session, user)
    assert [row.name for row in rows] == [TOKEN_NAME]
    assert TokenService(db_session).authenticate(token).id == user.id


def test_each_run_revokes_previous_tokens(db_session):
    user, first = issue_test_token(db_session)
    db_session.commit()
    same_user, second = issue_test_token(db_session)
    db_session.commit()

    assert same_user.id == user.id
    assert first != second
    assert len(_tokens(db_session, user)) == 1
    assert TokenService(db_session).authenticate(first) is None
    assert TokenService(db_session).authenticate(second).id == user.id

    users = db_session.execute(select(User).where(User.email == TEST_USER_EMAIL)).scalars().all()
    assert len(users) == 1


def test_banner_explains_swagger_usage():
    banner = render_banner("test@example.com", "password", "abc.def.ghi", "http://localhost:8000/docs")

    assert "API TEST AUTHENTICATION CREDENTIALS" in banner
    assert "Email:        test@example.com" in banner
    assert "Bearer Token: abc.def.ghi" in banner
    assert "1. Visit: http://localhost:8000/docs" in banner
    assert "3. Enter: Bearer abc.def.ghi" in banner
