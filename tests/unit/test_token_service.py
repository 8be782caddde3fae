from datetime import datetime

from tripadmin.core.jwt import decode_token, encode_token
from tripadmin.core.security import hash_password, verify_password
from tripadmin.services.token_service import TokenService


def test_password_hash_and_verify():
    raw = "SuperSecurePass123!"
    hashed = hash_password(raw)
    assert hashed != raw
    assert verify_password(raw, hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password(raw, "plain-text")


def test_issued_token_carries_subject_and_token_id(db_session, test_user):
    row, token = TokenService(db_session).create_token(test_user, "mobile")
    db_session.commit()

    payload = decode_token(token)
    assert payload["sub"] == str(test_user.id)
    assert payload["jti"] == row.token_id
    assert payload["name"] == "mobile"


def test_authenticate_touches_last_used(db_session, test_user):
    service = TokenService(db_session)
    row, token = service.create_token(test_user, "mobile")
    db_session.commit()
    assert row.last_used_at is None

    user = service.authenticate(token)

    assert user.id == test_user.id
    assert row.last_used_at is not None
    assert row.last_used_at <= datetime.utcnow()


def test_revoked_tokens_stop_working(db_session, test_user):
    service = TokenService(db_session)
    _, first = service.create_token(test_user, "a")
    _, second = service.create_token(test_user, "b")
    db_session.commit()

    assert service.revoke_tokens(test_user) == 2
    db_session.commit()

    assert service.authenticate(first) is None
    assert service.authenticate(second) is None


def test_forged_or_unknown_tokens_are_rejected(db_session, test_user):
    service = TokenService(db_session)

    assert service.authenticate("not-a-jwt") is None
    unknown = encode_token(str(test_user.id), "0" * 32, "ghost")
    assert service.authenticate(unknown) is None


def test_login_checks_password(db_session, test_user):
    service = TokenService(db_session)

    assert service.login(test_user.email, "wrong") is None
    user, token = service.login(test_user.email, "password")
    assert user.id == test_user.id
    assert service.authenticate(token).id == test_user.id
