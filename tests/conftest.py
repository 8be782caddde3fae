"""
Shared fixtures: an in-memory SQLite database per test and a TestClient
whose ``get_db`` dependency hands out the same session as the test.
"""
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")

from datetime import date, datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import tripadmin.models  # noqa: E402,F401
from tripadmin.core.db import Base, get_db  # noqa: E402
from tripadmin.core.security import hash_password  # noqa: E402
from tripadmin.main import app  # noqa: E402
from tripadmin.models import Place, Trip, User  # noqa: E402
from tripadmin.services.token_service import TokenService  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_user(db_session, email: str, name: str, is_admin: bool) -> User:
    user = User(
        name=name,
        email=email,
        hashed_password=hash_password("password"),
        email_verified_at=datetime.utcnow(),
        is_admin=is_admin,
    )
    db_session.add(user)
    db_session.commit()
    return user


def _auth_headers(db_session, user: User) -> dict:
    _, token = TokenService(db_session).create_token(user, "test")
    db_session.commit()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_user(db_session):
    return _create_user(db_session, "traveler@example.com", "Traveler", is_admin=False)


@pytest.fixture
def admin_user(db_session):
    return _create_user(db_session, "admin@tripplanner.test", "Admin", is_admin=True)


@pytest.fixture
def admin_headers(db_session, admin_user):
    return _auth_headers(db_session, admin_user)


@pytest.fixture
def user_headers(db_session, test_user):
    return _auth_headers(db_session, test_user)


@pytest.fixture
def trip(db_session, test_user):
    trip = Trip(
        user_id=test_user.id,
        title="Spring in Kyoto",
        destination_country="Japan",
        destination_city="Kyoto",
        start_date=date(2026, 4, 1),
        end_date=date(2026, 4, 7),
    )
    db_session.add(trip)
    db_session.commit()
    return trip


@pytest.fixture
def place(db_session):
    place = Place(
        external_place_id="naver-1001",
        name="Fushimi Inari Taisha",
        address="68 Fukakusa Yabunouchicho, Kyoto",
        lat=34.9671,
        lng=135.7727,
        category="shrine",
    )
    db_session.add(place)
    db_session.commit()
    return place
