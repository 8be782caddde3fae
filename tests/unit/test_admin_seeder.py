from sqlalchemy import select

from tripadmin.core.security import verify_password
from tripadmin.models import User
from tripadmin.seeders import ADMIN_EMAIL, AdminSeeder


def test_seeder_creates_verified_admin(db_session):
    user = AdminSeeder().run(db_session)
    db_session.commit()

    assert user.email == ADMIN_EMAIL == "admin@tripplanner.test"
    assert user.is_admin is True
    assert user.can_access_admin()
    assert user.email_verified_at is not None
    assert verify_password("password", user.hashed_password)


def test_seeder_is_idempotent(db_session):
    first = AdminSeeder().run(db_session)
    db_session.commit()
    second = AdminSeeder().run(db_session)
    db_session.commit()

    admins = db_session.execute(select(User).where(User.email == ADMIN_EMAIL)).scalars().all()
    assert len(admins) == 1
    assert first.id == second.id
