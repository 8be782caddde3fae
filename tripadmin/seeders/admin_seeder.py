"""
Seeds the admin panel account.
"""
import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from tripadmin.core.security import hash_password
from tripadmin.models.user import User

logger = logging.getLogger(__name__)

ADMIN_NAME = "Admin"
ADMIN_EMAIL = "admin@tripplanner.test"
ADMIN_PASSWORD = "password"


class AdminSeeder:
    """Find-or-create the admin user; running it again changes nothing."""

    def __init__(self, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD, name: str = ADMIN_NAME):
        self.email = email
        self.password = password
        self.name = name

    def run(self, session: Session) -> User:
        user = session.execute(select(User).where(User.email == self.email)).scalar_one_or_none()
        if user is not None:
            logger.info(f"Admin user {self.email} already exists", extra={"user_id": user.id})
            return user

        user = User(
            name=self.name,
            email=self.email,
            hashed_password=hash_password(self.password),
            email_verified_at=datetime.utcnow(),
            is_admin=True,
        )
        session.add(user)
        session.flush()
        logger.info(f"Created admin user {self.email}", extra={"user_id": user.id})
        return user
