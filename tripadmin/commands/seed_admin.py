"""
Seed the admin panel user.

Usage: tripadmin-seed [--create-tables]
"""
import argparse
import logging

from tripadmin.config import get_settings
from tripadmin.core.db import Base, db_session, engine
from tripadmin.core.logging import configure_logging
from tripadmin.seeders import AdminSeeder

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the admin panel user if it does not exist")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (development databases without migrations)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(level=settings.log_level.value, json_format=settings.log_json, fmt=settings.log_format)

    if args.create_tables:
        import tripadmin.models  # noqa: F401

        Base.metadata.create_all(bind=engine)

    seeder = AdminSeeder()
    with db_session() as session:
        user = seeder.run(session)
        logger.info(f"Admin panel login: {user.email}", extra={"user_id": user.id})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
