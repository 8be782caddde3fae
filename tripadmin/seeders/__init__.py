from .admin_seeder import ADMIN_EMAIL, ADMIN_PASSWORD, AdminSeeder

__all__ = ["AdminSeeder", "ADMIN_EMAIL", "ADMIN_PASSWORD"]
