"""
Test settings - Use SQLite for faster tests.
"""

from config.settings import *

# Use SQLite for testing
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",  # In-memory database for speed
    }
}


# Disable migrations for faster test database creation
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

# Speed up password hashing in tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

DEBUG = False

JWT_SECRET = "test-jwt-secret"
ADMIN_CREATION_KEY = "test-admin-key"

# Smaller images keep QR generation fast
QR_BOX_SIZE = 2
QR_BORDER = 1
