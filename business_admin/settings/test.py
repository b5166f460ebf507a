from dj_database_url import parse as db_url

from .base import *


SECRET_KEY = "test"  # nosec

DATABASES = {
    "default": db_url("sqlite://:memory:"),
}

# Speed up password hashing
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

RECURRENCE_DEFAULT_MAX_INSTANCES = 100
RECURRENCE_MAX_GENERATED_INSTANCES = 1000
RECURRENCE_STRICT_RULES = False
