import os

from decouple import config  # type: ignore
from dj_database_url import parse as db_url


BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def base_dir_join(*args):
    return os.path.join(BASE_DIR, *args)


DEBUG = True

ADMINS = (("Admin", "foo@example.com"),)

AUTH_USER_MODEL = "users.User"

ALLOWED_HOSTS: list[str] = []

DATABASES = {
    "default": config(
        "DATABASE_URL", default=f"sqlite:///{base_dir_join('db.sqlite3')}", cast=db_url
    ),
}
INTERNAL_INSTALLED_APPS = [
    "di_core",
    "common",
    "users",
    "organizations",
    "calendar_events",
]
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django_guid",
    *INTERNAL_INSTALLED_APPS,
]

# Modules whose @inject markers are resolved by the DI container
DI_WIRED_PACKAGES = [
    "calendar_events.services",
]

MIDDLEWARE = [
    "django_guid.middleware.guid_middleware",
]

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

# Recurrence
RECURRENCE_DEFAULT_MAX_INSTANCES = config("RECURRENCE_DEFAULT_MAX_INSTANCES", cast=int, default=100)
RECURRENCE_MAX_GENERATED_INSTANCES = config(
    "RECURRENCE_MAX_GENERATED_INSTANCES", cast=int, default=1000
)
RECURRENCE_STRICT_RULES = config("RECURRENCE_STRICT_RULES", cast=bool, default=False)

# Sentry
SENTRY_DSN = config("SENTRY_DSN", default="")
COMMIT_SHA = config("RENDER_GIT_COMMIT", default="")
