# proclubs/test_settings.py
from .settings import *  # noqa: F401,F403
from .config import ServiceConfig

PROCLUBS = ServiceConfig(
    secret_key="test-secret-key",
    debug=False,
    db_engine="django.db.backends.sqlite3",
    db_name=":memory:",
    jwt_secret="test-jwt-secret-with-enough-bytes-for-hs256",
    ea_api_url="https://ea.test/api",
    discord_report_channel_id=1234,
)

SECRET_KEY = PROCLUBS.secret_key
DEBUG = False

DATABASES = {
    "default": PROCLUBS.database,
}

# hachage rapide pour les tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
