import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or os.urandom(32).hex()
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", f"sqlite:///{BASE_DIR / 'parish.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Saint calendar limits
    UPCOMING_FEASTS_DEFAULT_DAYS = int(os.environ.get("UPCOMING_FEASTS_DEFAULT_DAYS", "9"))
    UPCOMING_FEASTS_MAX_DAYS = int(os.environ.get("UPCOMING_FEASTS_MAX_DAYS", "366"))
    MAX_FEAST_RANGE_DAYS = int(os.environ.get("MAX_FEAST_RANGE_DAYS", "366"))

    # Color overrides
    OVERRIDES_PAGE_SIZE = int(os.environ.get("OVERRIDES_PAGE_SIZE", "20"))
    OVERRIDES_MAX_PAGE_SIZE = 100

    # Security
    MAX_FAILED_LOGINS = int(os.environ.get("MAX_FAILED_LOGINS", "5"))
    ACCOUNT_LOCKOUT_MINUTES = int(os.environ.get("ACCOUNT_LOCKOUT_MINUTES", "15"))

    # Rate limiting
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "200 per hour")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")

    # Session
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_SAMESITE = "Lax"
    PERMANENT_SESSION_LIFETIME = 3600 * 8  # 8 hours

    # Scheduler
    SCHEDULER_ENABLED = os.environ.get("SCHEDULER_ENABLED", "true").lower() == "true"
    SCHEDULER_COLOR_REFRESH_HOUR = int(os.environ.get("SCHEDULER_COLOR_REFRESH_HOUR", "0"))
    SCHEDULER_MAX_CONSECUTIVE_FAILURES = int(os.environ.get("SCHEDULER_MAX_CONSECUTIVE_FAILURES", "3"))


class DevelopmentConfig(Config):
    DEBUG = True

    @classmethod
    def init_app(cls, app):
        if not os.environ.get("SECRET_KEY"):
            app.logger.warning("SECRET_KEY not set; using an ephemeral key. Sessions will not survive restarts.")


class ProductionConfig(Config):
    DEBUG = False
    SESSION_COOKIE_SECURE = True

    @classmethod
    def init_app(cls, app):
        secret_key = os.environ.get("SECRET_KEY", "").strip()
        if not secret_key:
            raise RuntimeError("SECRET_KEY environment variable must be set in production")
        if len(secret_key) < 32:
            raise RuntimeError(
                "SECRET_KEY is too short for production (minimum 32 characters). "
                'Generate one with: python -c "import secrets; print(secrets.token_hex(32))"'
            )
        lowered_secret = secret_key.lower()
        weak_markers = ("changeme", "change-this", "replace", "secret", "example", "default")
        if any(marker in lowered_secret for marker in weak_markers):
            raise RuntimeError(
                "SECRET_KEY appears to be a placeholder and is not allowed in production. "
                'Generate one with: python -c "import secrets; print(secrets.token_hex(32))"'
            )

        hour = int(os.environ.get("SCHEDULER_COLOR_REFRESH_HOUR", "0"))
        if not 0 <= hour <= 23:
            raise RuntimeError("SCHEDULER_COLOR_REFRESH_HOUR must be between 0 and 23.")

        # The color refresh job and the rate limiter live in-process; more
        # than one worker would duplicate the job and split rate-limit counters.
        web_concurrency = os.environ.get("WEB_CONCURRENCY")
        if web_concurrency:
            try:
                worker_count = int(web_concurrency)
            except ValueError as exc:
                raise RuntimeError("WEB_CONCURRENCY must be an integer when set.") from exc
            if worker_count <= 0:
                raise RuntimeError("WEB_CONCURRENCY must be at least 1 when set.")
        else:
            worker_count = 1

        if worker_count > 1:
            raise RuntimeError(
                f"WEB_CONCURRENCY is set to {web_concurrency} but this application "
                "requires a single worker (in-process scheduler + in-memory rate limiting). "
                "Set WEB_CONCURRENCY=1 or remove it."
            )


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    SCHEDULER_ENABLED = False
    SERVER_NAME = "localhost"
    SECRET_KEY = "testing-secret-key"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
