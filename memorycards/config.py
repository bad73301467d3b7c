"""
Configuration classes, selected by name in create_app().
"""
import os
from datetime import timedelta


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-only-change-me"

    # Relative SQLite paths resolve inside the instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL") or "sqlite:///memorycards.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # ── Sessions (Flask-Session) ─────────────────────────────────────────────
    SESSION_TYPE = os.environ.get("SESSION_TYPE", "sqlalchemy")  # sqlalchemy | cachelib
    SESSION_SQLALCHEMY_TABLE = "sessions"
    SESSION_CLEANUP_N_REQUESTS = int(os.environ.get("SESSION_CLEANUP_N_REQUESTS", "100"))
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(
        hours=int(os.environ.get("SESSION_LIFETIME_HOURS", "12"))
    )
    SESSION_COOKIE_NAME = "session"
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = False

    # ── Forms / CSRF ─────────────────────────────────────────────────────────
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = None  # token lives as long as the session

    # ── Rate limiting (login / signup) ───────────────────────────────────────
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    AUTH_RATE_LIMIT = "10 per minute"

    # ── Logging ──────────────────────────────────────────────────────────────
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")  # unset = console only

    # ── Security headers ─────────────────────────────────────────────────────
    TALISMAN_ENABLED = _env_flag("TALISMAN_ENABLED")
    TALISMAN_CONFIG = {
        "force_https": False,
        "content_security_policy": {"default-src": "'self'"},
    }


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SESSION_TYPE = "cachelib"
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    LOG_LEVEL = "WARNING"
    TALISMAN_ENABLED = False


class ProductionConfig(Config):
    SESSION_COOKIE_SECURE = True
    TALISMAN_ENABLED = _env_flag("TALISMAN_ENABLED", "true")
    TALISMAN_CONFIG = {
        "force_https": True,
        "content_security_policy": {"default-src": "'self'"},
    }


config = {
    "development": DevelopmentConfig,
    "testing":     TestingConfig,
    "production":  ProductionConfig,
    "default":     DevelopmentConfig,
}
