# config.py

import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.pool import QueuePool

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")


def normalize_database_url(uri: str) -> str:
    # Normalize to psycopg v3 driver
    if uri.startswith("postgres://"):
        uri = uri.replace("postgres://", "postgresql+psycopg://", 1)
    elif uri.startswith("postgresql://") and not uri.startswith("postgresql+psycopg://"):
        uri = uri.replace("postgresql://", "postgresql+psycopg://", 1)
    return uri


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = normalize_database_url(os.getenv("DATABASE_URL", "sqlite:///local.db"))
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
    AUTO_CREATE_TABLES = True

    ENV_NAME = "default"
    HOST = os.getenv("HOST", "localhost")
    PORT = int(os.getenv("PORT", 3001))
    VERCEL_URL = os.getenv("VERCEL_URL")

    PUBLIC_FOLDER = os.getenv("PUBLIC_FOLDER", str(BASE_DIR / "public"))
    UPLOAD_SUBDIR = "uploads"
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10mb JSON bodies (inline images)

    DEFAULT_AUTHOR_NAME = os.getenv("DEFAULT_AUTHOR_NAME", "Misbakhul Munir")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def init_app(app):
        pass


class DevelopmentConfig(Config):
    ENV_NAME = "development"
    DEBUG = True


class ProductionConfig(Config):
    ENV_NAME = "production"
    DEBUG = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 280,
        "pool_size": 5,
        "max_overflow": 10,
        "poolclass": QueuePool
    }


class TestingConfig(Config):
    ENV_NAME = "testing"
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    VERCEL_URL = None
    HOST = "localhost"
    PORT = 3001
    LOG_LEVEL = "DEBUG"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig
}


def current_config_name() -> str:
    name = os.getenv("APP_ENV") or os.getenv("FLASK_ENV") or "default"
    return name if name in config else "default"
