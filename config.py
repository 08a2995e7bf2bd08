#!/usr/bin/env python
# config.py
import os
from typing import List

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load environment variables from .env file
load_dotenv()

# This assumes config.py is at the root of your project
basedir = os.path.abspath(os.path.dirname(__file__))

# Connection target is fixed; only the credentials come from the environment
DB_HOST = '127.0.0.1'
DB_PORT = 3306
DB_NAME = 'recordings'


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def build_database_uri(user, password) -> str:
    """MySQL URI for the recordings database, credentials escaped by SQLAlchemy."""
    url = URL.create(
        'mysql+pymysql',
        username=user,
        password=password,
        host=DB_HOST,
        port=DB_PORT,
        database=DB_NAME,
    )
    return url.render_as_string(hide_password=False)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'recordings-dev-secret'

    # Database credentials (required unless DATABASE_URL overrides the target)
    DB_USER = os.environ.get('DBUSER')
    DB_PASSWORD = os.environ.get('DBPASS')
    DATABASE_URL = os.environ.get('DATABASE_URL')

    SQLALCHEMY_DATABASE_URI = DATABASE_URL or build_database_uri(DB_USER, DB_PASSWORD)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # HTTP listener
    HTTP_HOST = os.getenv('HTTP_HOST', '0.0.0.0')
    HTTP_PORT = _get_int('HTTP_PORT', 8080)

    # Runtime behavior
    DEBUG = _get_bool('DEBUG', False)
    # Control console logging; when disabled, logs go only to file
    ENABLE_CONSOLE_LOGS = _get_bool('ENABLE_CONSOLE_LOGS', False)
    LOG_DIR = os.getenv('LOG_DIR') or os.path.join(basedir, 'src', 'log')

    @classmethod
    def missing_credentials(cls) -> List[str]:
        if cls.DATABASE_URL:
            return []
        missing = []
        if not cls.DB_USER:
            missing.append('DBUSER')
        if not cls.DB_PASSWORD:
            missing.append('DBPASS')
        return missing
