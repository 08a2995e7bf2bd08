import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'app', 'config', and 'src' import correctly
_TESTS_DIR = os.path.dirname(__file__)
_ROOT_DIR = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from tests.support import factories as test_factories


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path_factory):
    """Ensure a clean env for tests with per-test sqlite files."""
    db_dir = tmp_path_factory.mktemp("db")
    db_path = Path(db_dir) / "test.sqlite"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path.as_posix()}")
    monkeypatch.setenv("DBUSER", "test-user")
    monkeypatch.setenv("DBPASS", "test-pass")
    yield


@pytest.fixture
def database_uri():
    return os.environ["DATABASE_URL"]


@pytest.fixture
def app(database_uri):
    import app as app_module
    from src.database.db_manager import create_tables

    application = app_module.create_app(
        {"SQLALCHEMY_DATABASE_URI": database_uri, "TESTING": True}
    )
    # The runtime never creates schema; tests stand in for the external DBA
    create_tables(application)
    yield application


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture
def db_session(app_context):
    from src.database.db_manager import db

    test_factories.set_session(db.session)
    try:
        yield db.session
    finally:
        db.session.rollback()
        db.session.remove()
        test_factories.reset_session()


@pytest.fixture
def factories(db_session):
    yield test_factories


@pytest.fixture
def repository(app_context):
    return app_context.extensions["album_repository"]


@pytest.fixture
def client(app):
    return app.test_client()
