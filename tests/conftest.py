"""
Shared fixtures: a temporary SQLite database and theme tree per test.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.config import Settings, get_settings
from app.database import get_db, init_db, make_engine
from app.dependencies import get_themes
from app.main import app
from app.themes import ThemeRegistry, load_themes

PNG_ZERO = b"\x89PNG\r\n\x1a\nzero"
PNG_ONE = b"\x89PNG\r\n\x1a\none"
PNG_TWO = b"\x89PNG\r\n\x1a\ntwo"

API_TOKEN = "s3cret"


def write_theme(root: Path, name: str, files: dict) -> Path:
    theme_dir = root / name
    theme_dir.mkdir(parents=True)
    for filename, data in files.items():
        (theme_dir / filename).write_bytes(data)
    return theme_dir


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'db' / 'count.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def theme_root(tmp_path) -> Path:
    root = tmp_path / "theme"
    write_theme(root, "moebooru", {"0.png": PNG_ZERO, "1.png": PNG_ONE})
    write_theme(root, "plain", {"0.gif": PNG_ZERO, "2.gif": PNG_TWO})
    return root


@pytest.fixture
def themes(theme_root) -> ThemeRegistry:
    return load_themes(str(theme_root))


@pytest.fixture
def settings() -> Settings:
    return Settings(default_theme="moebooru", api_auth_token=API_TOKEN)


@pytest.fixture
def client(session_factory, themes, settings):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_themes] = lambda: themes
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
