from typing import Dict, List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.requests import Request

from tests.helpers import TEST_BOOKS, Author, Base, Book
from transmit.config import TestingSettings, get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Settings must not pick up the developer's environment
    for name in (
        "APP_ENV",
        "APP_NAME",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_JSON_FORMAT",
        "DEFAULT_PER_PAGE",
        "INCLUDE_KEY",
        "PAGE_KEY",
        "INCLUDE_RECURSION_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def books() -> List[Dict]:
    """Fresh copies of the sample books."""
    return [dict(book) for book in TEST_BOOKS]


@pytest.fixture
def settings() -> TestingSettings:
    return TestingSettings()


@pytest.fixture
def make_request():
    """Build a bare Starlette request without running an app."""

    def _make_request(
        query_string: str = "",
        headers: Optional[Dict[str, str]] = None,
        path: str = "/books",
    ) -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (key.lower().encode(), value.encode())
                for key, value in (headers or {}).items()
            ],
        }
        return Request(scope)

    return _make_request


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session with two authors and five books."""
    session = session_factory()

    pratchett = Author(id=1, name="Terry Pratchett")
    dick = Author(id=2, name="Philip K Dick")
    session.add_all([pratchett, dick])
    session.add_all(
        [
            Book(id=1, title="Hogfather", year=1996, created_at="2020-01-01", author=pratchett),
            Book(id=2, title="Mort", year=1987, created_at="2020-01-03", author=pratchett),
            Book(id=3, title="Small Gods", year=1992, created_at="2020-01-02", author=pratchett),
            Book(id=4, title="Ubik", year=1969, created_at="2020-01-05", author=dick),
            Book(id=5, title="Valis", year=1981, created_at="2020-01-04", author=dick),
        ]
    )
    session.commit()

    yield session
    session.close()
