"""
Shared fixtures for the users test suite.

Storage-backed tests run against an in-memory SQLite engine.
The API client swaps the repository dependency for one bound to
that engine; the app lifespan (which targets the configured
database) is never started.
"""

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.database import create_db_engine, init_database
from app.infrastructure.users.user_repository import SqlUserRepository
from app.interfaces.users.dependencies import get_user_repository
from app.main import app
from app.shared.security.rate_limiting import limiter


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", echo=False)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def user_repo(engine) -> SqlUserRepository:
    return SqlUserRepository(engine=engine)


@pytest.fixture
def client(user_repo):
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Every test starts with a fresh request budget for the test client."""
    limiter.reset()
    yield
    limiter.reset()
