import pytest
from fastapi.testclient import TestClient

from bookshelf.db.init_db import init_db
from bookshelf.db.session import build_engine, build_sessionmaker, get_db
from bookshelf.main import app as bookshelf_app

TEST_USER = {
    "name": "Test User",
    "email": "test@example.com",
    "password": "password123",
}


@pytest.fixture
def engine(tmp_path):
    # Her test için ayrı bir SQLite dosyası
    engine = build_engine(f"sqlite:///{tmp_path / 'bookshelf_test.db'}")
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = build_sessionmaker(engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(engine):
    TestingSession = build_sessionmaker(engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    bookshelf_app.dependency_overrides[get_db] = override_get_db
    try:
        yield bookshelf_app
    finally:
        bookshelf_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def authenticate(app):
    """Register + log in a user on a fresh client; the client keeps the cookie."""

    def _authenticate(user=None):
        user = user or TEST_USER
        client = TestClient(app)
        client.post("/users/register", json=user)
        response = client.post(
            "/session",
            json={"email": user["email"], "password": user["password"]},
        )
        assert response.status_code == 200
        return client, response.json()

    return _authenticate
