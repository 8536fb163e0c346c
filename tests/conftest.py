import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from starlette.testclient import TestClient

from hookseed.main import create_app
from hookseed.models import Base
from hookseed.randomness import RandomSource

FIXED_NOW = 1_760_000_000


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh in-memory SQLite DB per test."""
    engine = create_engine(
        f"sqlite:///file:testdb_{uuid.uuid4().hex}?mode=memory&cache=shared&uri=true",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Raw DB session for direct inspection."""
    db = session_factory()
    yield db
    db.close()


@pytest.fixture(scope="function")
def app(session_factory):
    """FastAPI app bound to the per-test database."""
    yield create_app(session_factory=session_factory, random_seed=7)


@pytest.fixture(scope="function")
def client(app):
    """HTTP test client."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture(scope="function")
def source():
    """Seeded random source with a frozen clock."""
    return RandomSource(seed=1234, clock=lambda: FIXED_NOW)


@pytest.fixture
def context():
    return {}
