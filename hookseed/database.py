from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from hookseed.config import get_settings
from hookseed.errors import StorageError
from hookseed.models import Base


def make_engine(database_url: str | None = None) -> Engine:
    url = database_url or get_settings().database_url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(engine: Engine) -> None:
    """
    Create the webhooks table if it does not exist yet.

    Raises StorageError if the database cannot be reached.
    """
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        raise StorageError(f"Cannot initialize database {engine.url!r}: {exc}") from exc


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session from the app's session factory."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
