# database.py
from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from jobly.config import build_sqlalchemy_db_url, is_sqlite_url, settings
from jobly.db.executor import Database


def _build_connect_args(db_url: str) -> dict:
    if is_sqlite_url(db_url):
        return {"check_same_thread": False}
    return {}


def mask_db_url(db_url: str) -> str:
    try:
        return str(make_url(db_url).set(password="***"))
    except Exception:
        return db_url


def build_engine(db_url: str) -> Engine:
    new_engine = create_engine(db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(db_url))
    if is_sqlite_url(db_url):
        # sqlite ignores REFERENCES clauses unless asked per connection.
        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


_db_url = build_sqlalchemy_db_url(settings)
engine = build_engine(_db_url)
try:
    import logging

    logging.getLogger("uvicorn.error").info("SQLAlchemy db_url=%s", mask_db_url(_db_url))
except Exception:
    # Avoid failing import on logging edge-cases.
    pass
Base = declarative_base()
db = Database(engine)


def get_db() -> Generator[Database, None, None]:
    yield db
