from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    # SQLite ignores REFERENCES clauses unless the pragma is set per connection
    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine

def build_engine(url: str, **kwargs) -> Engine:
    # check_same_thread is needed for SQLite, remove for PostgreSQL
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        return enable_sqlite_foreign_keys(create_engine(url, **kwargs))
    return create_engine(url, **kwargs)

engine = build_engine(settings.DATABASE_URL)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables():
    SQLModel.metadata.create_all(engine)
