from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from erp_bridge.config import settings


def build_engine(database_url: str, **kwargs):
    """Create an engine; SQLite connections get FK enforcement so cascades apply."""
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    new_engine = create_engine(database_url, echo=settings.database_echo, **kwargs)

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session for one request and close it afterwards"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
