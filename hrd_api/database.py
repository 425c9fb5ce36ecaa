"""
Database engine and session management
"""
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from hrd_api.config import settings

if settings.database_url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}  # SQLite only
else:
    connect_args = {}

# Connections are pooled and checked out per session
engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session scoped to a single request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all tables (and the SQLite data directory if needed)"""
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    # Register models on Base.metadata
    import hrd_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
