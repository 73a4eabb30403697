from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from storefront.core.config import get_settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for ``url``.

    SQLite connections are shared with FastAPI's worker threads, and an
    in-memory SQLite database only lives as long as its single connection.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


engine = build_engine(get_settings().database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ----------------------------------------------------
# DB Session Dependency
# ----------------------------------------------------
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
