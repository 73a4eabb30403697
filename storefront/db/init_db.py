"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from typing import Optional

from sqlalchemy.engine import Engine

from storefront.db.session import engine as default_engine
from storefront.models.base import Base
from storefront.models import product, user  # noqa: F401


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine or default_engine)
