# File: storefront/models/base.py

import uuid

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.
    """
    pass


class IdMixin:
    """
    Store-assigned string id. Set once on insert and never updated.
    """

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
