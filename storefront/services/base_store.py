# File: storefront/services/base_store.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from storefront.core.exceptions import AppError, StoreError

logger = logging.getLogger(__name__)


class BaseStore:
    """
    Shared plumbing for the record stores: one session per request and a
    single place where database failures become ``StoreError``.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except AppError:
            raise
        except Exception as exc:
            # Driver errors such as OverflowError are not wrapped by SQLAlchemy.
            self.db.rollback()
            logger.exception("Store failure while %s", action)
            raise StoreError(f"An error occurred while {action}.", detail=str(exc)) from exc
