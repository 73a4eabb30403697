# File: storefront/api/deps.py

from fastapi import Depends
from sqlalchemy.orm import Session

from storefront.core.config import Settings, get_settings
from storefront.db.session import get_db
from storefront.services.product_store import ProductStore
from storefront.services.user_store import UserStore


def get_user_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserStore:
    """
    FastAPI dependency that provides a UserStore bound to the request session.

    Usage in route functions:
        store: UserStore = Depends(get_user_store)
    """
    return UserStore(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_product_store(db: Session = Depends(get_db)) -> ProductStore:
    return ProductStore(db)
