# File: storefront/services/user_store.py

"""
User store.

Lookups by id and email, create/update/remove, and the password check used
by /login. Passwords are hashed before they reach the database.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.exceptions import ValidationError
from storefront.core.security import hash_password, verify_password
from storefront.models.user import User
from storefront.schemas.user import UserCreate, UserUpdate
from storefront.services.base_store import BaseStore

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "This email has already been registered."


class UserStore(BaseStore):
    def __init__(self, db: Session, bcrypt_rounds: int = 12):
        super().__init__(db)
        self.bcrypt_rounds = bcrypt_rounds

    def find_all(self) -> List[User]:
        with self._guard("fetching users"):
            return list(self.db.scalars(select(User)))

    def find_one(self, user_id: str) -> Optional[User]:
        with self._guard("fetching the user"):
            return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        with self._guard("fetching the user"):
            return self.db.scalars(select(User).where(User.email == email)).first()

    def create(self, data: UserCreate) -> User:
        user = User(
            username=data.username,
            email=data.email,
            password=hash_password(data.password, self.bcrypt_rounds),
        )
        with self._guard("registering the user"):
            self.db.add(user)
            self._commit_unique_email()
            self.db.refresh(user)
        logger.info("User %s registered", user.id)
        return user

    def update(self, user_id: str, data: UserUpdate) -> Optional[User]:
        with self._guard("updating the user"):
            user = self.db.get(User, user_id)
            if user is None:
                return None
            user.username = data.username
            user.email = data.email
            user.password = hash_password(data.password, self.bcrypt_rounds)
            self._commit_unique_email()
            self.db.refresh(user)
        logger.info("User %s updated", user_id)
        return user

    def remove(self, user_id: str) -> bool:
        with self._guard("deleting the user"):
            user = self.db.get(User, user_id)
            if user is None:
                return False
            self.db.delete(user)
            self.db.commit()
        logger.info("User %s deleted", user_id)
        return True

    def compare_password(self, email: str, password: str) -> bool:
        user = self.find_by_email(email)
        if user is None:
            return False
        return verify_password(password, user.password)

    def _commit_unique_email(self) -> None:
        # The unique index settles races between two requests that both
        # passed the find_by_email check.
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ValidationError(DUPLICATE_EMAIL) from exc
