# File: storefront/api/routes_users.py

from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_user_store
from storefront.core.exceptions import NotFoundError, ValidationError
from storefront.schemas.user import (
    LoginResponse,
    MessageResponse,
    NewUserResponse,
    UpdatedUserResponse,
    UserCreate,
    UserLogin,
    UserRead,
    UserResponse,
    UserUpdate,
)
from storefront.services.user_store import DUPLICATE_EMAIL, UserStore

router = APIRouter(tags=["users"])


@router.get("/users", response_model=List[UserRead], summary="List users")
def list_users(store: UserStore = Depends(get_user_store)):
    users = store.find_all()
    if not users:
        raise NotFoundError("No users found at this time.", key="msg")
    return users


@router.get("/user/{user_id}", response_model=UserResponse, summary="Get a user")
def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
    user = store.find_one(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return {"user": user}


@router.post(
    "/register",
    response_model=NewUserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
def register(payload: UserCreate, store: UserStore = Depends(get_user_store)):
    """
    Create a user after checking that the email is not taken.

    Presence and email format are already checked by ``UserCreate``.
    """
    if store.find_by_email(payload.email) is not None:
        raise ValidationError(DUPLICATE_EMAIL)

    return {"newUser": store.create(payload)}


@router.post("/login", response_model=LoginResponse, summary="Check a user's password")
def login(payload: UserLogin, store: UserStore = Depends(get_user_store)):
    """
    Return the stored user, password hash included, when the password matches.

    A wrong password is a 400, not a 401; there is no session or token.
    """
    user = store.find_by_email(payload.email)
    if user is None:
        raise NotFoundError("No user exists with the email provided.")

    if not store.compare_password(payload.email, payload.password):
        raise ValidationError("Incorrect Password")

    return {"user": user}


@router.put("/user/{user_id}", response_model=UpdatedUserResponse, summary="Replace a user")
def update_user(user_id: str, payload: UserUpdate, store: UserStore = Depends(get_user_store)):
    if store.find_one(user_id) is None:
        raise NotFoundError(f"No user with id {user_id}")

    owner = store.find_by_email(payload.email)
    if owner is not None and owner.id != user_id:
        raise ValidationError(DUPLICATE_EMAIL)

    return {"updateUser": store.update(user_id, payload)}


@router.delete("/user/{user_id}", response_model=MessageResponse, summary="Delete a user")
def delete_user(user_id: str, store: UserStore = Depends(get_user_store)):
    if not store.remove(user_id):
        raise NotFoundError("User does not exist")
    return {"msg": "User deleted"}
