# File: storefront/schemas/user.py

from pydantic import BaseModel, Field

# local@domain.tld, no whitespace and a single "@"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


# -----------------------------
# Request bodies
# -----------------------------

class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1)


class UserUpdate(UserCreate):
    pass


class UserLogin(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


# -----------------------------
# Responses
# -----------------------------

class UserRead(BaseModel):
    id: str
    username: str
    email: str

    class Config:
        from_attributes = True


class UserWithPassword(UserRead):
    # Stored bcrypt hash, only ever returned by /login.
    password: str


class UserResponse(BaseModel):
    user: UserRead


class LoginResponse(BaseModel):
    user: UserWithPassword


class NewUserResponse(BaseModel):
    new_user: UserRead = Field(alias="newUser")

    class Config:
        populate_by_name = True


class UpdatedUserResponse(BaseModel):
    update_user: UserRead = Field(alias="updateUser")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    msg: str

