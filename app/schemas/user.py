from typing import Literal
from pydantic import EmailStr, Field, field_validator
from app.schemas.common import CamelModel, strip_text
from app.utils.auth import BCRYPT_MAX_BYTES


def _password_max_bytes(v: str) -> str:
    """Ensure password does not exceed bcrypt's 72-byte limit when UTF-8 encoded.

    Raise a validation error so the API answers 400 with a clear message.
    """
    if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return v


class SignupIn(CamelModel):
    name: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6)
    role: Literal["user", "admin"] = "user"

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return strip_text(v)

    @field_validator("password")
    @classmethod
    def password_max_bytes(cls, v):
        return _password_max_bytes(v)


class LoginIn(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserOut(CamelModel):
    id: int
    name: str
    email: EmailStr
    role: str


class UserRef(CamelModel):
    id: int
    name: str
    email: str


class MeOut(CamelModel):
    user_id: int
    role: str
