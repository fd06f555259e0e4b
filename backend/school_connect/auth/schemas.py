from pydantic import field_validator
from typing import Literal, Optional
from datetime import datetime

from school_connect.schemas import CamelModel

Role = Literal["parent", "teacher", "admin"]


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        if v is None:
            return v
        return v.strip().lower()


class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        if v is None:
            return v
        return v.strip()

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        if v is None:
            return v
        return v.strip().lower()


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    role: str
    profile_picture: Optional[str] = None
    created_at: datetime
    last_active: datetime
