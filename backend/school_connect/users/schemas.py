from pydantic import field_validator
from typing import Optional

from school_connect.schemas import CamelModel


class ProfileUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    profile_picture: Optional[str] = None

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        if v is None:
            return v
        return v.strip().lower()


class ProfileSummary(CamelModel):
    id: int
    name: str
    email: str
    role: str


class ProfileUpdateResponse(CamelModel):
    message: str
    user: ProfileSummary


class PasswordChange(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
