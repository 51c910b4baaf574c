# user.py
from typing import Optional

from pydantic import Field, field_validator

from jobly.schemas.base import CamelModel, StrictCamelModel


def _validate_email_like(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    value = v.strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class UserBase(StrictCamelModel):
    username: str = Field(min_length=1, max_length=25)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserRegister(UserBase):
    password: str = Field(min_length=5, max_length=20)


class UserCreate(UserBase):
    """Admin-created account; the password is generated server-side."""

    is_admin: bool = False


class UserUpdate(StrictCamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=30)
    password: Optional[str] = Field(default=None, min_length=5, max_length=20)
    email: Optional[str] = Field(default=None, min_length=6, max_length=60)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: Optional[str]) -> Optional[str]:
        return _validate_email_like(v)


class UserRead(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


class UserDetail(UserRead):
    jobs: list[int] = []
    qualifications: list[int] = []


class UserResponse(CamelModel):
    user: UserRead


class UserDetailResponse(CamelModel):
    user: UserDetail


class UserListResponse(CamelModel):
    users: list[UserRead]


class UserCreatedResponse(CamelModel):
    user: UserRead
    token: str


class ApplicationResponse(CamelModel):
    applied: int


class QualificationResponse(CamelModel):
    qualified: int


class MatchingJobsResponse(CamelModel):
    jobs: list[int]
