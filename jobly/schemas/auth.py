# auth.py
from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class TokenResponse(BaseModel):
    token: str


class TokenData(BaseModel):
    username: str
    is_admin: bool = False
