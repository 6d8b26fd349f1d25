"""Authentication Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignInSchema(BaseModel):
    """Schema for POST /v1/auth/sign-in."""

    email: str = Field(..., min_length=3, examples=["ana@example.com"])
    password: str = Field(..., min_length=1)


class SignUpSchema(BaseModel):
    """Schema for POST /v1/auth/sign-up."""

    email: str = Field(..., min_length=3, examples=["ana@example.com"])
    password: str = Field(..., min_length=6)
    full_name: Optional[str] = Field(None, examples=["Ana Pérez"])


class UserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None


class SessionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_at: Optional[datetime] = None
    user: UserSchema
