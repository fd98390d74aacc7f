"""Pydantic v2 schemas for user administration and hotel assignments."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from revportal.schemas.auth import UserResponse

ROLE_PATTERN = "^(administrator|editor|viewer)$"
SCOPE_PATTERN = "^(corporate|property)$"


class UserCreate(BaseModel):
    """Schema for an administrator creating a staff account."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=255)
    role: str = Field("viewer", pattern=ROLE_PATTERN)
    scope: str = Field("property", pattern=SCOPE_PATTERN)


class UserUpdate(BaseModel):
    """Partial update. A new password is re-hashed; omitted fields are untouched."""

    full_name: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=8, max_length=128)
    role: str | None = Field(None, pattern=ROLE_PATTERN)
    scope: str | None = Field(None, pattern=SCOPE_PATTERN)
    is_active: bool | None = None


class UserListResponse(BaseModel):
    """All staff accounts."""

    items: list[UserResponse]
    total: int


class AssignmentResponse(BaseModel):
    """One user-to-hotel grant."""

    id: uuid.UUID
    user_id: uuid.UUID
    hotel_id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

