# Request/response schemas (Pydantic models)
# - UserCreate / UserLogin / UserUpdate: request bodies
# - User / Token: response payloads
# - SuccessResponse / ErrorResponse: wire envelopes

from datetime import datetime
from typing import Generic, Optional, TypeVar
from uuid import UUID
from pydantic import BaseModel, ConfigDict, EmailStr, Field

T = TypeVar("T")

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class UserUpdate(BaseModel):
    # partial update: only the fields present in the body are applied
    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=6, max_length=72)

class User(BaseModel):
    id: UUID
    email: EmailStr
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

class Token(BaseModel):
    token: str
    created: datetime
    expiry: int  # seconds

class SuccessResponse(BaseModel, Generic[T]):
    data: T

class ErrorResponse(BaseModel):
    status_code: int
    message: str
    log: str
    error_key: str
