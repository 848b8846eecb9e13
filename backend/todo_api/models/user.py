# Stored user record
# - public fields + password hash, creation/update timestamps
# - the hash never leaves this model: to_public() drops it

from datetime import datetime, timezone
from uuid import UUID, uuid4
from pydantic import BaseModel, EmailStr, Field

from ..schemas.user_schema import User

def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)

class UserRecord(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: EmailStr
    first_name: str
    last_name: str
    hashed_password: str = Field(repr=False)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def to_public(self) -> User:
        return User(**self.model_dump(exclude={"hashed_password"}))
