# User repository layer (in-memory reference store)
# - data access only (lookup/insert/update/delete); rules live in the service
# - emails are unique, compared case-insensitively

from typing import Dict, List, Optional
from uuid import UUID
from ..models.user import UserRecord

class InMemoryUserRepository:
    def __init__(self):
        self._users: Dict[UUID, UserRecord] = {}

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        key = email.lower()
        for user in self._users.values():
            if user.email.lower() == key:
                return user
        return None

    async def get(self, user_id: UUID) -> Optional[UserRecord]:
        return self._users.get(user_id)

    async def list_all(self) -> List[UserRecord]:
        return sorted(self._users.values(), key=lambda u: u.created_at)

    async def create(self, user: UserRecord) -> UserRecord:
        self._users[user.id] = user
        return user

    async def save(self, user: UserRecord) -> UserRecord:
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UUID) -> bool:
        return self._users.pop(user_id, None) is not None
