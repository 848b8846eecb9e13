# User service layer
# - UserService: the interface the users router depends on
# - InMemoryUserService: reference implementation (duplicate email check,
#   password hashing, token issuance) backed by InMemoryUserRepository
# - get_user_service: dependency returning the service injected into the app

import logging
from datetime import datetime, timezone
from typing import List, Protocol, runtime_checkable
from uuid import UUID

from fastapi import Request

from ..core.exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError
from ..core.security import create_access_token, get_password_hash, verify_password
from ..models.user import UserRecord
from ..repositories.user_repository import InMemoryUserRepository
from ..schemas.user_schema import Token, User, UserCreate, UserLogin, UserUpdate

logger = logging.getLogger(__name__)


@runtime_checkable
class UserService(Protocol):
    """
    Business operations behind the users API.

    Implementations report rejections by raising UserServiceError subclasses:
    - UserAlreadyExistsError when registering a taken email
    - InvalidCredentialsError when login fails
    - UserNotFoundError when an id does not resolve
    Any other exception is treated as an internal failure.
    """

    async def register(self, data: UserCreate) -> UUID:
        """Create a user and return its generated id."""
        ...

    async def login(self, data: UserLogin) -> Token:
        ...

    async def get_all_users(self) -> List[User]:
        ...

    async def get_user_by_id(self, user_id: UUID) -> User:
        ...

    async def update_user(self, user_id: UUID, data: UserUpdate) -> None:
        """Apply the fields set in data; unset fields keep their values."""
        ...

    async def delete_user(self, user_id: UUID) -> None:
        ...


class InMemoryUserService:
    def __init__(self, repo: InMemoryUserRepository):
        self.repo = repo

    async def register(self, data: UserCreate) -> UUID:
        existing = await self.repo.get_by_email(data.email)
        if existing:
            raise UserAlreadyExistsError(log=f"email {data.email} already registered")
        user = UserRecord(
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            hashed_password=get_password_hash(data.password),
        )
        await self.repo.create(user)
        logger.info("registered user %s", user.id)
        return user.id

    async def login(self, data: UserLogin) -> Token:
        user = await self.repo.get_by_email(data.email)
        if not user or not verify_password(data.password, user.hashed_password):
            raise InvalidCredentialsError()
        return create_access_token(user.id)

    async def get_all_users(self) -> List[User]:
        return [u.to_public() for u in await self.repo.list_all()]

    async def get_user_by_id(self, user_id: UUID) -> User:
        return (await self._get_record(user_id)).to_public()

    async def update_user(self, user_id: UUID, data: UserUpdate) -> None:
        user = await self._get_record(user_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        password = changes.pop("password", None)
        if password is not None:
            changes["hashed_password"] = get_password_hash(password)
        if not changes:
            return
        changes["updated_at"] = datetime.now(tz=timezone.utc)
        await self.repo.save(user.model_copy(update=changes))
        logger.info("updated user %s (%s)", user_id, ", ".join(sorted(changes)))

    async def delete_user(self, user_id: UUID) -> None:
        if not await self.repo.delete(user_id):
            raise UserNotFoundError(log=f"user {user_id} not found")
        logger.info("deleted user %s", user_id)

    async def _get_record(self, user_id: UUID) -> UserRecord:
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(log=f"user {user_id} not found")
        return user


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
