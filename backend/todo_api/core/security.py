# Security / authentication utilities
# - password hashing and verification
# - access token creation/decoding (JWT)
# - authentication gate for protected routes (dependency)

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
import jwt

from .config import settings
from .exceptions import UnauthorizedError
from ..schemas.user_schema import Token

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(user_id: UUID) -> Token:
    now = datetime.now(tz=timezone.utc)
    expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "exp": now + expires_delta,
        "iat": now,
        "nbf": now,
        "sub": str(user_id),
        "type": "access",
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return Token(token=token, created=now, expiry=int(expires_delta.total_seconds()))

def decode_access_token(token: str) -> UUID:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as e:
        raise UnauthorizedError(log=str(e))
    if payload.get("type") != "access" or payload.get("sub") is None:
        raise UnauthorizedError(log="token is not an access token")
    try:
        return UUID(payload["sub"])
    except ValueError as e:
        raise UnauthorizedError(log=str(e))

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UUID:
    # token-only: runs before path/body validation, so it must not touch the UserService
    if credentials is None:
        raise UnauthorizedError(log="missing bearer token")
    return decode_access_token(credentials.credentials)
