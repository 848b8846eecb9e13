# Users router
# - POST   /api/v1/users/register : public
# - POST   /api/v1/users/login    : public
# - GET    /api/v1/users/         : authentication required
# - GET    /api/v1/users/{id}     : authentication required
# - PATCH  /api/v1/users/{id}     : authentication required
# - DELETE /api/v1/users/{id}     : authentication required
#
# Each handler makes exactly one UserService call. Invalid bodies and non-UUID
# ids are rejected by request validation before the service is reached; errors
# raised by the service are rendered by the AppError handler (see main.py).

from typing import Any, Callable, List
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status

from ...core.security import get_current_user
from ...schemas.user_schema import (
    ErrorResponse,
    SuccessResponse,
    Token,
    User,
    UserCreate,
    UserLogin,
    UserUpdate,
)
from ...services.user_service import UserService, get_user_service

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid request or rejected by the user service"},
}
PROTECTED_ERROR_RESPONSES = {
    **ERROR_RESPONSES,
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"},
}


def build_user_router(authenticate: Callable[..., Any] = get_current_user) -> APIRouter:
    """Build the /users group; `authenticate` gates every route but register and login."""
    router = APIRouter(prefix="/users", tags=["users"])

    @router.post(
        "/register",
        status_code=status.HTTP_201_CREATED,
        response_model=SuccessResponse[UUID],
        responses={**ERROR_RESPONSES, status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Email already registered"}},
        summary="Register a new user",
        description="Creates a user from email, password and name. Responds with the generated user id.",
    )
    async def register(payload: UserCreate, service: UserService = Depends(get_user_service)):
        user_id = await service.register(payload)
        return {"data": user_id}

    @router.post(
        "/login",
        response_model=SuccessResponse[Token],
        responses=ERROR_RESPONSES,
        summary="Log in and receive an access token",
        description="Checks email and password and issues a bearer token for the protected routes.",
    )
    async def login(payload: UserLogin, service: UserService = Depends(get_user_service)):
        token = await service.login(payload)
        return {"data": token}

    protected = APIRouter(dependencies=[Depends(authenticate)])

    @protected.get(
        "/",
        response_model=SuccessResponse[List[User]],
        responses=PROTECTED_ERROR_RESPONSES,
        summary="List all users",
        description="Returns every registered user. Requires a bearer token.",
    )
    async def list_users(service: UserService = Depends(get_user_service)):
        users = await service.get_all_users()
        return {"data": users}

    @protected.get(
        "/{user_id}",
        response_model=SuccessResponse[User],
        responses=PROTECTED_ERROR_RESPONSES,
        summary="Get a user by id",
        description="Returns one user by UUID. Requires a bearer token.",
    )
    async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
        user = await service.get_user_by_id(user_id)
        return {"data": user}

    @protected.patch(
        "/{user_id}",
        response_model=SuccessResponse[UUID],
        responses=PROTECTED_ERROR_RESPONSES,
        summary="Update a user's mutable fields",
        description="Applies the fields present in the body (first_name, last_name, password). Requires a bearer token.",
    )
    async def update_user(user_id: UUID, payload: UserUpdate, service: UserService = Depends(get_user_service)):
        await service.update_user(user_id, payload)
        return {"data": user_id}

    @protected.delete(
        "/{user_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=PROTECTED_ERROR_RESPONSES,
        summary="Delete a user",
        description="Removes a user by UUID and responds with an empty body. Requires a bearer token.",
    )
    async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
        await service.delete_user(user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    router.include_router(protected)
    return router
