# Application errors
# Every error rendered to a client is an AppError; its to_dict() is the JSON body
# and status_code the HTTP status. Service implementations raise the
# UserServiceError family so the router can map error kinds to statuses.

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for errors that are returned to the client as an error envelope.

    Attributes:
        status_code: HTTP status the error is reported with
        message: short human readable message
        log: underlying cause (parse error, service detail)
        error_key: stable machine readable key
    """
    status_code: int = 400
    message: str = "bad request"
    error_key: str = "ErrBadRequest"

    def __init__(self, message: Optional[str] = None, log: Optional[str] = None,
                 status_code: Optional[int] = None, error_key: Optional[str] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_key is not None:
            self.error_key = error_key
        self.log = log if log is not None else self.message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "message": self.message,
            "log": self.log,
            "error_key": self.error_key,
        }


class InvalidRequestError(AppError):
    """Malformed body or unparseable path parameter."""
    status_code = 400
    message = "invalid request"
    error_key = "ErrInvalidRequest"

    def __init__(self, cause: Any):
        super().__init__(log=str(cause))


class UnauthorizedError(AppError):
    status_code = 401
    message = "unauthorized"
    error_key = "ErrUnauthorized"


class InternalServerError(AppError):
    status_code = 500
    message = "internal server error"
    error_key = "ErrInternal"


class UserServiceError(AppError):
    """Rejection reported by a UserService. Unclassified rejections are client errors."""
    status_code = 400
    message = "user service rejected the request"
    error_key = "ErrUserService"


class InvalidCredentialsError(UserServiceError):
    status_code = 400
    message = "email or password invalid"
    error_key = "ErrInvalidCredentials"


class UserNotFoundError(UserServiceError):
    status_code = 404
    message = "user not found"
    error_key = "ErrUserNotFound"


class UserAlreadyExistsError(UserServiceError):
    status_code = 409
    message = "user already exists"
    error_key = "ErrUserAlreadyExists"
