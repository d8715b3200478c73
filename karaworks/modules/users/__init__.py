"""User domain exports"""

from .exceptions import (
    UserAlreadyExistsError,
    UserError,
    UserInUseError,
    UserNotFoundError,
    UserReferenceError,
    UserValidationError,
)
from .models import User, UserCreateInput, UserRole

__all__ = [
    "User",
    "UserCreateInput",
    "UserRole",
    "UserError",
    "UserAlreadyExistsError",
    "UserInUseError",
    "UserNotFoundError",
    "UserReferenceError",
    "UserValidationError",
]
