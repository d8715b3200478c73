"""Application domain exports"""

from .exceptions import (
    ApplicationAlreadyExistsError,
    ApplicationError,
    ApplicationNotFoundError,
    ApplicationReferenceError,
)
from .models import Application, ApplicationStatus

__all__ = [
    "Application",
    "ApplicationStatus",
    "ApplicationError",
    "ApplicationAlreadyExistsError",
    "ApplicationNotFoundError",
    "ApplicationReferenceError",
]
