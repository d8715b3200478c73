"""Event domain exports"""

from .exceptions import (
    EventAlreadyFinishedError,
    EventCreatorNotFoundError,
    EventError,
    EventInUseError,
    EventNotFoundError,
)
from .models import Event, EventCreateInput, EventStatus

__all__ = [
    "Event",
    "EventCreateInput",
    "EventStatus",
    "EventError",
    "EventAlreadyFinishedError",
    "EventCreatorNotFoundError",
    "EventInUseError",
    "EventNotFoundError",
]
