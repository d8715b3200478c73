"""Event domain specific exceptions."""


class EventError(Exception):
    """Base class for event domain errors."""


class EventNotFoundError(EventError):
    """Raised when the requested event cannot be found."""


class EventAlreadyFinishedError(EventError):
    """Raised when an event has already been settled and cannot be finished again."""


class EventCreatorNotFoundError(EventError):
    """Raised when an event references a creator that does not exist."""


class EventInUseError(EventError):
    """Raised when deleting an event would orphan its settled wallet transactions."""
