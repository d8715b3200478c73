"""Application domain specific exceptions."""


class ApplicationError(Exception):
    """Base class for application domain errors."""


class ApplicationAlreadyExistsError(ApplicationError):
    """Raised when a worker applies to the same event twice."""


class ApplicationNotFoundError(ApplicationError):
    """Raised when the requested application cannot be found."""


class ApplicationReferenceError(ApplicationError):
    """Raised when the event or worker referenced by an application does not exist."""
