"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UserAlreadyExistsError(UserError):
    """Raised when attempting to register a phone number twice."""


class UserNotFoundError(UserError):
    """Raised when the requested user cannot be found."""


class UserReferenceError(UserError):
    """Raised when a user points at a hotel or bank that does not exist."""


class UserValidationError(UserError):
    """Raised when a role and hotel link do not fit together."""


class UserInUseError(UserError):
    """Raised when deleting a user would orphan settled ledger entries."""
