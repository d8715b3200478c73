class BankError(Exception):
    """Base class for bank directory errors."""


class BankNotFoundError(BankError):
    """Raised when the requested bank cannot be found."""
