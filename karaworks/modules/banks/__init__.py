"""Bank directory exports"""

from .exceptions import BankError, BankNotFoundError
from .models import Bank

__all__ = [
    "Bank",
    "BankError",
    "BankNotFoundError",
]
