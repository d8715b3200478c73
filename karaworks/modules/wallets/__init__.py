"""Wallet domain exports"""

from .exceptions import InvalidCreditError, WalletError
from .models import WalletCredit, WalletSnapshot, WalletTransactionRecord

__all__ = [
    "InvalidCreditError",
    "WalletError",
    "WalletCredit",
    "WalletSnapshot",
    "WalletTransactionRecord",
]
