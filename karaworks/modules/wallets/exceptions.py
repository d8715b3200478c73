"""Wallet domain specific exceptions."""


class WalletError(Exception):
    """Base class for wallet ledger errors."""


class InvalidCreditError(WalletError):
    """Raised when a credit has a negative amount or an ambiguous origin."""
