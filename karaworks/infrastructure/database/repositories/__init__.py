"""SQLAlchemy-backed repository implementations."""

from .application_repository import SqlApplicationRepository
from .bank_repository import SqlBankRepository
from .event_repository import SqlEventRepository
from .fee_repository import SqlFeeRepository
from .hotel_repository import SqlHotelRepository
from .user_repository import SqlUserRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlApplicationRepository",
    "SqlBankRepository",
    "SqlEventRepository",
    "SqlFeeRepository",
    "SqlHotelRepository",
    "SqlUserRepository",
    "SqlWalletRepository",
]
