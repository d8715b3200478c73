"""Event payout workflow exports"""

from .models import PaidApplication, PayoutResult
from .service import PayoutService, coerce_amount

__all__ = [
    "PaidApplication",
    "PayoutResult",
    "PayoutService",
    "coerce_amount",
]
