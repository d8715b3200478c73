from fastapi import APIRouter

from karaworks.interfaces.http.routers import (
    applications,
    banks,
    events,
    fees,
    hotels,
    users,
    wallet_transactions,
)


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(users.router, prefix="/users", tags=["Users"])
    router.include_router(hotels.router, prefix="/hotels", tags=["Hotels"])
    router.include_router(banks.router, prefix="/banks", tags=["Banks"])
    router.include_router(fees.router, prefix="/fee", tags=["Fees"])
    router.include_router(events.router, prefix="/events", tags=["Events"])
    router.include_router(applications.router, prefix="/applications", tags=["Applications"])
    router.include_router(wallet_transactions.router, prefix="/wallet-transactions", tags=["Wallet transactions"])
    return router


__all__ = [
    "create_api_router",
]
