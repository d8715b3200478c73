"""Read-only views over the wallet ledger."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.users import User as UserDomain
from karaworks.modules.wallets.service import WalletService
from karaworks.schemas import (
    MonthRange,
    WalletTransactionListResponse,
    WalletTransactionMonthResponse,
    WalletTransactionPageResponse,
    WalletTransactionResponse,
)

router = APIRouter()


@router.get("", response_model=WalletTransactionPageResponse, summary="All ledger entries, newest first")
async def list_transactions(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> WalletTransactionPageResponse:
    records, total = await WalletService.with_session(db).list_transactions(limit, (page - 1) * limit)
    return WalletTransactionPageResponse(
        page=page,
        limit=limit,
        count=total,
        data=[WalletTransactionResponse.model_validate(r) for r in records],
    )


@router.get("/event/{event_id}", response_model=WalletTransactionListResponse, summary="Ledger entries paid for an event")
async def list_event_transactions(
    event_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> WalletTransactionListResponse:
    records = await WalletService.with_session(db).list_transactions_for_event(event_id)
    return WalletTransactionListResponse(data=[WalletTransactionResponse.model_validate(r) for r in records])


@router.get("/user/{user_id}", response_model=WalletTransactionListResponse, summary="Ledger entries of a worker")
async def list_user_transactions(
    user_id: str,
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> WalletTransactionListResponse:
    records = await WalletService.with_session(db).list_transactions_for_user(user_id, limit, offset)
    return WalletTransactionListResponse(data=[WalletTransactionResponse.model_validate(r) for r in records])


@router.get("/hotel/{hotel_id}", response_model=WalletTransactionListResponse, summary="Ledger entries of a hotel's workers")
async def list_hotel_transactions(
    hotel_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> WalletTransactionListResponse:
    records = await WalletService.with_session(db).list_transactions_for_hotel(hotel_id)
    return WalletTransactionListResponse(data=[WalletTransactionResponse.model_validate(r) for r in records])


@router.get("/month/{year}/{month}", response_model=WalletTransactionMonthResponse, summary="Ledger entries of a month")
async def list_month_transactions(
    year: int = Path(..., ge=1970, le=9999),
    month: int = Path(..., ge=1, le=12),
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> WalletTransactionMonthResponse:
    records, start, end = await WalletService.with_session(db).list_transactions_for_month(year, month)
    return WalletTransactionMonthResponse(
        data=[WalletTransactionResponse.model_validate(r) for r in records],
        range=MonthRange(start=start, end=end),
    )
