"""Withdraw fee schedule."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.fees.service import FeeService
from karaworks.modules.users import User as UserDomain
from karaworks.schemas import FeeResponse, FeeUpdate

router = APIRouter()


@router.get("", response_model=FeeResponse, summary="Current withdraw fees")
async def get_fees(db: AsyncSession = Depends(get_db_session)) -> FeeResponse:
    fees = await FeeService.with_session(db).get_fees()
    return FeeResponse.model_validate(fees)


@router.put("", response_model=FeeResponse, summary="Update withdraw fees")
async def update_fees(
    payload: FeeUpdate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> FeeResponse:
    service = FeeService.with_session(db)
    try:
        fees = await service.update_fees(bank_fee=payload.bank_fee, platform_fee=payload.platform_fee)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await db.commit()
    return FeeResponse.model_validate(fees)
