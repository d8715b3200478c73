"""Bank catalogue used for worker payout accounts."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.banks import BankNotFoundError
from karaworks.modules.banks.service import BankService
from karaworks.modules.users import User as UserDomain
from karaworks.schemas import BankCreate, BankListResponse, BankResponse

router = APIRouter()


@router.get("", response_model=BankListResponse, summary="List banks")
async def list_banks(db: AsyncSession = Depends(get_db_session)) -> BankListResponse:
    banks = await BankService.with_session(db).list_banks()
    return BankListResponse(data=[BankResponse.model_validate(bank) for bank in banks])


@router.get("/{bank_id}", response_model=BankResponse, summary="Get a bank")
async def get_bank(bank_id: str, db: AsyncSession = Depends(get_db_session)) -> BankResponse:
    bank = await BankService.with_session(db).get_bank(bank_id)
    if bank is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bank not found")
    return BankResponse.model_validate(bank)


@router.post("", response_model=BankResponse, status_code=status.HTTP_201_CREATED, summary="Add a bank")
async def create_bank(
    payload: BankCreate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> BankResponse:
    bank = await BankService.with_session(db).create_bank(payload.name)
    await db.commit()
    return BankResponse.model_validate(bank)


@router.put("/{bank_id}", response_model=BankResponse, summary="Rename a bank")
async def update_bank(
    bank_id: str,
    payload: BankCreate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> BankResponse:
    try:
        bank = await BankService.with_session(db).rename_bank(bank_id, payload.name)
    except BankNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    await db.commit()
    return BankResponse.model_validate(bank)


@router.delete("/{bank_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a bank")
async def delete_bank(
    bank_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    try:
        await BankService.with_session(db).delete_bank(bank_id)
    except BankNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
