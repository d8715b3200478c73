"""User registration, lookup and wallet balance endpoints."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.users import (
    User as UserDomain,
    UserAlreadyExistsError,
    UserCreateInput,
    UserInUseError,
    UserNotFoundError,
    UserReferenceError,
    UserValidationError,
)
from karaworks.modules.users.service import UserService
from karaworks.modules.wallets.service import WalletService
from karaworks.schemas import UserCreate, UserListResponse, UserResponse, UserUpdate, WalletSnapshotResponse

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Register a user")
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db_session)) -> UserResponse:
    service = UserService.with_session(db)
    try:
        user = await service.create_user(UserCreateInput(**payload.model_dump()))
    except UserValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UserReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    # every registered user starts with an empty wallet
    await WalletService.with_session(db).ensure_wallet(user.id)
    await db.commit()
    return UserResponse.model_validate(user)


@router.get("", response_model=UserListResponse, summary="List users")
async def list_users(
    hotel_id: Optional[str] = None,
    role: Optional[str] = None,
    bank_id: Optional[str] = None,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserListResponse:
    users = await UserService.with_session(db).list_users(hotel_id=hotel_id, role=role, bank_id=bank_id)
    return UserListResponse(data=[UserResponse.model_validate(user) for user in users])


@router.get("/hotel/{hotel_id}", response_model=UserListResponse, summary="List the workers linked to a hotel")
async def list_hotel_users(
    hotel_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserListResponse:
    users = await UserService.with_session(db).list_users(hotel_id=hotel_id, order_by_name=True)
    return UserListResponse(data=[UserResponse.model_validate(user) for user in users])


@router.get("/role/{role}", response_model=UserListResponse, summary="List users with a role")
async def list_users_by_role(
    role: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserListResponse:
    users = await UserService.with_session(db).list_users(role=role, order_by_name=True)
    return UserListResponse(data=[UserResponse.model_validate(user) for user in users])


@router.get("/{user_id}", response_model=UserResponse, summary="Get a user")
async def get_user(
    user_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user = await UserService.with_session(db).get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse, summary="Update a user")
async def update_user(
    user_id: str,
    payload: UserUpdate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    service = UserService.with_session(db)
    try:
        user = await service.update_user(user_id, payload.model_dump(exclude_unset=True))
    except UserValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except (UserNotFoundError, UserReferenceError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await db.commit()
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a user")
async def delete_user(
    user_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    try:
        await UserService.with_session(db).delete_user(user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except UserInUseError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/wallet", response_model=WalletSnapshotResponse, summary="Get a worker's wallet balance")
async def get_user_wallet(
    user_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> WalletSnapshotResponse:
    if await UserService.with_session(db).get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    snapshot = await WalletService.with_session(db).wallet_view(user_id)
    return WalletSnapshotResponse.model_validate(snapshot)
