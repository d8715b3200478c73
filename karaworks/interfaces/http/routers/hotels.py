"""Hotel accounts that post events and employ workers."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.hotels import HotelAlreadyExistsError, HotelCreateInput, HotelNotFoundError
from karaworks.modules.hotels.service import HotelService
from karaworks.modules.users import User as UserDomain
from karaworks.schemas import HotelCreate, HotelListResponse, HotelResponse, HotelUpdate

router = APIRouter()


@router.get("", response_model=HotelListResponse, summary="List hotels")
async def list_hotels(db: AsyncSession = Depends(get_db_session)) -> HotelListResponse:
    hotels = await HotelService.with_session(db).list_hotels()
    return HotelListResponse(data=[HotelResponse.model_validate(hotel) for hotel in hotels])


@router.get("/{hotel_id}", response_model=HotelResponse, summary="Get a hotel")
async def get_hotel(hotel_id: str, db: AsyncSession = Depends(get_db_session)) -> HotelResponse:
    hotel = await HotelService.with_session(db).get_hotel(hotel_id)
    if hotel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return HotelResponse.model_validate(hotel)


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED, summary="Register a hotel")
async def create_hotel(
    payload: HotelCreate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> HotelResponse:
    service = HotelService.with_session(db)
    try:
        hotel = await service.create_hotel(HotelCreateInput(email=payload.email, name=payload.name, logo=payload.logo))
    except HotelAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await db.commit()
    return HotelResponse.model_validate(hotel)


@router.put("/{hotel_id}", response_model=HotelResponse, summary="Update a hotel")
async def update_hotel(
    hotel_id: str,
    payload: HotelUpdate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> HotelResponse:
    service = HotelService.with_session(db)
    try:
        hotel = await service.update_hotel(hotel_id, payload.model_dump(exclude_unset=True))
    except HotelNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except HotelAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await db.commit()
    return HotelResponse.model_validate(hotel)


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a hotel")
async def delete_hotel(
    hotel_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    try:
        await HotelService.with_session(db).delete_hotel(hotel_id)
    except HotelNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
