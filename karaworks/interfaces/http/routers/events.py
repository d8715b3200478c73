"""Event endpoints, including the payout workflow that settles a finished event."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.events import (
    EventAlreadyFinishedError,
    EventCreateInput,
    EventCreatorNotFoundError,
    EventInUseError,
    EventNotFoundError,
)
from karaworks.modules.events.service import EventService
from karaworks.modules.payouts import PayoutService
from karaworks.modules.users import User as UserDomain
from karaworks.schemas import (
    ErrorResponse,
    EventCreate,
    EventListResponse,
    EventResponse,
    EventUpdate,
    FinishEventResponse,
    PaidApplicationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=EventListResponse, summary="List events")
async def list_events(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    creator_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db_session),
) -> EventListResponse:
    events = await EventService.with_session(db).list_events(status=status_filter, creator_id=creator_id)
    return EventListResponse(data=[EventResponse.model_validate(event) for event in events])


@router.get("/creator/{creator_id}", response_model=EventListResponse, summary="List events posted by a user")
async def list_events_by_creator(creator_id: str, db: AsyncSession = Depends(get_db_session)) -> EventListResponse:
    events = await EventService.with_session(db).list_events(creator_id=creator_id)
    return EventListResponse(data=[EventResponse.model_validate(event) for event in events])


@router.get("/status/{event_status}", response_model=EventListResponse, summary="List events in a status")
async def list_events_by_status(event_status: str, db: AsyncSession = Depends(get_db_session)) -> EventListResponse:
    events = await EventService.with_session(db).list_events(status=event_status)
    return EventListResponse(data=[EventResponse.model_validate(event) for event in events])


@router.get("/{event_id}", response_model=EventResponse, summary="Get an event")
async def get_event(event_id: str, db: AsyncSession = Depends(get_db_session)) -> EventResponse:
    event = await EventService.with_session(db).get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return EventResponse.model_validate(event)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED, summary="Create an event")
async def create_event(
    payload: EventCreate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    service = EventService.with_session(db)
    try:
        event = await service.create_event(
            EventCreateInput(
                creator_id=payload.creator_id,
                name=payload.name,
                description=payload.description,
                event_date=payload.event_date,
                salary=payload.salary,
                person_count=payload.person_count,
                status=payload.status,
            )
        )
    except EventCreatorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    await db.commit()
    return EventResponse.model_validate(event)


@router.put("/{event_id}", response_model=EventResponse, summary="Update an event that is not finished")
async def update_event(
    event_id: str,
    payload: EventUpdate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> EventResponse:
    service = EventService.with_session(db)
    try:
        event = await service.update_event(event_id, payload.model_dump(exclude_unset=True))
    except EventNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (EventAlreadyFinishedError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await db.commit()
    return EventResponse.model_validate(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an event")
async def delete_event(
    event_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    service = EventService.with_session(db)
    try:
        await service.delete_event(event_id)
    except EventNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except EventInUseError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{event_id}/finish",
    response_model=FinishEventResponse,
    summary="Finish an event and pay every worker who clocked out",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def finish_event(
    event_id: str,
    user: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> FinishEventResponse:
    service = PayoutService.with_session(db)
    try:
        result = await service.finish_event(event_id)
    except EventNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except EventAlreadyFinishedError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await db.commit()
    logger.info("User %s finished event %s", user.id, event_id)

    return FinishEventResponse(
        message=result.message,
        processed_count=result.processed_count,
        processed=[
            PaidApplicationResponse(application_id=item.application_id, worker_id=item.user_id)
            for item in result.processed
        ],
    )
