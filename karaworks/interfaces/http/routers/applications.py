"""Worker applications and shift clock-in / clock-out."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from karaworks.core.security import get_current_user
from karaworks.interfaces.http.deps import get_db_session
from karaworks.modules.applications import (
    ApplicationAlreadyExistsError,
    ApplicationNotFoundError,
    ApplicationReferenceError,
)
from karaworks.modules.applications.service import ApplicationService
from karaworks.modules.users import User as UserDomain
from karaworks.schemas import (
    ApplicationCreate,
    ApplicationListResponse,
    ApplicationResponse,
    ApplicationUpdate,
    ClockRecord,
)

router = APIRouter()


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED, summary="Apply to an event")
async def create_application(
    payload: ApplicationCreate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    service = ApplicationService.with_session(db)
    try:
        application = await service.apply(payload.event_id, payload.user_id)
    except ApplicationReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ApplicationAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await db.commit()
    return ApplicationResponse.model_validate(application)


@router.get("", response_model=ApplicationListResponse, summary="List applications")
async def list_applications(
    event_id: Optional[str] = None,
    user_id: Optional[str] = None,
    status_filter: Optional[str] = Query(default=None, alias="status"),
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationListResponse:
    applications = await ApplicationService.with_session(db).list_applications(
        event_id=event_id, user_id=user_id, status=status_filter
    )
    return ApplicationListResponse(data=[ApplicationResponse.model_validate(a) for a in applications])


@router.get("/event/{event_id}", response_model=ApplicationListResponse, summary="List applications for an event")
async def list_event_applications(
    event_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationListResponse:
    applications = await ApplicationService.with_session(db).list_for_event(event_id)
    return ApplicationListResponse(data=[ApplicationResponse.model_validate(a) for a in applications])


@router.get("/user/{user_id}", response_model=ApplicationListResponse, summary="List applications of a worker")
async def list_user_applications(
    user_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationListResponse:
    applications = await ApplicationService.with_session(db).list_applications(user_id=user_id)
    return ApplicationListResponse(data=[ApplicationResponse.model_validate(a) for a in applications])


@router.get("/status/{application_status}", response_model=ApplicationListResponse, summary="List applications in a status")
async def list_applications_by_status(
    application_status: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationListResponse:
    applications = await ApplicationService.with_session(db).list_applications(status=application_status)
    return ApplicationListResponse(data=[ApplicationResponse.model_validate(a) for a in applications])


@router.get("/{application_id}", response_model=ApplicationResponse, summary="Get an application")
async def get_application(
    application_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    application = await ApplicationService.with_session(db).get_application(application_id)
    if application is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return ApplicationResponse.model_validate(application)


@router.post("/{application_id}/clock-in", response_model=ApplicationResponse, summary="Record clock-in")
async def clock_in(
    application_id: str,
    payload: ClockRecord,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    service = ApplicationService.with_session(db)
    try:
        application = await service.record_clock_in(application_id, payload.qr_data, payload.prove)
    except ApplicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found") from exc
    await db.commit()
    return ApplicationResponse.model_validate(application)


@router.post("/{application_id}/clock-out", response_model=ApplicationResponse, summary="Record clock-out")
async def clock_out(
    application_id: str,
    payload: ClockRecord,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    service = ApplicationService.with_session(db)
    try:
        application = await service.record_clock_out(application_id, payload.qr_data, payload.prove)
    except ApplicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found") from exc
    await db.commit()
    return ApplicationResponse.model_validate(application)


@router.put("/{application_id}", response_model=ApplicationResponse, summary="Update an application")
async def update_application(
    application_id: str,
    payload: ApplicationUpdate,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    service = ApplicationService.with_session(db)
    try:
        application = await service.update_application(application_id, payload.model_dump(exclude_unset=True))
    except ApplicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found") from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await db.commit()
    return ApplicationResponse.model_validate(application)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Withdraw an application")
async def delete_application(
    application_id: str,
    _: UserDomain = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    try:
        await ApplicationService.with_session(db).delete_application(application_id)
    except ApplicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found") from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
