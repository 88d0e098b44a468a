# app/api/events.py

from fastapi import APIRouter, HTTPException, Request

from app.schemas.event import EventStatusResponse
from app.services.event_status_service import CheckLastEventStatus
from app.utils.time_utils import get_current_utc

router = APIRouter(tags=["events"])


@router.get("/{group_id}/status", response_model=EventStatusResponse)
async def get_event_status(group_id: str, request: Request):
    event_repo = getattr(request.app.state, "event_repo", None)
    if not event_repo:
        raise HTTPException(status_code=503, detail="Event repository not initialized")

    clock = getattr(request.app.state, "clock", None) or get_current_utc
    status = await CheckLastEventStatus(event_repo, clock=clock).execute(group_id)

    return EventStatusResponse(group_id=group_id, status=status)
