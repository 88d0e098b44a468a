# Event lookup / status schemas
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.time_utils import ensure_utc


class EventStatus(str, Enum):
    ACTIVE = "active"
    PENDENT = "pendent"
    DONE = "done"


class EventRecord(BaseModel):
    """
    Last event of a group, as returned by the event repository.
    Read-only once loaded.
    """

    model_config = ConfigDict(frozen=True)

    end_date: datetime
    review_duration_in_hours: float = Field(..., ge=0)

    @field_validator("end_date")
    @classmethod
    def _end_date_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class SeedEvent(EventRecord):
    group_id: str = Field(..., min_length=1)


class EventStatusResponse(BaseModel):
    group_id: str
    status: EventStatus
