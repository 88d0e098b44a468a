import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from app.repositories.event_base import EventRepository
from app.schemas.event import EventRecord, EventStatus
from app.utils.time_utils import get_current_utc

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class EventStatusService:
    """
    Derive event status from the last event of a group.
    No state stored. Fully deterministic.
    """

    @staticmethod
    def derive(event: Optional[EventRecord], now: datetime) -> EventStatus:
        """
        Boundaries are inclusive: at exactly end_date the event is still
        active, at exactly the review deadline it is still pendent.
        """
        if event is None:
            return EventStatus.DONE

        if now <= event.end_date:
            return EventStatus.ACTIVE

        # compare elapsed time instead of end_date + window: the deadline
        # itself may lie past datetime.max
        elapsed = now - event.end_date
        try:
            review_window = timedelta(hours=event.review_duration_in_hours)
        except OverflowError:
            # window longer than timedelta can hold (inf included)
            return EventStatus.PENDENT

        if elapsed <= review_window:
            return EventStatus.PENDENT

        return EventStatus.DONE


class CheckLastEventStatus:
    """
    Load the last event of a group (exactly once) and derive its status.
    Repository errors are not caught here.
    """

    def __init__(self, event_repo: EventRepository, clock: Clock = get_current_utc):
        self.event_repo = event_repo
        self.clock = clock

    async def execute(self, group_id: str) -> EventStatus:
        event = await self.event_repo.load_last_event(group_id)

        # single snapshot for every comparison
        now = self.clock()
        status = EventStatusService.derive(event, now)

        logger.debug(
            "Event status derived",
            extra={
                "props": {
                    "group_id": group_id,
                    "status": status.value,
                    "has_event": event is not None,
                }
            },
        )
        return status
