from abc import ABC, abstractmethod
from typing import Optional

from app.schemas.event import EventRecord


class EventRepository(ABC):
    """
    Read side of the event store.
    Errors raised here reach the caller of the status check unchanged.
    """

    @abstractmethod
    async def load_last_event(self, group_id: str) -> Optional[EventRecord]:
        """Return the latest event of a group, or None when it has none."""
        ...
