from typing import Dict, List, Optional

from app.repositories.event_base import EventRepository
from app.schemas.event import EventRecord


class MemoryEventRepository(EventRepository):

    def __init__(self, db: Optional[Dict[str, List[EventRecord]]] = None):
        self.db = db if db is not None else {}

    def add_event(self, group_id: str, event: EventRecord) -> None:
        self.db.setdefault(group_id, []).append(event)

    def count(self) -> int:
        return sum(len(events) for events in self.db.values())

    async def load_last_event(self, group_id: str) -> Optional[EventRecord]:
        events = self.db.get(group_id, [])
        # "last" = latest end_date, not insertion order
        return max(events, key=lambda e: e.end_date, default=None)
