import asyncio
import logging
from typing import Optional

from supabase import Client

from app.core.errors import EventRepositoryError
from app.repositories.event_base import EventRepository
from app.schemas.event import EventRecord

logger = logging.getLogger(__name__)


class SupabaseEventRepository(EventRepository):
    """
    Supabase-backed event lookup

    Table: events
    - group_id
    - end_date (timestamptz)
    - review_duration_in_hours (numeric)
    """

    def __init__(self, client: Client, table: str = "events"):
        self.client = client
        self.table = table

    async def load_last_event(self, group_id: str) -> Optional[EventRecord]:
        # supabase-py is blocking; keep it off the event loop
        try:
            rows = await asyncio.to_thread(self._select_last, group_id)
        except Exception as exc:
            logger.warning(
                "Event lookup failed",
                extra={"props": {"group_id": group_id, "table": self.table}},
            )
            raise EventRepositoryError(
                f"Failed to load last event for group {group_id!r}"
            ) from exc

        if not rows:
            return None

        row = rows[0]
        return EventRecord(
            end_date=row["end_date"],
            review_duration_in_hours=row["review_duration_in_hours"],
        )

    def _select_last(self, group_id: str) -> list:
        res = (
            self.client
            .table(self.table)
            .select("end_date, review_duration_in_hours")
            .eq("group_id", group_id)
            .order("end_date", desc=True)
            .limit(1)
            .execute()
        )
        return res.data or []
