import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter

from app.repositories.memory_event_repo import MemoryEventRepository
from app.schemas.event import EventRecord, SeedEvent

logger = logging.getLogger(__name__)

_SEED_ADAPTER = TypeAdapter(List[SeedEvent])


def load_seed_events(path: str | Path) -> List[SeedEvent]:
    """
    Seed file: JSON list of
    { "group_id", "end_date" (ISO-8601), "review_duration_in_hours" }
    """
    raw = Path(path).read_text(encoding="utf-8")
    return _SEED_ADAPTER.validate_json(raw)


def seed_memory_repository(repo: MemoryEventRepository, path: str | Path) -> int:
    events = load_seed_events(path)
    for ev in events:
        repo.add_event(
            ev.group_id,
            EventRecord(
                end_date=ev.end_date,
                review_duration_in_hours=ev.review_duration_in_hours,
            ),
        )

    logger.info(
        "Seeded memory event repository",
        extra={"props": {"path": str(path), "events": len(events)}},
    )
    return len(events)
