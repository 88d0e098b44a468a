# app/dependencies.py
import logging
from fastapi import FastAPI

from app.core.config import Settings, settings
from app.core.errors import ConfigError
from app.db.supabase_client import get_supabase_client
from app.repositories.event_base import EventRepository
from app.repositories.memory_event_repo import MemoryEventRepository
from app.repositories.supabase_event_repo import SupabaseEventRepository
from app.services.seed_data_loader import seed_memory_repository
from app.utils.time_utils import get_current_utc

logger = logging.getLogger(__name__)


def build_event_repository(app_settings: Settings) -> EventRepository:
    kind = app_settings.event_repository.strip().lower()

    if kind == "memory":
        repo = MemoryEventRepository()
        if app_settings.events_seed_path:
            seed_memory_repository(repo, app_settings.events_seed_path)
        return repo

    if kind == "supabase":
        client = get_supabase_client(
            app_settings.supabase_url,
            app_settings.supabase_service_key,
        )
        return SupabaseEventRepository(client, table=app_settings.supabase_events_table)

    raise ConfigError(f"Unknown event_repository: {app_settings.event_repository!r}")


def init_repositories(app: FastAPI) -> None:
    """
    Initialize infrastructure dependencies.
    Must be idempotent.
    """
    app_settings = getattr(app.state, "settings", settings)

    if getattr(app.state, "event_repo", None) is None:
        app.state.event_repo = build_event_repository(app_settings)
        logger.info(
            "Event repository initialized",
            extra={"props": {"kind": app_settings.event_repository}},
        )

    if getattr(app.state, "clock", None) is None:
        app.state.clock = get_current_utc
