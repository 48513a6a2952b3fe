"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.local_record_repository import LocalRecordRepository
from diet_tracker.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from diet_tracker.config import Settings
from diet_tracker.services.entries import EntryRepository, EntryService
from diet_tracker.services.stats import RecordRepository, StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    stats_service: StatsService
    entry_service: EntryService


def build_repository(
    settings: Settings,
) -> LocalRecordRepository | SupabaseRecordRepository:
    """Create the record repository selected by ``storage_backend``."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase storage backend."
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseRecordRepository(client, user_id=settings.supabase_user_id)
    return LocalRecordRepository(settings.local_storage_dir)


def build_container(
    settings: Settings | None = None,
    repository: RecordRepository | None = None,
    entry_repository: EntryRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if repository is None or entry_repository is None:
        default_repository = build_repository(resolved_settings)
        repository = repository or default_repository
        entry_repository = entry_repository or default_repository
    return AppContainer(
        settings=resolved_settings,
        stats_service=StatsService(
            repository, timezone_name=resolved_settings.timezone
        ),
        entry_service=EntryService(entry_repository),
    )
