"""Tests for container wiring."""

import pytest

from diet_tracker.adapters.local_record_repository import LocalRecordRepository
from diet_tracker.adapters.supabase_record_repository import SupabaseRecordRepository
from diet_tracker.config import Settings
from diet_tracker.containers import build_container, build_repository


def test_build_container_defaults_to_local_storage(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.stats_service.repository, LocalRecordRepository)
    assert container.entry_service.repository is container.stats_service.repository
    assert container.stats_service.timezone_name == "UTC"


def test_supabase_backend_requires_credentials() -> None:
    settings = Settings(storage_backend="supabase", supabase_url=None)

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_repository(settings)


def test_supabase_backend_uses_configured_user(monkeypatch) -> None:
    created: list[tuple[str, str]] = []

    def fake_create_client(url: str, key: str) -> object:
        created.append((url, key))
        return object()

    monkeypatch.setattr(
        "diet_tracker.containers.create_client", fake_create_client
    )
    settings = Settings(
        storage_backend="supabase",
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        supabase_user_id="user-1",
    )

    repository = build_repository(settings)

    assert isinstance(repository, SupabaseRecordRepository)
    assert repository.user_id == "user-1"
    assert created == [("https://example.supabase.co", "service-key")]
