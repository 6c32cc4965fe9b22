"""Snapshot store backend selection."""

from __future__ import annotations

from study_assistant.config import settings
from study_assistant.db.repository import InMemoryStore, JsonFileStore, ProfileRepository

_memory_store = InMemoryStore()


def get_repository() -> ProfileRepository:
    backend = settings.storage_backend.lower()
    if backend == "file":
        return ProfileRepository(JsonFileStore(settings.storage_path))
    if backend == "memory":
        return ProfileRepository(_memory_store)
    raise RuntimeError(f"Unknown storage backend: {settings.storage_backend}")


def get_memory_store() -> InMemoryStore:
    return _memory_store
