"""Tests for storage backend selection."""

import pytest

from study_assistant.db import repository_factory
from study_assistant.db.repository import JsonFileStore


def test_get_repository_uses_json_file_for_file_backend(monkeypatch, tmp_path):
    monkeypatch.setattr(repository_factory.settings, "storage_backend", "file")
    monkeypatch.setattr(repository_factory.settings, "storage_path", str(tmp_path / "s.json"))
    repo = repository_factory.get_repository()
    assert isinstance(repo.store, JsonFileStore)
    assert repo.store.path == tmp_path / "s.json"


def test_get_repository_shares_memory_store(monkeypatch):
    monkeypatch.setattr(repository_factory.settings, "storage_backend", "MEMORY")
    repo = repository_factory.get_repository()
    assert repo.store is repository_factory.get_memory_store()


def test_get_repository_rejects_unknown_backend(monkeypatch):
    monkeypatch.setattr(repository_factory.settings, "storage_backend", "redis")
    with pytest.raises(RuntimeError, match="Unknown storage backend: redis"):
        repository_factory.get_repository()
