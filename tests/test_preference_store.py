"""Tests for the single-record preference store."""

import sqlite3

import pytest

from skillgenie.models.questionnaire import StoredRecord
from skillgenie.store.preference_store import (
    STORAGE_KEY,
    InMemoryPreferenceStore,
    SQLitePreferenceStore,
)


@pytest.fixture(params=["sqlite", "memory"])
def store(request, tmp_path):
    if request.param == "sqlite":
        return SQLitePreferenceStore(db_path=tmp_path / "prefs.db")
    return InMemoryPreferenceStore()


class TestPreferenceStore:
    def test_load_empty(self, store):
        assert store.load() is None

    def test_save_stamps_id_and_timestamp(self, store, sample_submission):
        saved = store.save(sample_submission)
        assert isinstance(saved, StoredRecord)
        assert saved.id
        assert saved.timestamp is not None

    def test_round_trip_preserves_fields(self, store, sample_submission):
        saved = store.save(sample_submission)
        loaded = store.load()
        assert loaded == saved
        dumped = loaded.model_dump(by_alias=True)
        for key, value in sample_submission.items():
            assert dumped[key] == value

    def test_accepts_model(self, store, sample_record):
        saved = store.save(sample_record)
        assert saved.preferred_domains == sample_record.preferred_domains

    def test_overwrites_previous_record(self, store, sample_submission):
        first = store.save(sample_submission)
        second = store.save({**sample_submission, "preferredDomains": ["ai_ml"]})
        loaded = store.load()
        assert loaded.id == second.id
        assert loaded.id != first.id
        assert loaded.preferred_domains == ["ai_ml"]

    def test_resave_gets_new_identity(self, store, sample_submission):
        first = store.save(sample_submission)
        second = store.save(first)
        assert second.id != first.id

    def test_clear(self, store, sample_submission):
        store.save(sample_submission)
        store.clear()
        assert store.load() is None

    def test_clear_is_idempotent(self, store):
        store.clear()
        store.clear()
        assert store.load() is None

    def test_unserializable_payload_returns_none(self, store):
        assert store.save({"preferredDomains": object()}) is None
        assert store.load() is None

    def test_unsupported_type_returns_none(self, store):
        assert store.save(["not", "a", "mapping"]) is None


class TestSQLitePreferenceStore:
    def test_persists_across_instances(self, tmp_path, sample_submission):
        path = tmp_path / "prefs.db"
        saved = SQLitePreferenceStore(db_path=path).save(sample_submission)
        loaded = SQLitePreferenceStore(db_path=path).load()
        assert loaded == saved

    def test_single_row_under_fixed_key(self, sqlite_store, sample_submission):
        sqlite_store.save(sample_submission)
        sqlite_store.save(sample_submission)
        with sqlite3.connect(str(sqlite_store.db_path)) as conn:
            rows = conn.execute("SELECT key FROM preferences").fetchall()
        assert rows == [(STORAGE_KEY,)]

    def test_malformed_json_loads_as_absent(self, sqlite_store):
        with sqlite3.connect(str(sqlite_store.db_path)) as conn:
            conn.execute(
                "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, 0)",
                (STORAGE_KEY, "{not json"),
            )
        assert sqlite_store.load() is None

    def test_invalid_record_loads_as_absent(self, sqlite_store):
        with sqlite3.connect(str(sqlite_store.db_path)) as conn:
            conn.execute(
                "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, 0)",
                (STORAGE_KEY, '{"preferredDomains": "ai_ml", "timestamp": "yesterday"}'),
            )
        assert sqlite_store.load() is None

    def test_unavailable_storage_fails_quietly(self, tmp_path, sample_submission):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = SQLitePreferenceStore(db_path=blocker / "prefs.db")
        assert store.save(sample_submission) is None
        assert store.load() is None
        store.clear()
