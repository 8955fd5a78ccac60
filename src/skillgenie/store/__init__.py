"""Persistence for the user's questionnaire submission."""

from skillgenie.store.preference_store import (
    STORAGE_KEY,
    InMemoryPreferenceStore,
    PreferenceStore,
    SQLitePreferenceStore,
)

__all__ = [
    "STORAGE_KEY",
    "InMemoryPreferenceStore",
    "PreferenceStore",
    "SQLitePreferenceStore",
]
