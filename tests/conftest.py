"""Shared test fixtures."""

from __future__ import annotations

import pytest

from skillgenie.models.questionnaire import QuestionnaireRecord
from skillgenie.recommend.resolver import RecommendationResolver
from skillgenie.store.preference_store import InMemoryPreferenceStore, SQLitePreferenceStore


@pytest.fixture
def sample_submission() -> dict:
    """Questionnaire answers as the questionnaire page submits them."""
    return {
        "education": "undergraduate",
        "experience": "experienced",
        "currentSkills": ["Python", "SQL"],
        "interests": ["apps", "analytics"],
        "learningStyle": "visual",
        "timeCommitment": "full_time",
        "careerGoals": "Ship a mobile app backed by real data",
        "preferredDomains": ["mobile_dev", "data_science"],
    }


@pytest.fixture
def sample_record(sample_submission) -> QuestionnaireRecord:
    return QuestionnaireRecord.model_validate(sample_submission)


@pytest.fixture
def sqlite_store(tmp_path) -> SQLitePreferenceStore:
    return SQLitePreferenceStore(db_path=tmp_path / "prefs.db")


@pytest.fixture
def memory_store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def resolver(memory_store) -> RecommendationResolver:
    return RecommendationResolver(memory_store)
