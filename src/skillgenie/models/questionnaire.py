"""Pydantic models for questionnaire submissions."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

EDUCATION_LEVELS = ("high_school", "undergraduate", "graduate", "professional")
EXPERIENCE_LEVELS = ("beginner", "some_experience", "experienced", "expert")
LEARNING_STYLES = ("visual", "practical", "reading", "mixed")
MAX_PREFERRED_DOMAINS = 3


class QuestionnaireRecord(BaseModel):
    """One questionnaire submission.

    Field names are snake_case in Python; the camelCase aliases match the JSON
    the questionnaire page submits and the format persisted by the store.
    Every field has an empty default so partial submissions still load; the
    resolver turns missing values into its documented defaults.
    """

    education: str = ""
    experience: str = ""
    current_skills: list[str] = Field(default_factory=list, alias="currentSkills")
    interests: list[str] = Field(default_factory=list)
    learning_style: str = Field("", alias="learningStyle")
    time_commitment: str = Field("", alias="timeCommitment")
    career_goals: str = Field("", alias="careerGoals")
    preferred_domains: list[str] = Field(default_factory=list, alias="preferredDomains")
    location: str | None = None

    model_config = {"populate_by_name": True, "extra": "allow"}

    @property
    def primary_domain(self) -> str | None:
        return self.preferred_domains[0] if self.preferred_domains else None


class StoredRecord(QuestionnaireRecord):
    """A submission stamped at save time."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = Field(default_factory=datetime.now)


def validate_submission(record: QuestionnaireRecord) -> list[str]:
    """Return the problems that keep a submission from being complete.

    Checks mirror the questionnaire's steps in order. An empty list means the
    submission is complete.
    """
    problems: list[str] = []

    # Step 1: background
    if record.education not in EDUCATION_LEVELS:
        problems.append(
            f"education must be one of {', '.join(EDUCATION_LEVELS)}"
        )
    if record.experience not in EXPERIENCE_LEVELS:
        problems.append(
            f"experience must be one of {', '.join(EXPERIENCE_LEVELS)}"
        )

    # Step 2: current skills
    if not record.current_skills:
        problems.append("at least one current skill is required")

    # Step 3: interests & goals
    if not record.interests:
        problems.append("at least one interest is required")
    if not record.career_goals.strip():
        problems.append("career goals are required")

    # Step 4: learning preferences
    if record.learning_style not in LEARNING_STYLES:
        problems.append(
            f"learning style must be one of {', '.join(LEARNING_STYLES)}"
        )
    if not record.time_commitment:
        problems.append("time commitment is required")

    # Step 5: domains
    if not record.preferred_domains:
        problems.append("at least one preferred domain is required")
    elif len(record.preferred_domains) > MAX_PREFERRED_DOMAINS:
        problems.append(
            f"choose at most {MAX_PREFERRED_DOMAINS} preferred domains"
        )

    return problems
