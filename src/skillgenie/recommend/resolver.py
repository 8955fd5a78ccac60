"""Derive learning recommendations from the stored questionnaire."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from skillgenie.models.questionnaire import StoredRecord
from skillgenie.models.recommendation import (
    LearningPathItem,
    LearningPreferences,
    LocationInsights,
    RecommendationBundle,
)
from skillgenie.recommend import lookup_tables as tables
from skillgenie.store.preference_store import PreferenceStore

logger = logging.getLogger(__name__)


def map_domains_to_skills(domains: Iterable[str]) -> list[str]:
    """Map domain tokens to skill names; unknown tokens pass through."""
    return [tables.DOMAIN_SKILL_MAP.get(d, d) for d in domains]


def build_learning_path(domains: list[str]) -> list[LearningPathItem]:
    """Learning path over the whitelisted domains, in priority order.

    Domains outside the whitelist never appear here even though they are
    part of the user's preferred skills.
    """
    path = [
        LearningPathItem(skill=skill, reason=reason, priority=priority)
        for domain, skill, reason, priority in tables.LEARNING_PATH_WHITELIST
        if domain in domains
    ]
    if path:
        return path
    skill, reason, priority = tables.DEFAULT_LEARNING_PATH
    return [LearningPathItem(skill=skill, reason=reason, priority=priority)]


def estimate_time(time_commitment: str | None) -> str:
    return tables.TIME_ESTIMATE_MAP.get(time_commitment or "", tables.DEFAULT_TIME_ESTIMATE)


def customized_tips(learning_style: str | None) -> list[str]:
    tips = tables.LEARNING_STYLE_TIPS.get(
        learning_style or "", tables.LEARNING_STYLE_TIPS["mixed"]
    )
    return list(tips)


def _primary_skill(record: StoredRecord | None) -> str:
    if record is None or not record.preferred_domains:
        return tables.DEFAULT_SKILL
    # The first domain chosen is the primary one
    return map_domains_to_skills([record.preferred_domains[0]])[0]


def _experience_level(record: StoredRecord | None) -> str:
    if record is None or not record.experience:
        return tables.DEFAULT_EXPERIENCE_LEVEL
    return tables.EXPERIENCE_LEVEL_MAP.get(record.experience, tables.DEFAULT_EXPERIENCE_LEVEL)


def _all_skills(record: StoredRecord | None) -> list[str]:
    if record is None or not record.preferred_domains:
        return [tables.DEFAULT_SKILL]
    return map_domains_to_skills(record.preferred_domains)


class RecommendationResolver:
    """Read-through view over a preference store.

    Every method loads the current record, so results follow the store as it
    changes. Nothing here raises: absent or incomplete data resolves to the
    documented defaults.
    """

    def __init__(self, store: PreferenceStore):
        self.store = store

    def _record(self) -> StoredRecord | None:
        return self.store.load()

    def primary_skill(self) -> str:
        return _primary_skill(self._record())

    def experience_level(self) -> str:
        return _experience_level(self._record())

    def preferred_location(self) -> str:
        return tables.DEFAULT_LOCATION

    def location_recommendation(self) -> str:
        record = self._record()
        if record is None or not record.location:
            return tables.DEFAULT_LOCATION
        return record.location

    def detailed_location_recommendations(self) -> LocationInsights:
        location = self.location_recommendation()
        return LocationInsights(
            location=location,
            market_trends=tables.market_trends(location),
            salary_ranges=tables.salary_ranges(location),
            job_opportunities=tables.job_opportunities(location),
            recommended_skills=tables.location_based_skills(location),
        )

    def all_preferred_skills(self) -> list[str]:
        return _all_skills(self._record())

    def learning_preferences(self) -> LearningPreferences:
        record = self._record()
        if record is None:
            return LearningPreferences()
        return LearningPreferences(
            learning_style=record.learning_style or "mixed",
            time_commitment=record.time_commitment or "moderate",
            current_skills=list(record.current_skills),
            career_goals=record.career_goals,
        )

    def has_completed_questionnaire(self) -> bool:
        record = self._record()
        return record is not None and bool(record.preferred_domains)

    def generate_personalized_recommendations(self) -> RecommendationBundle | None:
        """Compose a recommendation bundle, or None when nothing is stored.

        None tells the caller to prompt for the questionnaire first.
        """
        record = self._record()
        if record is None:
            return None

        bundle = RecommendationBundle(
            primary_skill=_primary_skill(record),
            experience_level=_experience_level(record),
            all_skills=_all_skills(record),
            learning_path=build_learning_path(record.preferred_domains),
            time_estimate=estimate_time(record.time_commitment),
            customized_tips=customized_tips(record.learning_style),
        )
        logger.info(
            "Generated recommendations: primary=%s level=%s",
            bundle.primary_skill,
            bundle.experience_level,
        )
        return bundle
