"""Recommendation resolution over the stored questionnaire."""

from skillgenie.recommend.resolver import RecommendationResolver, map_domains_to_skills

__all__ = ["RecommendationResolver", "map_domains_to_skills"]
