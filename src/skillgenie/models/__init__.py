"""Data models for preferences, recommendations and remote content."""

from skillgenie.models.content import (
    ApiEnvelope,
    MarketAnalytics,
    MarketOverview,
    Quiz,
    QuizQuestion,
    Roadmap,
    RoadmapChapter,
    VideoChannel,
    VideoRecommendation,
    VideoRecommendations,
    VideoSearchResults,
)
from skillgenie.models.questionnaire import (
    QuestionnaireRecord,
    StoredRecord,
    validate_submission,
)
from skillgenie.models.recommendation import (
    LearningPathItem,
    LearningPreferences,
    LocationInsights,
    RecommendationBundle,
)

__all__ = [
    "ApiEnvelope",
    "LearningPathItem",
    "LearningPreferences",
    "LocationInsights",
    "MarketAnalytics",
    "MarketOverview",
    "QuestionnaireRecord",
    "Quiz",
    "QuizQuestion",
    "RecommendationBundle",
    "Roadmap",
    "RoadmapChapter",
    "StoredRecord",
    "VideoChannel",
    "VideoRecommendation",
    "VideoRecommendations",
    "VideoSearchResults",
    "validate_submission",
]
