"""Fetch remote content, falling back to local placeholders on failure."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, TypeVar

from skillgenie.clients.content_client import ContentClient
from skillgenie.errors import ContentError
from skillgenie.fallback.content import fallback_analytics, fallback_roadmap
from skillgenie.fallback.quiz import fallback_quiz
from skillgenie.models.content import MarketAnalytics, Quiz, Roadmap, VideoRecommendations
from skillgenie.recommend.resolver import RecommendationResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")

REMOTE = "remote"
FALLBACK = "fallback"


@dataclass
class ContentResult(Generic[T]):
    """Outcome of one content request.

    ``content`` is None only when the request failed and the content kind has
    no fallback. ``error`` is set whenever the remote call failed, even if
    fallback content was substituted.
    """

    kind: str
    request_key: tuple
    content: T | None = None
    error: ContentError | None = None
    source: str = REMOTE

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def used_fallback(self) -> bool:
        return self.source == FALLBACK


@dataclass
class RequestTracker:
    """Remembers the latest parameters requested per content kind.

    Requests are never cancelled or de-duplicated; a caller holding a late
    response asks ``is_current`` before applying it.
    """

    latest: dict[str, tuple] = field(default_factory=dict)

    def begin(self, kind: str, key: tuple) -> tuple:
        self.latest[kind] = key
        return key

    def is_current(self, kind: str, key: tuple) -> bool:
        return self.latest.get(kind) == key


class ContentService:
    """Two-step pipeline: remote fetch, then explicit fallback on failure."""

    def __init__(
        self,
        client: ContentClient,
        resolver: RecommendationResolver,
        *,
        quiz_question_count: int = 10,
        quiz_time_limit: int = 600,
        quiz_passing_score: int = 70,
        quiz_points: int = 150,
        tracker: RequestTracker | None = None,
    ):
        self.client = client
        self.resolver = resolver
        self.quiz_question_count = quiz_question_count
        self.quiz_time_limit = quiz_time_limit
        self.quiz_passing_score = quiz_passing_score
        self.quiz_points = quiz_points
        self.tracker = tracker or RequestTracker()

    async def _fetch(
        self,
        kind: str,
        key: tuple,
        fetch: Callable[[], Awaitable[T]],
        fallback: Callable[[], T] | None,
    ) -> ContentResult[T]:
        self.tracker.begin(kind, key)
        try:
            content = await fetch()
        except ContentError as e:
            logger.warning("Fetching %s %s failed: %s", kind, key, e)
            if fallback is None:
                return ContentResult(kind=kind, request_key=key, error=e)
            return ContentResult(
                kind=kind,
                request_key=key,
                content=fallback(),
                error=e,
                source=FALLBACK,
            )
        return ContentResult(kind=kind, request_key=key, content=content)

    def is_current(self, result: ContentResult[Any]) -> bool:
        """True if no newer request of the same kind was started since."""
        return self.tracker.is_current(result.kind, result.request_key)

    async def fetch_roadmap(
        self,
        skill: str,
        level: str = "beginner",
        duration: str = "3-6 months",
    ) -> ContentResult[Roadmap]:
        return await self._fetch(
            "roadmap",
            (skill, level, duration),
            lambda: self.client.generate_roadmap(skill, level, duration),
            lambda: fallback_roadmap(skill, level, duration),
        )

    async def fetch_analytics(
        self,
        skill: str,
        location: str = "Global",
        user_profile: Any = None,
    ) -> ContentResult[MarketAnalytics]:
        return await self._fetch(
            "analytics",
            (skill, location),
            lambda: self.client.generate_analytics(skill, location, user_profile),
            lambda: fallback_analytics(skill, location),
        )

    async def fetch_quiz(self, skill: str, chapter: int | str = 1) -> ContentResult[Quiz]:
        return await self._fetch(
            "quiz",
            (skill, chapter),
            lambda: self.client.get_quiz(chapter, skill),
            lambda: fallback_quiz(
                skill,
                chapter,
                self.quiz_question_count,
                time_limit=self.quiz_time_limit,
                passing_score=self.quiz_passing_score,
                points=self.quiz_points,
            ),
        )

    async def fetch_videos(
        self,
        skill: str,
        level: str = "beginner",
    ) -> ContentResult[VideoRecommendations]:
        # No local stand-in for video recommendations
        return await self._fetch(
            "videos",
            (skill, level),
            lambda: self.client.get_video_recommendations(skill, level),
            None,
        )

    async def personalized_roadmap(self, duration: str = "3-6 months") -> ContentResult[Roadmap]:
        """Roadmap for the primary skill at the user's experience level."""
        return await self.fetch_roadmap(
            self.resolver.primary_skill(),
            self.resolver.experience_level(),
            duration,
        )

    async def personalized_analytics(self) -> ContentResult[MarketAnalytics]:
        """Analytics for the primary skill in the user's location."""
        return await self.fetch_analytics(
            self.resolver.primary_skill(),
            self.resolver.location_recommendation(),
            self.resolver.store.load(),
        )

    async def personalized_videos(self) -> ContentResult[VideoRecommendations]:
        return await self.fetch_videos(
            self.resolver.primary_skill(),
            self.resolver.experience_level(),
        )
