"""Async client for the SkillGenie content backend."""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from skillgenie.errors import NetworkError, RemoteError
from skillgenie.models.content import (
    ApiEnvelope,
    MarketAnalytics,
    Quiz,
    Roadmap,
    VideoRecommendations,
    VideoSearchResults,
)
from skillgenie.models.questionnaire import QuestionnaireRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_user_profile(record: QuestionnaireRecord | None) -> dict | None:
    """Subset of a questionnaire sent along with analytics requests."""
    if record is None:
        return None
    return {
        "education": record.education,
        "experience": record.experience,
        "skills": list(record.current_skills),
        "interests": list(record.interests),
        "careerGoals": record.career_goals,
        "preferredDomains": list(record.preferred_domains),
    }


class ContentClient:
    """Async HTTP client for roadmap, analytics, quiz and video endpoints.

    Each call issues exactly one request. Failures surface as NetworkError
    (no response) or RemoteError (error status, ``success: false`` or an
    unusable payload); retrying or falling back is the caller's decision.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> ContentClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        *,
        json: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        """Send one request and return the envelope's ``data``."""
        url = f"{self.base_url}{path}"
        logger.info("%s %s", method, url)
        try:
            response = await self._http.request(
                method,
                url,
                json=json,
                params=params,
                headers={"Accept": "application/json"},
            )
        except httpx.RequestError as e:
            logger.error("Request to %s failed", url, exc_info=True)
            raise NetworkError(f"Failed to {action}: {e}") from e

        try:
            body: Any = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            message = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("error")
            raise RemoteError(
                message or f"HTTP {response.status_code}: Failed to {action}",
                status_code=response.status_code,
            )

        try:
            envelope = ApiEnvelope.model_validate(body)
        except ValidationError as e:
            raise RemoteError(
                f"Invalid response while trying to {action}",
                status_code=response.status_code,
            ) from e

        if not envelope.success or envelope.data is None:
            message = envelope.message or getattr(envelope, "error", None)
            raise RemoteError(
                message or f"Failed to {action}",
                status_code=response.status_code,
            )
        return envelope.data

    @staticmethod
    def _parse(model: type[ModelT], data: Any, action: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed payload while trying to %s", action, exc_info=True)
            raise RemoteError(f"Malformed data while trying to {action}") from e

    async def generate_roadmap(
        self,
        skill: str,
        level: str = "beginner",
        duration: str = "3-6 months",
    ) -> Roadmap:
        """Ask the backend to generate a roadmap for ``skill``."""
        action = "generate roadmap"
        data = await self._request(
            "POST",
            "/api/roadmaps/generate/dynamic",
            action,
            json={"skill": skill, "level": level, "duration": duration},
        )
        return self._parse(Roadmap, data, action)

    async def generate_analytics(
        self,
        skill: str,
        location: str = "Global",
        user_profile: QuestionnaireRecord | dict | None = None,
    ) -> MarketAnalytics:
        """Ask the backend for market analytics of ``skill`` in ``location``."""
        if isinstance(user_profile, QuestionnaireRecord):
            user_profile = build_user_profile(user_profile)
        action = "generate analytics"
        data = await self._request(
            "POST",
            "/api/analytics/market/dynamic",
            action,
            json={"skill": skill, "location": location, "userProfile": user_profile},
        )
        return self._parse(MarketAnalytics, data, action)

    async def get_quiz(self, chapter: int | str, skill: str) -> Quiz:
        action = "fetch quiz"
        data = await self._request(
            "GET",
            f"/api/quizzes/chapter/{quote(str(chapter), safe='')}",
            action,
            params={"skill": skill},
        )
        return self._parse(Quiz, data, action)

    async def get_video_recommendations(
        self,
        skill: str,
        level: str = "beginner",
        *,
        safe_search: str = "strict",
        region_code: str = "US",
    ) -> VideoRecommendations:
        action = "get skill recommendations"
        data = await self._request(
            "GET",
            f"/api/youtube/recommendations/skill/{quote(skill, safe='')}",
            action,
            params={"level": level, "safeSearch": safe_search, "regionCode": region_code},
        )
        return self._parse(VideoRecommendations, data, action)

    async def search_videos(
        self,
        query: str,
        max_results: int = 5,
        *,
        safe_search: str = "strict",
        order: str = "relevance",
    ) -> VideoSearchResults:
        action = "search videos"
        data = await self._request(
            "GET",
            "/api/youtube/search",
            action,
            params={
                "q": query,
                "maxResults": max_results,
                "safeSearch": safe_search,
                "order": order,
            },
        )
        return self._parse(VideoSearchResults, data, action)

    async def list_roadmaps(self) -> list[Roadmap]:
        action = "fetch roadmaps"
        data = await self._request("GET", "/api/roadmaps", action)
        if isinstance(data, dict):
            data = data.get("roadmaps", [])
        return [self._parse(Roadmap, item, action) for item in data]

    async def get_roadmap(self, roadmap_id: str) -> Roadmap:
        action = "fetch roadmap details"
        data = await self._request(
            "GET", f"/api/roadmaps/{quote(str(roadmap_id), safe='')}", action
        )
        return self._parse(Roadmap, data, action)

    async def update_progress(
        self,
        roadmap_id: str,
        chapter_id: int,
        progress: int,
        hours_spent: float,
    ) -> dict:
        """Record chapter progress. Returns the backend's ``data`` as-is."""
        return await self._request(
            "PUT",
            f"/api/roadmaps/{quote(str(roadmap_id), safe='')}/progress",
            "update progress",
            json={"chapterId": chapter_id, "progress": progress, "hoursSpent": hours_spent},
        )
