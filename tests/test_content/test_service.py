"""Tests for the fetch-then-fallback content pipeline."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from skillgenie.clients.content_client import ContentClient
from skillgenie.content.service import FALLBACK, REMOTE, ContentService, RequestTracker
from skillgenie.errors import NetworkError, RemoteError
from skillgenie.fallback.quiz import QUESTION_BANK
from skillgenie.models.content import Quiz, Roadmap, VideoRecommendations


@pytest.fixture
def mock_client() -> ContentClient:
    return AsyncMock(spec=ContentClient)


@pytest.fixture
def service(mock_client, resolver) -> ContentService:
    return ContentService(mock_client, resolver)


class TestFetch:
    async def test_remote_success(self, service, mock_client):
        mock_client.generate_roadmap.return_value = Roadmap(title="Remote roadmap")
        result = await service.fetch_roadmap("Python", "beginner")

        assert result.ok
        assert result.source == REMOTE
        assert result.content.title == "Remote roadmap"
        mock_client.generate_roadmap.assert_awaited_once_with("Python", "beginner", "3-6 months")

    async def test_roadmap_fallback(self, service, mock_client):
        mock_client.generate_roadmap.side_effect = NetworkError("Failed to generate roadmap")
        result = await service.fetch_roadmap("Python", "advanced")

        assert not result.ok
        assert result.used_fallback
        assert result.content.title == "Python Learning Roadmap"
        assert result.content.level == "advanced"
        assert isinstance(result.error, NetworkError)

    async def test_analytics_fallback(self, service, mock_client):
        mock_client.generate_analytics.side_effect = RemoteError("quota", status_code=429)
        result = await service.fetch_analytics("Data Science", "USA")

        assert result.source == FALLBACK
        assert result.content.market_overview.average_salary == "$90K-180K"
        assert result.error.status_code == 429

    async def test_videos_have_no_fallback(self, service, mock_client):
        mock_client.get_video_recommendations.side_effect = RemoteError("YouTube down", 500)
        result = await service.fetch_videos("Python")

        assert result.content is None
        assert result.source == REMOTE
        assert result.error.message == "YouTube down"

    async def test_unexpected_errors_propagate(self, service, mock_client):
        mock_client.get_quiz.side_effect = RuntimeError("bug")
        with pytest.raises(RuntimeError):
            await service.fetch_quiz("Python", 1)

    async def test_quiz_fallback_uses_configured_count(self, mock_client, resolver):
        service = ContentService(mock_client, resolver, quiz_question_count=4, quiz_points=80)
        mock_client.get_quiz.side_effect = RemoteError("boom", 500)
        result = await service.fetch_quiz("React", 2)

        assert len(result.content.questions) == 4
        assert result.content.points == 80


class TestQuizFailureOverHttp:
    async def test_http_500_falls_back_to_python_bank(self, resolver):
        transport = httpx.MockTransport(
            lambda r: httpx.Response(500, json={"success": False, "message": "Quiz generation failed"})
        )
        async with httpx.AsyncClient(transport=transport) as http:
            service = ContentService(ContentClient("http://backend.test", http_client=http), resolver)
            result = await service.fetch_quiz("Python", 1)

        assert result.error.message == "Quiz generation failed"
        assert result.error.status_code == 500
        assert result.used_fallback

        quiz = result.content
        assert isinstance(quiz, Quiz)
        assert len(quiz.questions) == 10
        bank = QUESTION_BANK["Python"]
        assert quiz.questions[0].question == bank[0]["question"]
        assert quiz.questions[1].question == bank[1]["question"]
        assert quiz.questions[1].options == bank[1]["options"]


class TestPersonalized:
    async def test_uses_resolved_preferences(self, service, mock_client, memory_store, sample_submission):
        memory_store.save({**sample_submission, "location": "USA"})
        mock_client.generate_roadmap.return_value = Roadmap(title="Mobile")
        mock_client.generate_analytics.side_effect = NetworkError("offline")
        mock_client.get_video_recommendations.return_value = VideoRecommendations()

        await service.personalized_roadmap()
        mock_client.generate_roadmap.assert_awaited_once_with(
            "Mobile Development", "advanced", "3-6 months"
        )

        analytics = await service.personalized_analytics()
        args = mock_client.generate_analytics.await_args.args
        assert args[:2] == ("Mobile Development", "USA")
        assert args[2].preferred_domains == ["mobile_dev", "data_science"]
        assert analytics.content.location == "USA"

        await service.personalized_videos()
        mock_client.get_video_recommendations.assert_awaited_once_with(
            "Mobile Development", "advanced"
        )

    async def test_defaults_without_questionnaire(self, service, mock_client):
        mock_client.generate_roadmap.return_value = Roadmap(title="DS")
        await service.personalized_roadmap("6 months")
        mock_client.generate_roadmap.assert_awaited_once_with("Data Science", "beginner", "6 months")


class TestStaleResponses:
    def test_tracker(self):
        tracker = RequestTracker()
        first = tracker.begin("quiz", ("Python", 1))
        assert tracker.is_current("quiz", first)
        tracker.begin("quiz", ("Python", 2))
        assert not tracker.is_current("quiz", first)
        assert not tracker.is_current("roadmap", first)

    async def test_late_response_is_not_current(self, service, mock_client):
        release_slow = asyncio.Event()

        async def slow_then_fast(chapter, skill):
            if chapter == 1:
                await release_slow.wait()
            return Quiz(title=f"{skill} {chapter}")

        mock_client.get_quiz.side_effect = slow_then_fast

        slow = asyncio.create_task(service.fetch_quiz("Python", 1))
        await asyncio.sleep(0)
        fast = await service.fetch_quiz("Python", 2)
        release_slow.set()
        late = await slow

        assert service.is_current(fast)
        assert not service.is_current(late)

    async def test_kinds_tracked_separately(self, service, mock_client):
        mock_client.get_quiz.return_value = Quiz(title="q")
        mock_client.generate_roadmap.return_value = Roadmap(title="r")
        quiz = await service.fetch_quiz("Python", 1)
        await service.fetch_roadmap("Python")
        assert service.is_current(quiz)
