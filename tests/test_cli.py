"""Tests for the typer CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from skillgenie.cli import app
from skillgenie.clients.content_client import ContentClient
from skillgenie.models.content import VideoRecommendations

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the CLI at a throwaway store and an unreachable backend."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SKILLGENIE_API_URL", raising=False)
    (tmp_path / "config.yaml").write_text(
        f"store:\n  db_path: {tmp_path / 'prefs.db'}\n"
        "api:\n  base_url: http://127.0.0.1:9\n  timeout: 1\n"
    )


@pytest.fixture
def answers_file(tmp_path, sample_submission):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(sample_submission))
    return path


class TestQuestionnaireCommands:
    def test_recommend_without_answers(self):
        result = runner.invoke(app, ["recommend"])
        assert result.exit_code == 1
        assert "Complete the questionnaire first" in result.output

    def test_submit_then_recommend(self, answers_file):
        result = runner.invoke(app, ["submit", str(answers_file)])
        assert result.exit_code == 0, result.output
        assert "Saved questionnaire" in result.output

        result = runner.invoke(app, ["recommend"])
        assert result.exit_code == 0, result.output
        assert "Mobile Development" in result.output
        assert "3-4 months" in result.output

    def test_submit_incomplete(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"preferredDomains": ["ai_ml"]}))
        result = runner.invoke(app, ["submit", str(path)])
        assert result.exit_code == 1
        assert "incomplete" in result.output

    def test_submit_incomplete_forced(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"preferredDomains": ["ai_ml"]}))
        result = runner.invoke(app, ["submit", str(path), "--force"])
        assert result.exit_code == 0, result.output

    def test_submit_missing_file(self, tmp_path):
        result = runner.invoke(app, ["submit", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_reset(self, answers_file):
        runner.invoke(app, ["submit", str(answers_file)])
        result = runner.invoke(app, ["reset"])
        assert result.exit_code == 0
        result = runner.invoke(app, ["show"])
        assert "No questionnaire answers saved" in result.output

    def test_location_defaults_to_india(self):
        result = runner.invoke(app, ["location"])
        assert result.exit_code == 0, result.output
        assert "India" in result.output


class TestContentCommands:
    def test_quiz_falls_back_when_backend_down(self):
        result = runner.invoke(app, ["quiz", "--skill", "Python"])
        assert result.exit_code == 0, result.output
        assert "fallback" in result.output
        assert "How do you define a function in Python?" in result.output

    def test_videos_fail_without_fallback(self):
        result = runner.invoke(app, ["videos", "--skill", "Python"])
        assert result.exit_code == 1
        assert "Request failed" in result.output

    def test_videos_show_channel_title(self, monkeypatch):
        async def fake_recommendations(self, skill, level="beginner", **kwargs):
            return VideoRecommendations.model_validate({
                "skill": skill,
                "recommendations": [
                    {
                        "id": "v1",
                        "title": "Python Basics",
                        "channel": {"id": "UC1", "title": "Corey"},
                        "duration": "PT12M",
                        "viewCount": "1500",
                    }
                ],
            })

        monkeypatch.setattr(ContentClient, "get_video_recommendations", fake_recommendations)
        result = runner.invoke(app, ["videos", "--skill", "Python", "--level", "beginner"])
        assert result.exit_code == 0, result.output
        assert "Python Basics - Corey" in result.output
        assert "{'id'" not in result.output
