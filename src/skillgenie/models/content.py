"""Pydantic models for remote content responses.

The backend speaks camelCase JSON; models accept either the wire names or
the Python field names and tolerate extra keys the backend adds.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

_LENIENT = {"populate_by_name": True, "extra": "allow"}


class ApiEnvelope(BaseModel):
    """Shared response wrapper: callers must branch on ``success``."""

    success: bool = False
    data: dict | list | None = None
    message: str | None = None

    model_config = {"extra": "allow"}


class RoadmapChapter(BaseModel):
    id: int | str | None = None
    title: str
    description: str = ""
    estimated_hours: float | None = Field(None, alias="estimatedHours")
    topics: list[str] = Field(default_factory=list)

    model_config = _LENIENT


class Roadmap(BaseModel):
    title: str
    skill: str | None = None
    level: str | None = None
    duration: str | None = None
    chapters: list[RoadmapChapter] = Field(default_factory=list)
    estimated_hours: float = Field(240, alias="estimatedHours")

    model_config = _LENIENT

    @property
    def total_chapters(self) -> int:
        return len(self.chapters)


class MarketOverview(BaseModel):
    average_salary: str | float | None = Field(None, alias="averageSalary")
    growth_rate: str | float | None = Field(None, alias="growthRate")
    job_openings: str | int | None = Field(None, alias="jobOpenings")
    demand_level: str | None = Field(None, alias="demandLevel")

    model_config = _LENIENT


class MarketAnalytics(BaseModel):
    skill: str
    location: str
    market_overview: MarketOverview = Field(
        default_factory=MarketOverview, alias="marketOverview"
    )
    graph_data: dict = Field(default_factory=dict, alias="graphData")
    timestamp: str | None = None

    model_config = _LENIENT


class QuizQuestion(BaseModel):
    id: int | str
    question: str
    options: list[str]
    correct_index: int = Field(
        validation_alias=AliasChoices("correctIndex", "correct", "correct_index"),
        serialization_alias="correctIndex",
    )
    explanation: str = ""

    model_config = _LENIENT


class Quiz(BaseModel):
    title: str
    description: str = ""
    total_questions: int = Field(10, alias="totalQuestions")
    time_limit: int = Field(600, alias="timeLimit")  # seconds
    passing_score: int = Field(70, alias="passingScore")  # percent
    points: int = 150
    skill: str | None = None
    chapter: int | str | None = None
    questions: list[QuizQuestion] = Field(default_factory=list)

    model_config = _LENIENT


class VideoChannel(BaseModel):
    id: str | None = None
    title: str | None = None

    model_config = _LENIENT


class VideoRecommendation(BaseModel):
    id: str
    title: str
    thumbnail: str | dict | None = None
    duration: str | None = None
    view_count: str | int | None = Field(None, alias="viewCount")
    channel: VideoChannel | str | None = None
    description: str | None = ""

    model_config = _LENIENT

    @property
    def channel_title(self) -> str | None:
        if isinstance(self.channel, VideoChannel):
            return self.channel.title
        return self.channel


class VideoRecommendations(BaseModel):
    skill: str | None = None
    level: str | None = None
    recommendations: list[VideoRecommendation] = Field(default_factory=list)

    model_config = _LENIENT


class VideoSearchResults(BaseModel):
    videos: list[VideoRecommendation] = Field(default_factory=list)
    total_results: int | None = Field(None, alias="totalResults")
    next_page_token: str | None = Field(None, alias="nextPageToken")

    model_config = _LENIENT
