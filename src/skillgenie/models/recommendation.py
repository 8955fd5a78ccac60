"""Pydantic models for resolver output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LearningPathItem(BaseModel):
    skill: str
    reason: str
    priority: int  # 1 = study first


class RecommendationBundle(BaseModel):
    primary_skill: str
    experience_level: str  # beginner, intermediate, advanced
    all_skills: list[str]
    learning_path: list[LearningPathItem]
    time_estimate: str
    customized_tips: list[str]


class LocationInsights(BaseModel):
    location: str
    market_trends: list[str]
    salary_ranges: dict[str, str]
    job_opportunities: dict[str, str]
    recommended_skills: list[str]


class LearningPreferences(BaseModel):
    learning_style: str = "mixed"
    time_commitment: str = "moderate"
    current_skills: list[str] = Field(default_factory=list)
    career_goals: str = ""
