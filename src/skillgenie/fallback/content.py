"""Placeholder roadmaps and market analytics built from local tables."""

from __future__ import annotations

from skillgenie.models.content import MarketAnalytics, MarketOverview, Roadmap, RoadmapChapter
from skillgenie.recommend import lookup_tables as tables

DEFAULT_ESTIMATED_HOURS = 240
FALLBACK_TIMESTAMP = "1970-01-01T00:00:00Z"

_CHAPTER_TEMPLATES = (
    ("Foundations of {skill}", "Core vocabulary, tooling and setup."),
    ("Core Concepts", "The building blocks every {skill} practitioner uses."),
    ("Hands-on Practice", "Guided exercises applying {skill} to small problems."),
    ("Intermediate Techniques", "Patterns and practices for real-world {skill} work."),
    ("Project Work", "Build a portfolio project end to end."),
    ("Career Readiness", "Interview preparation and next steps in {skill}."),
)


def fallback_roadmap(
    skill: str,
    level: str = "beginner",
    duration: str = "3-6 months",
) -> Roadmap:
    """Generic roadmap outline for ``skill``, evenly splitting the hours."""
    per_chapter = DEFAULT_ESTIMATED_HOURS // len(_CHAPTER_TEMPLATES)
    chapters = [
        RoadmapChapter(
            id=i,
            title=title.format(skill=skill),
            description=description.format(skill=skill),
            estimated_hours=per_chapter,
        )
        for i, (title, description) in enumerate(_CHAPTER_TEMPLATES, start=1)
    ]
    return Roadmap(
        title=f"{skill} Learning Roadmap",
        skill=skill,
        level=level,
        duration=duration,
        chapters=chapters,
        estimated_hours=DEFAULT_ESTIMATED_HOURS,
    )


def fallback_analytics(
    skill: str,
    location: str | None = None,
    timestamp: str = FALLBACK_TIMESTAMP,
) -> MarketAnalytics:
    """Market snapshot for ``skill`` from the static location profiles.

    Unknown locations use the default profile's figures but keep the
    requested location name.
    """
    location = location or tables.DEFAULT_LOCATION
    salaries = tables.salary_ranges(location)
    opportunities = tables.job_opportunities(location)
    return MarketAnalytics(
        skill=skill,
        location=location,
        market_overview=MarketOverview(
            average_salary=salaries.get(skill, "Not available"),
            demand_level="High" if skill in opportunities else "Unknown",
        ),
        graph_data={
            "marketTrends": tables.market_trends(location),
            "jobOpportunities": opportunities.get(skill, ""),
            "recommendedSkills": tables.location_based_skills(location),
        },
        timestamp=timestamp,
    )
