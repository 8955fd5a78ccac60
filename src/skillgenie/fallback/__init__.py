"""Locally synthesized substitutes for remote content."""

from skillgenie.fallback.content import fallback_analytics, fallback_roadmap
from skillgenie.fallback.quiz import QUESTION_BANK, fallback_questions, fallback_quiz

__all__ = [
    "QUESTION_BANK",
    "fallback_analytics",
    "fallback_questions",
    "fallback_quiz",
    "fallback_roadmap",
]
