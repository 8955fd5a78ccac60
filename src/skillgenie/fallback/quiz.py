"""Deterministic placeholder quizzes for when the quiz endpoint fails."""

from __future__ import annotations

from skillgenie.models.content import Quiz, QuizQuestion

DEFAULT_QUESTION_COUNT = 10

# Keyed by exact skill name
QUESTION_BANK: dict[str, tuple[dict, ...]] = {
    "JavaScript": (
        {
            "question": "What is the correct way to declare a variable in JavaScript?",
            "options": [
                "var myVariable = 5;",
                "variable myVariable = 5;",
                "v myVariable = 5;",
                "declare myVariable = 5;",
            ],
            "correct_index": 0,
            "explanation": "In JavaScript, variables are declared using var, let, or const keywords.",
        },
        {
            "question": "Which of the following is NOT a JavaScript data type?",
            "options": ["Number", "String", "Float", "Boolean"],
            "correct_index": 2,
            "explanation": "JavaScript doesn't have a separate Float type. All numbers are of type Number.",
        },
    ),
    "Python": (
        {
            "question": "How do you define a function in Python?",
            "options": [
                "function myFunction():",
                "def myFunction():",
                "func myFunction():",
                "define myFunction():",
            ],
            "correct_index": 1,
            "explanation": "In Python, functions are defined using the 'def' keyword.",
        },
        {
            "question": "Which of the following is used for comments in Python?",
            "options": [
                "// This is a comment",
                "/* This is a comment */",
                "# This is a comment",
                "<!-- This is a comment -->",
            ],
            "correct_index": 2,
            "explanation": "Python uses the # symbol for single-line comments.",
        },
    ),
    "React": (
        {
            "question": "What is JSX in React?",
            "options": [
                "A JavaScript XML syntax extension",
                "A CSS framework",
                "A database query language",
                "A testing library",
            ],
            "correct_index": 0,
            "explanation": (
                "JSX is a syntax extension for JavaScript that allows you to "
                "write HTML-like code in React."
            ),
        },
        {
            "question": "What Hook is used to manage state in functional components?",
            "options": ["useEffect", "useState", "useContext", "useReducer"],
            "correct_index": 1,
            "explanation": "useState is the Hook used to add state to functional components in React.",
        },
    ),
}


def _generic_bank(skill: str) -> tuple[dict, ...]:
    return (
        {
            "question": f"What is a fundamental concept in {skill}?",
            "options": [
                "Core principles and best practices",
                "Random unrelated concepts",
                "Outdated techniques",
                "None of the above",
            ],
            "correct_index": 0,
            "explanation": f"Understanding core principles is essential for mastering {skill}.",
        },
    )


def fallback_questions(
    skill: str,
    chapter: int | str = 1,
    count: int = DEFAULT_QUESTION_COUNT,
) -> list[QuizQuestion]:
    """Build ``count`` questions for ``skill`` from the local bank.

    The bank is cycled to reach ``count``; repeats carry a " (Question N)"
    suffix so they can be told apart. The chapter does not change the
    content; output depends only on the arguments.
    """
    bank = QUESTION_BANK.get(skill) or _generic_bank(skill)
    questions = []
    for i in range(count):
        base = bank[i % len(bank)]
        text = base["question"] if i < len(bank) else f"{base['question']} (Question {i + 1})"
        questions.append(
            QuizQuestion(
                id=i + 1,
                question=text,
                options=list(base["options"]),
                correct_index=base["correct_index"],
                explanation=base["explanation"],
            )
        )
    return questions


def fallback_quiz(
    skill: str,
    chapter: int | str = 1,
    count: int = DEFAULT_QUESTION_COUNT,
    *,
    time_limit: int = 600,
    passing_score: int = 70,
    points: int = 150,
) -> Quiz:
    """Placeholder quiz with the same shape as the quiz endpoint's payload."""
    return Quiz(
        title=f"{skill} Quiz - Chapter {chapter}",
        description=f"Test your understanding of {skill}",
        total_questions=count,
        time_limit=time_limit,
        passing_score=passing_score,
        points=points,
        skill=skill,
        chapter=chapter,
        questions=fallback_questions(skill, chapter, count),
    )
