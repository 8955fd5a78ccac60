"""Static lookup tables consulted by the recommendation resolver."""

from __future__ import annotations

DEFAULT_SKILL = "Data Science"
DEFAULT_LOCATION = "India"

DOMAIN_SKILL_MAP: dict[str, str] = {
    "ai_ml": "Machine Learning",
    "web_dev": "Web Development",
    "data_science": "Data Science",
    "cybersecurity": "Cybersecurity",
    "cloud_computing": "Cloud Computing",
    "mobile_dev": "Mobile Development",
    "ui_ux": "UI/UX Design",
    "product_management": "Product Management",
}

EXPERIENCE_LEVEL_MAP: dict[str, str] = {
    "beginner": "beginner",
    "some_experience": "intermediate",
    "experienced": "advanced",
    "expert": "advanced",
}
DEFAULT_EXPERIENCE_LEVEL = "beginner"

TIME_ESTIMATE_MAP: dict[str, str] = {
    "part_time": "6-8 months",
    "full_time": "3-4 months",
    "weekend": "8-12 months",
    "intensive": "2-3 months",
}
DEFAULT_TIME_ESTIMATE = "4-6 months"

# (domain, skill, reason, priority); only these domains feed the learning path
LEARNING_PATH_WHITELIST: tuple[tuple[str, str, str, int], ...] = (
    ("mobile_dev", "Mobile Development", "Based on your interest in mobile development", 1),
    ("data_science", "Data Science", "Based on your interest in data science", 2),
    ("ai_ml", "Machine Learning", "Based on your interest in AI & ML", 3),
)
DEFAULT_LEARNING_PATH = ("Web Development", "Great starting point for beginners", 1)

LEARNING_STYLE_TIPS: dict[str, tuple[str, str]] = {
    "visual": (
        "Focus on video tutorials and visual diagrams",
        "Use mind maps and flowcharts for complex concepts",
    ),
    "practical": (
        "Build projects while learning each concept",
        "Practice coding exercises daily",
    ),
    "reading": (
        "Read documentation and technical blogs",
        "Take detailed notes and create summaries",
    ),
    "mixed": (
        "Combine videos, projects, and reading for best results",
        "Adapt your learning method based on the topic",
    ),
}

MARKET_TRENDS: dict[str, list[str]] = {
    "India": [
        "AI/ML skills are in high demand",
        "Full-stack development is growing rapidly",
        "DevOps and Cloud skills are essential",
        "Data Science remains popular",
    ],
    "USA": [
        "Machine Learning Engineers are highly sought",
        "React/Node.js developers in demand",
        "Cybersecurity skills are premium",
        "Mobile development is stable",
    ],
}

SALARY_RANGES: dict[str, dict[str, str]] = {
    "India": {
        "Data Science": "₹8-25 LPA",
        "Web Development": "₹6-20 LPA",
        "Machine Learning": "₹10-30 LPA",
        "Mobile Development": "₹7-22 LPA",
    },
    "USA": {
        "Data Science": "$90K-180K",
        "Web Development": "$80K-160K",
        "Machine Learning": "$120K-250K",
        "Mobile Development": "$85K-170K",
    },
}

JOB_OPPORTUNITIES: dict[str, dict[str, str]] = {
    "India": {
        "Data Science": "High demand in Bangalore, Hyderabad, Pune",
        "Web Development": "Excellent opportunities across all cities",
        "Machine Learning": "Growing rapidly in tech hubs",
        "Mobile Development": "Strong demand in startups and enterprises",
    },
    "USA": {
        "Data Science": "High demand in Silicon Valley, New York, Seattle",
        "Web Development": "Strong opportunities nationwide",
        "Machine Learning": "Premium roles in tech giants",
        "Mobile Development": "Stable demand across industries",
    },
}

LOCATION_SKILLS: dict[str, list[str]] = {
    "India": [
        "Python for Data Science",
        "React.js for Web Development",
        "AWS/Azure for Cloud",
        "Machine Learning with TensorFlow",
    ],
    "USA": [
        "Advanced Machine Learning",
        "Full-Stack JavaScript",
        "DevOps and Kubernetes",
        "AI/ML Engineering",
    ],
}


def _for_location(table: dict, location: str | None):
    return table.get(location or DEFAULT_LOCATION, table[DEFAULT_LOCATION])


def market_trends(location: str | None) -> list[str]:
    return list(_for_location(MARKET_TRENDS, location))


def salary_ranges(location: str | None) -> dict[str, str]:
    return dict(_for_location(SALARY_RANGES, location))


def job_opportunities(location: str | None) -> dict[str, str]:
    return dict(_for_location(JOB_OPPORTUNITIES, location))


def location_based_skills(location: str | None) -> list[str]:
    return list(_for_location(LOCATION_SKILLS, location))
