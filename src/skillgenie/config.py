"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

API_URL_ENV = "SKILLGENIE_API_URL"


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = "http://localhost:5000"
    timeout: int = 30


@dataclass(frozen=True)
class StoreConfig:
    db_path: str = "~/.skillgenie/preferences.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class QuizConfig:
    question_count: int = 10
    time_limit: int = 600  # seconds
    passing_score: int = 70
    points: int = 150


@dataclass(frozen=True)
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    quiz: QuizConfig = field(default_factory=QuizConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    The ``SKILLGENIE_API_URL`` environment variable overrides ``api.base_url``.
    """
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    api_raw = dict(raw.get("api", {}))
    env_url = os.environ.get(API_URL_ENV)
    if env_url:
        api_raw["base_url"] = env_url

    return AppConfig(
        api=ApiConfig(**api_raw),
        store=StoreConfig(**raw.get("store", {})),
        quiz=QuizConfig(**raw.get("quiz", {})),
    )
