"""
Configuration loader.

- Reads env vars (.env supported by deploy)
- Provides strongly-typed Settings
- Holds logging + input size knobs
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional


def _get(name: str, default: Optional[str] = None) -> str:
    v = os.environ.get(name, default)
    if v is None:
        raise RuntimeError(f"Missing required env: {name}")
    return v


@dataclass(frozen=True)
class Settings:
    APP_ENV: str                 # dev | test | prod
    SECRET_KEY: str

    # Logging
    LOG_LEVEL: str
    LOG_DIR: str                 # "" disables file handlers

    # Input limits (enforced by AnswerService)
    MAX_FAQ_CHARS: int
    MAX_QUESTION_CHARS: int

    # Server
    BASE_URL: str


def load_settings(override: dict | None = None) -> Settings:
    o = override or {}
    return Settings(
        APP_ENV=o.get("APP_ENV", _get("APP_ENV", "dev")),
        SECRET_KEY=o.get("SECRET_KEY", _get("SECRET_KEY", "change-me")),

        LOG_LEVEL=str(o.get("LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO"))).upper(),
        LOG_DIR=o.get("LOG_DIR", os.environ.get("LOG_DIR", "logs")),

        MAX_FAQ_CHARS=int(o.get("MAX_FAQ_CHARS", os.environ.get("MAX_FAQ_CHARS", 20000))),
        MAX_QUESTION_CHARS=int(o.get("MAX_QUESTION_CHARS", os.environ.get("MAX_QUESTION_CHARS", 1000))),

        BASE_URL=o.get("BASE_URL", os.environ.get("BASE_URL", "http://localhost:10000")),
    )
