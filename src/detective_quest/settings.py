"""Environment-level configuration for Detective Quest.

Values come from the process environment, which `main` fills from a
`.env` file via python-dotenv before anything reads it.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from detective_quest.suspect_index import DEFAULT_CAPACITY


logger = logging.getLogger(__name__)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number, using {default}")
        return default
    if value < minimum:
        logger.warning(f"{name}={value} is below {minimum}, using {default}")
        return default
    return value


@dataclass
class GameSettings:
    """Game and deployment settings."""

    debug: bool = False
    index_capacity: int = DEFAULT_CAPACITY
    llm_model: Optional[str] = None
    max_retries: int = 3
    openai_api_key: Optional[str] = None
    google_api_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "GameSettings":
        """Build settings from environment variables."""
        return cls(
            debug=_env_flag("DETECTIVE_DEBUG"),
            index_capacity=_env_int("DETECTIVE_INDEX_CAPACITY", DEFAULT_CAPACITY, minimum=1),
            llm_model=os.getenv("DETECTIVE_LLM_MODEL") or None,
            max_retries=_env_int("DETECTIVE_MAX_RETRIES", 3),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            google_api_key=os.getenv("GOOGLE_API_KEY"),
        )

    def has_llm_key(self) -> bool:
        return bool(self.openai_api_key or self.google_api_key)
