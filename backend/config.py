import os
from pathlib import Path

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from models.schemas.matching_config import MatchingConfig


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_matching_config(path: str | Path) -> MatchingConfig:
    """Load a MatchingConfig from a YAML file. Raises ValidationError on bad weights."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return MatchingConfig.model_validate(raw)


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "60/minute"

    # Matching engine
    matching: MatchingConfig = MatchingConfig()
    matching_config_path: str = ""  # YAML file, overrides MATCHING__* env vars when set
    default_match_limit: int = 10
    max_match_limit: int = 20

    # Collaborators
    profiles_path: str = "data/sample_profiles.json"
    match_log_path: str = ""  # JSONL analytics sink; in-memory when empty
    match_log_buffer: int = Field(default=1000, ge=1)  # rows kept by the in-memory sink

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }

    @model_validator(mode="after")
    def _apply_matching_file(self) -> "Settings":
        if self.matching_config_path:
            self.matching = load_matching_config(self.matching_config_path)
        return self


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
