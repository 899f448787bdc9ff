"""
Launcher Configuration
======================
Centralized settings for the launcher ranking engine.

Values come from (lowest to highest priority):
1. Defaults declared on ``Settings``
2. Environment variables prefixed with ``LAUNCHER_``
3. Keyword arguments passed to ``Settings(...)`` (tests, embedding hosts)
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.shuangpin import SHUANGPIN_SCHEMES

# -----------------------------------------------------------------------------
# Ranking defaults
# -----------------------------------------------------------------------------

# Fields are listed by importance; lower weight = more important field.
DEFAULT_FIELD_WEIGHTS: Dict[str, int] = {
    "name": 0,
    "source": 100,
    "launch_path": 200,
}

# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------

class Settings(BaseSettings):
    """Launcher settings, overridable through ``LAUNCHER_*`` env vars."""

    # Result sizes
    max_results: int = Field(400, ge=1)
    max_recommended: int = Field(5, ge=1)

    # Recommendation cache
    arc_capacity: int = Field(5, ge=1)
    history_file_name: str = "launcher_app_history.json"
    data_dir: Optional[Path] = None

    # Matching
    field_weights: Dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_FIELD_WEIGHTS))
    shuangpin_schemes: List[str] = Field(default_factory=lambda: ["xiaohe", "ziranma"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="LAUNCHER_", extra="ignore")

    @field_validator("field_weights")
    @classmethod
    def _weights_cover_fields(cls, value: Dict[str, int]) -> Dict[str, int]:
        missing = [name for name in DEFAULT_FIELD_WEIGHTS if name not in value]
        if missing:
            raise ValueError(f"field_weights missing entries for: {', '.join(missing)}")
        return value

    @field_validator("shuangpin_schemes")
    @classmethod
    def _schemes_are_registered(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in SHUANGPIN_SCHEMES]
        if unknown:
            raise ValueError(
                f"unknown shuangpin schemes: {', '.join(unknown)} "
                f"(available: {', '.join(sorted(SHUANGPIN_SCHEMES))})"
            )
        return value


# Singleton settings instance
settings = Settings()
