"""Runtime settings for the greenside services."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOLE_COUNT = 18


class _Settings(BaseSettings):
    data_dir: str = Field(
        default="data/users",
        validation_alias=AliasChoices("GREENSIDE_DATA_DIR", "data_dir"),
    )
    # Yards added per yard of rise between player and target.
    elevation_factor: float = Field(
        default=1.0,
        validation_alias=AliasChoices("GREENSIDE_ELEVATION_FACTOR", "elevation_factor"),
    )
    default_hole_count: int = Field(
        default=DEFAULT_HOLE_COUNT,
        ge=1,
        validation_alias=AliasChoices(
            "GREENSIDE_DEFAULT_HOLE_COUNT", "default_hole_count"
        ),
    )
    course_api_url: str = Field(
        default="https://api.golfcourseapi.com/v1/search",
        validation_alias=AliasChoices("GREENSIDE_COURSE_API_URL", "course_api_url"),
    )
    course_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOLFCOURSEAPI_KEY", "course_api_key"),
    )
    http_timeout_s: float = Field(
        default=10.0,
        gt=0,
        validation_alias=AliasChoices("GREENSIDE_HTTP_TIMEOUT_S", "http_timeout_s"),
    )
    location_min_distance_m: float = Field(
        default=2.0,
        ge=0,
        validation_alias=AliasChoices(
            "GREENSIDE_LOCATION_MIN_DISTANCE_M", "location_min_distance_m"
        ),
    )
    location_min_interval_s: float = Field(
        default=1.0,
        ge=0,
        validation_alias=AliasChoices(
            "GREENSIDE_LOCATION_MIN_INTERVAL_S", "location_min_interval_s"
        ),
    )
    # Rounds untouched for this long are ended; 0 keeps them forever.
    session_idle_ttl_s: float = Field(
        default=4 * 60 * 60,
        ge=0,
        validation_alias=AliasChoices(
            "GREENSIDE_SESSION_IDLE_TTL_S", "session_idle_ttl_s"
        ),
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("elevation_factor")
    @classmethod
    def _non_negative_factor(cls, value: float) -> float:
        if value < 0:
            raise ValueError("elevation factor must be >= 0")
        return value


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = [
    "DEFAULT_HOLE_COUNT",
    "get_settings",
    "reset_settings_cache",
]
