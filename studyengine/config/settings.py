from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    local_timezone: str = Field(
        default="",  # Empty means the host's system local zone
        validation_alias="STUDYENGINE_LOCAL_TIMEZONE",
        description="IANA zone treated as the caller's local zone when parsing timestamps",
    )
    log_level: str = Field(default="INFO", validation_alias="STUDYENGINE_LOG_LEVEL")
    log_file: str = Field(
        default="",
        validation_alias="STUDYENGINE_LOG_FILE",
        description="Optional log file path (rotated and compressed)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid STUDYENGINE_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("local_timezone")
    @classmethod
    def validate_local_timezone(cls, value: str) -> str:
        """Validate the zone name; unknown zones fall back to system local."""
        value = value.strip()
        if not value:
            return ""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown STUDYENGINE_LOCAL_TIMEZONE '{value}'. Falling back to the system local zone.")
            return ""
        return value


settings = Settings()


def get_local_zone() -> tzinfo | None:
    """Get the configured local zone.

    Returns:
        ZoneInfo for STUDYENGINE_LOCAL_TIMEZONE, or None meaning
        "system local" (datetime.astimezone() with no argument)
    """
    if settings.local_timezone:
        return ZoneInfo(settings.local_timezone)
    return None
