from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    CURRENCY_SYMBOL: str = Field(
        default="$",
        min_length=1,
        max_length=3,
        description="Symbol prefixed to every monetary value in a printed agreement",
    )

    DATE_FORMAT: str = Field(
        default="%m/%d/%Y",
        description="strftime pattern for checkout and due dates in a printed agreement",
        examples=["%m/%d/%Y", "%d.%m.%Y"],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DATE_FORMAT")
    @classmethod
    def validate_date_format(cls, value: str) -> str:
        missing = [d for d in ("%m", "%d", "%Y") if d not in value]
        if missing:
            raise ValueError(
                f"DATE_FORMAT '{value}' must contain {', '.join(missing)}"
            )
        return value


@lru_cache()
def get_settings() -> Settings:
    from rental.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
