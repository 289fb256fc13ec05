import logging
from enum import Enum
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnswerPolicy(str, Enum):
    """How the scoring pass treats an answer that is not a valid choice."""

    wrong = "wrong"  # count it as a wrong answer and continue
    abort = "abort"  # raise and end the session


class Settings(BaseSettings):
    """Application settings sourced from environment variables."""

    project_name: str = "Exam Console"
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("EXAMSYS_LOG_LEVEL", "LOG_LEVEL"),
    )
    invalid_answer_policy: AnswerPolicy = Field(
        default=AnswerPolicy.wrong,
        description="'wrong' scores malformed or out-of-range answers as wrong, 'abort' ends the session",
        validation_alias=AliasChoices("EXAMSYS_INVALID_ANSWER_POLICY", "INVALID_ANSWER_POLICY"),
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", populate_by_name=True
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        """Accept level names in any case; reject names logging does not know."""

        if isinstance(value, str):
            value = value.strip().upper()
            if not isinstance(logging.getLevelName(value), int):
                raise ValueError(f"Unknown log level: {value}")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
