import os

from pydantic import BaseModel, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}. Got '{value}'."
            )
        return level

    @classmethod
    def load(cls) -> "Settings":
        overrides = {}
        for field in cls.model_fields:
            value = os.getenv(f"FUNGI_{field}")
            if value is not None:
                overrides[field] = value
        return cls(**overrides)
