import logging
import os

from pydantic import BaseModel, field_validator

from syntax_scan.core.scan import OutputMode


class Settings(BaseModel):
    log_level: str = "WARNING"
    mode: OutputMode = OutputMode.TREE

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    return Settings.model_validate(
        {
            "log_level": os.getenv("SYNTAX_SCAN_LOG_LEVEL", "WARNING"),
            "mode": os.getenv("SYNTAX_SCAN_MODE", OutputMode.TREE.value),
        }
    )
