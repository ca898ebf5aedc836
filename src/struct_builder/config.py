import logging
import os
import re

from pydantic import BaseModel, field_validator

_WRAPPER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(::[A-Za-z_][A-Za-z0-9_]*)*$")


class Settings(BaseModel):
    optional_wrapper: str = "Option"
    log_level: str = "WARNING"

    @field_validator("optional_wrapper")
    @classmethod
    def _check_wrapper(cls, value: str) -> str:
        value = value.strip()
        if not _WRAPPER_RE.match(value):
            raise ValueError(f"Invalid optional wrapper name '{value}'")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    return Settings(
        optional_wrapper=os.getenv("STRUCT_BUILDER_OPTIONAL_WRAPPER", "Option"),
        log_level=os.getenv("STRUCT_BUILDER_LOG_LEVEL", "WARNING"),
    )
