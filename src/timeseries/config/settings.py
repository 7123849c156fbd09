from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from timeseries.errors import SettingsError
from timeseries.utils.load import load_yaml

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

Construction = Literal["lenient", "strict"]


class SeriesSettings(BaseModel):
    construction: Construction = Field(
        default="lenient",
        description="lenient (truncate to increasing prefix) | strict (raise)",
    )
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")

    @field_validator("construction", mode="before")
    @classmethod
    def _normalize_construction(cls, value):
        if value is None:
            return "lenient"
        if isinstance(value, bool):
            return "strict" if value else "lenient"
        name = str(value).strip().lower()
        if name not in {"lenient", "strict"}:
            raise ValueError("construction must be 'lenient' or 'strict'")
        return name

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if value is None:
            return None
        text = str(value).strip().upper()
        if not text:
            return None
        if text not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return text


def load_settings(path: Path | str) -> SeriesSettings:
    """Load settings from YAML, either top-level or under a ``series`` key."""
    data = load_yaml(Path(path))
    block = data.get("series", data)
    if not isinstance(block, dict):
        raise SettingsError(f"'series' in {path} must be a mapping")
    try:
        return SeriesSettings.model_validate(block)
    except ValidationError as exc:
        raise SettingsError(f"Invalid series settings in {path}: {exc}") from exc


def configure_logging(settings: SeriesSettings) -> None:
    """Apply the configured level to the package logger; no handlers are added."""
    if settings.log_level is None:
        return
    logging.getLogger("timeseries").setLevel(settings.log_level)
