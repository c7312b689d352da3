"""Configuration settings for Bidiwrap."""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bidiwrap.domain import Direction

HeuristicName = Literal[
    "ltr",
    "rtl",
    "firststrong_ltr",
    "firststrong_rtl",
    "anyrtl_ltr",
]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FormatterConfig(BaseModel):
    """Configuration for a BidiFormatter.

    Frozen: a formatter's context and guards never change once it is built.
    """

    model_config = ConfigDict(frozen=True)

    context_direction: Direction = Field(
        default=Direction.LTR,
        description="Direction of the paragraph the text is inserted into",
    )
    stereo_reset: bool = Field(
        default=True,
        description="Guard the start of the output against preceding content",
    )
    heuristic: HeuristicName = Field(
        default="firststrong_ltr",
        description="Default directionality heuristic",
    )

    @field_validator("heuristic", mode="before")
    @classmethod
    def _normalize_heuristic(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value


class OutputConfig(BaseModel):
    """Configuration for rendering formatted text."""

    html: bool = Field(
        default=False,
        description="Render HTML spans instead of Unicode embedding controls",
    )
    isolate: bool = Field(
        default=True,
        description="Guard content following each item against its trailing edge",
    )
    show_controls: bool = Field(
        default=False,
        description="Print directional controls as visible [NAME] placeholders",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class BidiWrapSettings(BaseModel):
    """Main application settings."""

    formatter: FormatterConfig = Field(default_factory=FormatterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BidiWrapSettings:
    """Get default application settings."""
    return BidiWrapSettings()
