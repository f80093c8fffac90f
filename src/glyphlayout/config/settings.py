"""Configuration settings for Glyphlayout."""

from enum import IntFlag
from pathlib import Path

from pydantic import BaseModel, Field


class TypoFlags(IntFlag):
    """Typography flags accepted at session construction."""

    NONE = 0x0
    KERNING = 0x1
    LIGATURES = 0x2
    DEFAULT = KERNING | LIGATURES


class ShapingConfig(BaseModel):
    """Configuration for a shaping session."""

    script_code: int = Field(
        default=0,
        ge=0,
        description="Legacy script code (index into the script tag table)",
    )
    language_code: int = Field(
        default=0,
        ge=0,
        description="Legacy language code (index into the language tag table)",
    )
    typo_flags: int = Field(
        default=int(TypoFlags.DEFAULT),
        ge=0,
        le=int(TypoFlags.DEFAULT),
        description="Typography flags (kerning=0x1, ligatures=0x2)",
    )
    filter_zero_width: bool = Field(
        default=True,
        description="Drop default-ignorable characters so they become filler records",
    )
    pixels_per_em: float | None = Field(
        default=None,
        gt=0.0,
        description="Pixels per em for position scaling (None = font units)",
    )

    @property
    def flags(self) -> TypoFlags:
        """Typography flags as a ``TypoFlags`` value."""
        return TypoFlags(self.typo_flags)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class LayoutSettings(BaseModel):
    """Main application settings."""

    shaping: ShapingConfig = Field(default_factory=ShapingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LayoutSettings:
    """Get default application settings."""
    return LayoutSettings()
