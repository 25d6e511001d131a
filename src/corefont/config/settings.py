"""Configuration settings for Corefont."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """Format of the generated artifact."""

    PYTHON = "python"
    JSON = "json"

    @property
    def default_filename(self) -> str:
        if self is OutputFormat.JSON:
            return "core_font_metrics.json"
        return "core_font_metrics.py"


class SourceConfig(BaseModel):
    """Configuration for locating and reading AFM files."""

    extension: str = Field(
        default=".afm",
        description="File extension of font metric files (case-sensitive)",
    )
    encoding: str = Field(
        default="latin-1",
        description="Text encoding used to read AFM files",
    )

    @field_validator("extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        if len(value) < 2 or not value.startswith("."):
            raise ValueError("extension must start with '.' and name a suffix")
        return value


class ParserConfig(BaseModel):
    """Configuration for AFM parsing."""

    reject_duplicate_glyphs: bool = Field(
        default=False,
        description="Treat a repeated glyph name in CharMetrics as corrupt (default: last wins)",
    )


class OutputConfig(BaseModel):
    """Configuration for the generated artifact."""

    path: Path | None = Field(
        default=None,
        description="Output path (None = default filename for the format)",
    )
    format: OutputFormat = Field(
        default=OutputFormat.PYTHON,
        description="Artifact format",
    )
    debug: bool = Field(
        default=False,
        description="Print the generated artifact instead of writing it",
    )

    def resolve_path(self) -> Path:
        """Get the output path, falling back to the format's default filename."""
        if self.path is not None:
            return self.path
        return Path(self.format.default_filename)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return value.upper()


class CoreFontSettings(BaseModel):
    """Main application settings."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CoreFontSettings:
    """Get default application settings."""
    return CoreFontSettings()
