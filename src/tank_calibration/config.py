"""
Configuration management for the tank calibration engine.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with TANKCAL_ prefix.

Settings only influence parsing conventions and presentation defaults;
the interpolation and validation rules are fixed.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tank_calibration.core.types import ColumnOrder

load_dotenv()


class ParserSettings(BaseSettings):
    """Settings for table dialect detection."""

    model_config = SettingsConfigDict(env_prefix="TANKCAL_PARSER_")

    # First line marking the whitespace-separated ATG tank table dialect
    tagged_table_sentinel: str = Field(default="[FUSION_ATG_TANK_TABLE]", min_length=1)

    # Headers synthesized for files without a header row
    default_headers: tuple[str, str] = Field(default=("Height", "Volume"))

    @field_validator("tagged_table_sentinel")
    @classmethod
    def normalize_sentinel(cls, v: str) -> str:
        """Sentinel comparison is case-insensitive on trimmed text."""
        return v.strip().upper()


class StrappingSettings(BaseSettings):
    """Settings for strapping chart resampling."""

    model_config = SettingsConfigDict(env_prefix="TANKCAL_STRAPPING_")

    num_points: int = Field(default=300, ge=2, le=100_000)


class ReportSettings(BaseSettings):
    """Presentation defaults handed to report renderers."""

    model_config = SettingsConfigDict(env_prefix="TANKCAL_REPORT_")

    decimal_places: int = Field(default=2, ge=0, le=10)
    column_order: ColumnOrder = Field(default=ColumnOrder.HEIGHT_VOLUME)


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="TANKCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Tank Calibration Engine")
    debug: bool = Field(default=False)
    log_level: str = Field(default="WARNING")

    parser: ParserSettings = Field(default_factory=ParserSettings)
    strapping: StrappingSettings = Field(default_factory=StrappingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names in any case."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
