"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MODELINE_ prefix (e.g., MODELINE_SCAN_WINDOW=20).

Settings can also be loaded from a .env file in the project root.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MODELINE_ prefix.

    Examples:
        MODELINE_SCAN_WINDOW=20
        MODELINE_PREFIX_MARKERS='[" vim:", " vi:"]'
        MODELINE_REPORT_FILENAME=report.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="MODELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Scanner configuration
    scan_window: int = Field(
        default=50,
        description="Number of leading lines inspected for a modeline",
    )

    prefix_markers: List[str] = Field(
        default=[" geany:", " vi:", " vim:", " ex:"],
        description="Substrings that mark a line as a modeline (leading space included)",
    )

    # Tokenizer configuration
    token_delimiters: str = Field(
        default=": ,",
        description="Characters a modeline is split on; each one is a separator",
    )

    # Document configuration
    default_encoding: str = Field(
        default="UTF-8",
        description="Encoding used to decode a file before its modeline is read",
    )

    # Output configuration
    report_filename: str = Field(
        default="modelines.yaml",
        description="Name of the YAML report written to the output directory",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
