"""
Configuration for topograph graphs.

All settings can be overridden via environment variables with TOPOGRAPH_ prefix.
Example: TOPOGRAPH_SORTED_OUTPUT=true
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Directed graph configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TOPOGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    sorted_output: bool = Field(
        default=False,
        description="Return successor and predecessor lists sorted by identifier",
    )

    log_traversals: bool = Field(
        default=True,
        description="Emit a debug record summarizing each closure traversal",
    )
