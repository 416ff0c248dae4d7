"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        user_memory_limit: Maximum chat turns kept per user
        channel_memory_limit: Maximum messages kept per channel
        channel_context_window: Most recent channel messages rendered as context
        channel_context_ttl_minutes: Inactivity before a channel context expires
        memory_sweep_interval_seconds: Period of the background expiry sweep
        decision_history_turns: History turns embedded in the search decision prompt
        search_query_max_length: Longest accepted search query
        knowledge_cutoff: Model knowledge cutoff quoted in the decision prompt
        brave_api_key: Brave Search API key (optional, reported by the CLI)
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    user_memory_limit: int = Field(
        default=15,
        ge=1,
        description="Maximum chat turns kept per user (FIFO)"
    )
    channel_memory_limit: int = Field(
        default=20,
        ge=1,
        description="Maximum messages kept per channel (FIFO)"
    )
    channel_context_window: int = Field(
        default=10,
        ge=1,
        description="Most recent channel messages rendered into the context block"
    )
    channel_context_ttl_minutes: int = Field(
        default=30,
        ge=1,
        description="Inactivity (minutes) after which a channel context is swept"
    )
    memory_sweep_interval_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Seconds between background expiry sweeps"
    )
    decision_history_turns: int = Field(
        default=4,
        ge=0,
        description="History turns embedded in the search decision prompt"
    )
    search_query_max_length: int = Field(
        default=500,
        ge=1,
        description="Maximum length of a search query"
    )
    knowledge_cutoff: str = Field(
        default="janeiro de 2025",
        description="Language model knowledge cutoff quoted in prompts"
    )
    brave_api_key: str | None = Field(
        default=None,
        description="Brave Search API key (primary search provider)"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance - import this throughout the application
settings = Settings()
