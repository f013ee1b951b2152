# common/config.py

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the project root directory (assuming this file is in project_root/common/)
# This allows .env to be loaded from the project root.
PROJECT_ROOT = Path(__file__).parent.parent.resolve()


class Settings(BaseSettings):
    """
    Defines and loads all application settings from environment variables
    and/or a .env file.
    """
    # --- System & Server Configuration ---
    # Logging level for the application (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    LOG_LEVEL: str = "INFO"

    # Name advertised by the MCP server during initialization.
    MCP_SERVER_NAME: str = "workspace-init-mcp"

    # stdio is what editor clients spawn; streamable-http is for hosted use.
    MCP_TRANSPORT: Literal["stdio", "streamable-http"] = "stdio"

    # Only used by the streamable-http transport.
    MCP_SERVER_HOST: str = "127.0.0.1"
    MCP_SERVER_PORT: int = 8080

    # --- Recommendation Caps ---
    # Direct queries (recommend_agent_skills tool).
    RECOMMEND_MAX_AGENTS: int = 10
    RECOMMEND_MAX_SKILLS: int = 15

    # Workspace initialization (files planned under .github/).
    WORKSPACE_MAX_AGENTS: int = 8
    WORKSPACE_MAX_SKILLS: int = 12

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore' # Ignore extra fields from .env file
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns a cached instance of the application settings.

    The lru_cache decorator ensures that the Settings object is created only
    once, the first time this function is called. Tests that change the
    environment should call get_settings.cache_clear() first.
    """
    return Settings()
