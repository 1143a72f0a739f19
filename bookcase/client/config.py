"""
Client configuration.

Loads the API location and request timeout from environment variables and
an optional ``.env`` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for :class:`bookcase.client.BookcaseClient`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    api_url: str = Field(
        default="http://localhost:8000/api/v1",
        description="Base URL of the Bookcase API, including the version prefix",
        alias="BOOKCASE_API_URL",
    )
    api_timeout: float = Field(
        default=10.0,
        description="Request timeout in seconds",
        alias="BOOKCASE_API_TIMEOUT",
    )
