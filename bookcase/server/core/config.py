"""
Configuration Settings.

This module defines the server configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Bookcase Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Bookcase server host address to bind to",
        alias="BOOKCASE_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="Bookcase server port number",
        alias="BOOKCASE_SERVER_PORT",
    )
    seed_data: bool = Field(
        default=False,
        description="Load the demo catalog at startup when the database is empty",
        alias="BOOKCASE_SEED_DATA",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="BOOKCASE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="BOOKCASE_LOG_FORMAT",
    )
    log_file_enabled: bool = Field(
        default=False,
        description="Also write logs to a file",
        alias="BOOKCASE_LOG_FILE_ENABLED",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file",
        alias="BOOKCASE_LOG_FILE_DIR",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./bookcase.db",
        description="Async SQLAlchemy connection URL for the catalog database",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # CORS Configuration (flat, grouped by the ``cors`` property)
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
