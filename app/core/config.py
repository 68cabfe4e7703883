"""
Core configuration and settings for the Marketplace API
Following FastAPI best practices for configuration management
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_JWT_SECRET = "change_me_jwt_secret"
DEVELOPMENT_ENVIRONMENTS = ("development", "test")


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields to be ignored
    )

    # Service information
    service_name: str = Field(default="marketplace-api")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")
    api_prefix: str = Field(default="/api/v1")

    # Server configuration
    port: int = Field(default=5000)
    host: str = Field(default="0.0.0.0")

    # Database configuration
    mongodb_uri: Optional[str] = Field(default=None)
    mongodb_host: str = Field(default="localhost")
    mongodb_port: int = Field(default=27017)
    mongodb_username: Optional[str] = Field(default=None)
    mongodb_password: Optional[str] = Field(default=None)
    mongodb_database: str = Field(default="marketplace")

    @property
    def mongodb_url(self) -> str:
        """Construct MongoDB connection URL"""
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.mongodb_username and self.mongodb_password:
            return (
                f"mongodb://{self.mongodb_username}:{self.mongodb_password}"
                f"@{self.mongodb_host}:{self.mongodb_port}/{self.mongodb_database}?authSource=admin"
            )
        return f"mongodb://{self.mongodb_host}:{self.mongodb_port}/{self.mongodb_database}"

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/marketplace-api.log")

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID")
    telemetry_enabled: bool = Field(default=True)

    # JWT Authentication configuration
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration: int = Field(default=7 * 24 * 3600)  # seconds
    jwt_refresh_expiration: int = Field(default=30 * 24 * 3600)  # seconds
    jwt_issuer: str = Field(default="marketplace-api")
    jwt_audience: str = Field(default="api-users")

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Listing defaults
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)


# Global config instance
config = Config()
