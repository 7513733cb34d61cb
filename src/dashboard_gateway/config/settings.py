"""
Gateway settings and configuration management.

Process-wide configuration loaded from the environment (and an optional
.env file). Provider credentials are optional here: a missing key only
fails the calls of the provider that needs it.
"""
from typing import Optional, List
from functools import lru_cache
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Dashboard gateway settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="Dashboard Gateway")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)

    # CORS Configuration
    cors_origins: List[str] = Field(default=["*"])

    # Provider Credentials
    openweather_api_key: Optional[SecretStr] = Field(default=None)
    alphavantage_api_key: Optional[SecretStr] = Field(default=None)
    news_api_key: Optional[SecretStr] = Field(default=None)
    github_token: Optional[SecretStr] = Field(default=None)

    # Provider Endpoints
    openweather_base_url: str = Field(default="https://api.openweathermap.org/data/2.5")
    alphavantage_base_url: str = Field(default="https://www.alphavantage.co")
    github_base_url: str = Field(default="https://api.github.com")
    news_base_url: str = Field(default="https://newsapi.org/v2")

    # Cache Configuration
    cache_ttl_default: int = Field(default=300, gt=0)  # 5 minutes
    cache_sweep_interval: int = Field(default=60, ge=0)

    # Upstream Call Configuration
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    # Aggregation Configuration
    github_detail_repo_limit: int = Field(default=10, ge=0)
    github_detail_concurrency: int = Field(default=5, gt=0)
    language_breakdown_limit: int = Field(default=5, gt=0)

    # Request Defaults
    default_city: str = Field(default="Toronto")
    default_stocks: str = Field(default="AAPL,GOOGL,MSFT")
    default_news_category: str = Field(default="technology")
    default_news_country: str = Field(default="us")
    default_news_page_size: int = Field(default=10, gt=0)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @staticmethod
    def reveal(secret: Optional[SecretStr]) -> Optional[str]:
        """Unwrap an optional secret, treating blank values as missing."""
        if secret is None:
            return None
        value = secret.get_secret_value().strip()
        return value or None


@lru_cache()
def get_settings() -> GatewaySettings:
    """Get cached settings instance."""
    return GatewaySettings()
