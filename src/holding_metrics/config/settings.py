"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".holding-metrics"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HOLDING_METRICS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Holding Metrics"
    app_version: str = "0.1.0"

    # Persisted {start, prices} JSON
    series_path: Path = Path("data/prices.json")

    # Data directory (price cache database lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    # Live price source
    asset: str = "bitcoin"
    quote_currency: str = "usd"
    price_api_url: str = "https://api.coingecko.com/api/v3/simple/price"
    price_api_timeout_seconds: float = 10.0
    price_cache_ttl_seconds: int = 60
    use_stub_provider: bool = False

    # Request defaults
    default_amount: float = 1.0
    default_window: str = "all"

    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "price_cache.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
