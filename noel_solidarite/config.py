"""Configuration management using Pydantic Settings"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "noel-solidarite"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # Intake API as seen by the donation pages
    api_base_url: str = "http://localhost:3000"
    http_timeout_seconds: float = 10.0

    # Marketing site build output (index.html fallback lives here)
    static_dir: Path = Path(__file__).resolve().parent / "web" / "static"

    # Donor-facing estimates
    tax_reduction_rate: float = 0.66
    gifts_per_euro: int = 3


settings = Settings()
