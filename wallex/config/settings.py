from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.wallex.ir"


class Settings(BaseSettings):
    """Client configuration loaded from WALLEX_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="WALLEX_", env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    base_url: str = DEFAULT_BASE_URL
    api_version: str = ""
    api_key: str = ""
    timeout_seconds: float = Field(30.0, gt=0)
