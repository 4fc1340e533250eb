"""CLI configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging (stderr only; stdout carries the identifier)
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    model_config = {"env_file": ".env", "env_prefix": "WEBIS_UUID_", "extra": "ignore"}


settings = Settings()
