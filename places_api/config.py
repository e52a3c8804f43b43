from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_title: str = Field(default="User and Places API", alias="APP_TITLE")
    app_description: str = Field(default="An API for managing users and places", alias="APP_DESCRIPTION")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    docs_url: str = Field(default="/api-docs", alias="DOCS_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    seed_sample_data: bool = Field(default=True, alias="SEED_SAMPLE_DATA")
    enable_metrics_endpoint: bool = Field(default=True, alias="ENABLE_METRICS_ENDPOINT")

    @property
    def public_url(self) -> str:
        return f"http://localhost:{self.port}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
