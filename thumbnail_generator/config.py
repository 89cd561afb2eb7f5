from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


@dataclass(frozen=True)
class FreepikConfig:
    """Connection details for the Freepik image generation endpoint."""

    api_url: str
    api_key: str
    timeout_seconds: float = 30.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    freepik_api_url: str = Field(...)
    freepik_api_key: str = Field(...)
    freepik_timeout_seconds: float = Field(30.0, gt=0)

    app_host: str = Field("127.0.0.1")
    app_port: int = Field(8080)

    log_level: str = Field("INFO")
    cors_origins: str = Field("*")

    @field_validator("freepik_api_url", "freepik_api_key", mode="before")
    @classmethod
    def require_non_blank(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return (value or "INFO").strip().upper()

    def cors_origin_list(self) -> List[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def freepik_config(self) -> FreepikConfig:
        return FreepikConfig(
            api_url=self.freepik_api_url,
            api_key=self.freepik_api_key,
            timeout_seconds=self.freepik_timeout_seconds,
        )


@lru_cache()
def get_settings() -> Settings:
    try:
        return Settings()
    except Exception as exc:
        raise RuntimeError("Failed to load application settings. Ensure your .env file is configured.") from exc
