from __future__ import annotations

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class AppConfig(BaseSettings):
    """
    (H) All settings are loaded from BEANPROBE_* environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BEANPROBE_",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    DESCRIPTOR_CACHE_ENABLED: bool = True
    ALLOW_PICKLE: bool = True
    CONVERTER_IGNORE_ERROR: bool = True
    DEFAULT_IGNORE_CASE: bool = False

    def resolve_ignore_case(self, ignore_case: bool | None) -> bool:
        return self.DEFAULT_IGNORE_CASE if ignore_case is None else ignore_case


settings = AppConfig()
