"""Environment-driven settings for the invoice service."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    PROJECT_NAME: str = "Invoice Hub"
    LOG_LEVEL: str = "INFO"
