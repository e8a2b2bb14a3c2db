"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./helpdesk.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_url: str = Field(
        default="http://localhost",
        description="Public base URL used to build links inside notification emails",
    )
    app_name: str = Field(
        default="Helpdesk Support",
        description="Product name used in constructed email subjects",
    )
    mail_from_name: str = Field(
        default="Support",
        description="Display name of the sender, exposed to templates as {sender_name}",
    )
    queue_enable: bool = Field(
        default=False,
        description="Submit emails to the Celery queue instead of sending them inline",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    celery_broker_url: str = Field(
        default="redis://localhost:6379/0",
        description="Broker used by the mail queue",
    )
    celery_result_backend: str | None = Field(
        default=None,
        description="Optional result backend for the mail queue",
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @property
    def base_url(self) -> str:
        """Return ``app_url`` without a trailing slash."""

        return self.app_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
