"""Advisory service configuration, read from the environment or a .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AdvisorySettings(BaseSettings):
    """Connection settings for the remote advisory service.

    Environment variables use the ``CYCLODRIVE_ADVISORY_`` prefix, e.g.
    ``CYCLODRIVE_ADVISORY_BASE_URL`` and ``CYCLODRIVE_ADVISORY_API_KEY``.
    """
    model_config = SettingsConfigDict(
        env_prefix="CYCLODRIVE_ADVISORY_",
        env_file=".env",
        extra="ignore",
    )

    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = "default"
    timeout_s: float = 30.0

    @property
    def configured(self) -> bool:
        return bool(self.base_url) and bool(self.api_key)
