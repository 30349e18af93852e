from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="KAI_", extra="ignore"
    )

    user_timezone: str = "UTC"

    # Results scoring below this are sent back for clarification instead of saved
    confidence_threshold: float = 0.6
    delivery_method: str = "APP"

    # Sentry error tracking
    sentry_dsn: str = ""
    sentry_environment: str = "production"

    log_level: str = "INFO"
    data_dir: str = "~/.kai-reminders"

    @property
    def has_sentry(self) -> bool:
        return bool(self.sentry_dsn)

    @property
    def store_path(self) -> Path:
        return Path(self.data_dir).expanduser() / "reminders.jsonl"


settings = Settings()
