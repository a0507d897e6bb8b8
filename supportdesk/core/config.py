from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration read from environment variables."""

    app_name: str = Field(default="Support Desk API")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s %(message)s")
    event_log_level: str = Field(default="INFO")

    # Identifier generation
    id_counter_seed: int = Field(default=1000)

    # Notification configuration
    notification_channels: tuple[str, ...] = Field(default=("email", "sms", "push"))
    outbox_size: int = Field(default=1000, ge=1)
    webhook_url: str | None = Field(default=None)
    webhook_timeout: float = Field(default=10.0)

    # Observability configuration
    otel_enabled: bool = Field(default=False)
    otel_service_name: str = Field(default="supportdesk")
    otel_exporter_otlp_endpoint: str | None = Field(default=None)
    otel_exporter_otlp_headers: str | None = Field(default=None)

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()
