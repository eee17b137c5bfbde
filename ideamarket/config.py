"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MailSettings(BaseModel):
    """Outbound SMTP configuration."""

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465

    # True: implicit TLS (SMTP_SSL, usually port 465)
    # False: plain connection upgraded with STARTTLS when credentials are set
    smtp_secure: bool = True

    # Gmail app password recommended
    smtp_user: str | None = None
    smtp_pass: str | None = None

    # Sender address, falls back to smtp_user
    from_email: str | None = None

    @computed_field
    @property
    def sender(self) -> str:
        """Address used in the From header."""
        return self.from_email or self.smtp_user or "no-reply@ideamarket.local"


class InvitationSettings(BaseModel):
    """Invitation configuration."""

    # Number of top-scoring sellers invited per notify call
    top_n: int = 5


class APISettings(BaseModel):
    """API configuration."""

    host: str = "localhost"
    port: int = 4000

    # Frontend origin allowed by CORS
    client_url: str = "http://localhost:3000"

    # Externally visible URL of this server, used to build capability links
    # in emails. Defaults to http://{host}:{port}
    server_url: str | None = None

    @computed_field
    @property
    def base_url(self) -> str:
        """Base URL for accept/reject links.

        In development: http://localhost:4000
        In production: whatever API__SERVER_URL points at
        """
        if self.server_url:
            return self.server_url.rstrip("/")
        return f"http://{self.host}:{self.port}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    logfire_token: str | None = None

    # If None, sends when a token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables (or a .env file) to override, e.g.:

        PORT=4000
        API__CLIENT_URL=https://ideamarket.in
        API__SERVER_URL=https://mailer.ideamarket.in
        MAIL__SMTP_USER=bot@ideamarket.in
        MAIL__SMTP_PASS=app-password
        INVITATIONS__TOP_N=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows MAIL__SMTP_HOST syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 4000

    api: APISettings = APISettings()
    mail: MailSettings = MailSettings()
    invitations: InvitationSettings = InvitationSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Propagate host and port into the API settings."""
        self.api = APISettings(
            host=self.host,
            port=self.port,
            client_url=self.api.client_url,
            server_url=self.api.server_url,
        )
        return self
