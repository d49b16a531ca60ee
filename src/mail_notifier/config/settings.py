"""Configuration via pydantic-settings with .env support."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MailNotifierSettings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="MAIL_NOTIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Notification strings
    no_sender_text: str = "No sender"
    no_subject_text: str = "(No subject)"
    preview_encrypted_text: str = "*Encrypted*"
    recipient_display_format: str = "To:{recipient}"

    # Addresses that belong to the local account
    identities: list[str] = []

    # Logging
    log_level: str = "INFO"

    @field_validator("no_sender_text", "no_subject_text", "preview_encrypted_text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("notification strings must not be blank")
        return value

    @field_validator("recipient_display_format")
    @classmethod
    def _has_recipient_placeholder(cls, value: str) -> str:
        if "{recipient}" not in value:
            raise ValueError("recipient_display_format must contain '{recipient}'")
        try:
            value.format(recipient="")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"recipient_display_format is not a valid format string: {e!r}") from e
        return value
