"""Localized strings used when building notification content."""

from __future__ import annotations

from typing import Protocol

from mail_notifier.config.settings import MailNotifierSettings


class NotificationResourceProvider(Protocol):
    """Lookup of the fixed strings a notification may need."""

    def no_sender(self) -> str: ...

    def no_subject(self) -> str: ...

    def preview_encrypted(self) -> str: ...

    def recipient_display_name(self, recipient: str) -> str:
        """Sender label for a message sent from one of the account's own identities."""
        ...


class DefaultResourceProvider:
    """Resource provider backed by :class:`MailNotifierSettings`."""

    def __init__(self, settings: MailNotifierSettings | None = None) -> None:
        self._settings = settings or MailNotifierSettings()

    def no_sender(self) -> str:
        return self._settings.no_sender_text

    def no_subject(self) -> str:
        return self._settings.no_subject_text

    def preview_encrypted(self) -> str:
        return self._settings.preview_encrypted_text

    def recipient_display_name(self, recipient: str) -> str:
        return self._settings.recipient_display_format.format(recipient=recipient)
