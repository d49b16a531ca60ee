"""Builds the text shown in a new-mail notification for a single message."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mail_notifier.core.account import IdentityChecker
from mail_notifier.core.exceptions import CollaboratorContractError
from mail_notifier.core.models import (
    MessageSnapshot,
    NotificationContent,
    PreviewType,
    RecipientType,
)
from mail_notifier.core.resources import NotificationResourceProvider

logger = logging.getLogger(__name__)


def _require_text(value: object, lookup: str) -> str:
    """Fail fast when a resource lookup does not return a non-empty string."""
    if not isinstance(value, str) or not value:
        raise CollaboratorContractError(f"Resource provider returned {value!r} for {lookup}")
    return value


class NotificationContentCreator:
    """Turn a message snapshot into sender, subject, preview and summary labels.

    Fallback rules:
    - No sender addresses: the "no sender" string.
    - Sender is one of the account's identities: "To:" plus the first "to" recipient.
    - No subject: the "no subject" string.
    - Preview is the subject, plus a newline and the preview body when there is one.
      A message without a subject but with a body shows the body alone.
    """

    def __init__(self, resource_provider: NotificationResourceProvider) -> None:
        self._resources = resource_provider

    def create_from_message(
        self, account: IdentityChecker, message: MessageSnapshot
    ) -> NotificationContent:
        """Build the notification content for one message.

        Args:
            account: Account the message belongs to; used for self-sent detection.
            message: Snapshot of the message.

        Returns:
            NotificationContent whose labels are never empty.

        Raises:
            CollaboratorContractError: If the account or resource provider misbehaves.
        """
        sender = self._get_message_sender(account, message)
        subject = self._get_message_subject(message)
        preview = self._get_message_preview(message, subject)
        summary = f"{sender} {subject}"

        content = NotificationContent(
            message_reference=message.reference,
            sender=sender,
            subject=subject,
            preview=preview,
            summary=summary,
            starred=message.starred,
        )
        logger.debug("Created notification content for message %s", message.reference.uid)
        return content

    def create_from_messages(
        self, account: IdentityChecker, messages: Iterable[MessageSnapshot]
    ) -> list[NotificationContent]:
        """Build notification content for several messages, preserving order."""
        return [self.create_from_message(account, message) for message in messages]

    def _get_message_sender(self, account: IdentityChecker, message: MessageSnapshot) -> str:
        from_addresses = message.sender
        if not from_addresses:
            return self._no_sender()

        is_self = account.is_an_identity(from_addresses)
        if not isinstance(is_self, bool):
            raise CollaboratorContractError(f"is_an_identity returned {is_self!r}, expected bool")

        if not is_self:
            return from_addresses[0].friendly or self._no_sender()

        recipients = message.get_recipients(RecipientType.TO)
        if recipients and recipients[0].friendly:
            return _require_text(
                self._resources.recipient_display_name(recipients[0].friendly),
                "recipient_display_name",
            )

        logger.debug("Self-sent message %s has no usable recipient", message.reference.uid)
        return self._no_sender()

    def _get_message_subject(self, message: MessageSnapshot) -> str:
        if message.subject:
            return message.subject
        return _require_text(self._resources.no_subject(), "no_subject")

    def _get_message_preview(self, message: MessageSnapshot, subject: str) -> str:
        body = self._get_preview_body(message)
        if not body:
            return subject
        # The fallback subject is only shown when there is no body to show instead.
        if not message.subject:
            return body
        return f"{subject}\n{body}"

    def _get_preview_body(self, message: MessageSnapshot) -> str:
        preview = message.preview
        if preview.type is PreviewType.TEXT:
            return preview.text or ""
        if preview.type is PreviewType.ENCRYPTED:
            return _require_text(self._resources.preview_encrypted(), "preview_encrypted")
        return ""

    def _no_sender(self) -> str:
        return _require_text(self._resources.no_sender(), "no_sender")
