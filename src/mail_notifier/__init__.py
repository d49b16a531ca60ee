"""Mail Notifier - Build notification text for new email messages."""

from mail_notifier.core.account import Account, Identity, IdentityChecker
from mail_notifier.core.models import (
    Address,
    MessageReference,
    MessageSnapshot,
    NotificationContent,
    Preview,
    PreviewType,
    RecipientType,
)
from mail_notifier.core.resources import DefaultResourceProvider, NotificationResourceProvider
from mail_notifier.pipeline.creator import NotificationContentCreator

__all__ = [
    "Account",
    "Address",
    "DefaultResourceProvider",
    "Identity",
    "IdentityChecker",
    "MessageReference",
    "MessageSnapshot",
    "NotificationContent",
    "NotificationContentCreator",
    "NotificationResourceProvider",
    "Preview",
    "PreviewType",
    "RecipientType",
]
