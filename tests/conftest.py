"""Shared fixtures for Mail Notifier tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest

from mail_notifier.config.settings import MailNotifierSettings
from mail_notifier.core.account import Account
from mail_notifier.core.models import Address, MessageReference, MessageSnapshot, Preview
from mail_notifier.core.resources import DefaultResourceProvider
from mail_notifier.pipeline.creator import NotificationContentCreator

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ACCOUNT_UUID = "1-2-3"
FOLDER_ID = 23
UID = "42"
PREVIEW = "Message preview text"
SUBJECT = "Message subject"
SENDER_ADDRESS = "alice@example.com"
SENDER_NAME = "Alice"
RECIPIENT_ADDRESS = "bob@example.com"
RECIPIENT_NAME = "Bob"


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> MailNotifierSettings:
    """Default settings, unaffected by the environment or a local .env file."""
    for name in (
        "MAIL_NOTIFIER_NO_SENDER_TEXT",
        "MAIL_NOTIFIER_NO_SUBJECT_TEXT",
        "MAIL_NOTIFIER_PREVIEW_ENCRYPTED_TEXT",
        "MAIL_NOTIFIER_RECIPIENT_DISPLAY_FORMAT",
        "MAIL_NOTIFIER_IDENTITIES",
    ):
        monkeypatch.delenv(name, raising=False)
    return MailNotifierSettings(_env_file=None)


@pytest.fixture
def resource_provider(settings: MailNotifierSettings) -> DefaultResourceProvider:
    return DefaultResourceProvider(settings)


@pytest.fixture
def content_creator(resource_provider: DefaultResourceProvider) -> NotificationContentCreator:
    return NotificationContentCreator(resource_provider)


@pytest.fixture
def message_reference() -> MessageReference:
    return MessageReference(account_uuid=ACCOUNT_UUID, folder_id=FOLDER_ID, uid=UID)


@pytest.fixture
def account() -> Mock:
    """Account whose identity check reports "not me" unless a test says otherwise."""
    fake = Mock(spec=Account)
    fake.is_an_identity.return_value = False
    return fake


@pytest.fixture
def message(message_reference: MessageReference) -> MessageSnapshot:
    """A regular message from Alice to Bob with a text preview."""
    return MessageSnapshot(
        reference=message_reference,
        subject=SUBJECT,
        preview=Preview.of_text(PREVIEW),
        sender=(Address(SENDER_ADDRESS, SENDER_NAME),),
        to=(Address(RECIPIENT_ADDRESS, RECIPIENT_NAME),),
    )
