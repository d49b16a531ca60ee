"""Frozen dataclasses for the Mail Notifier domain model."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from email.utils import formataddr, getaddresses
from enum import Enum

_IDENTITY_VERSION = "#"
_IDENTITY_SEPARATOR = ":"


def _encode_part(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def _decode_part(value: str) -> str:
    return base64.b64decode(value.encode("ascii"), validate=True).decode("utf-8")


@dataclass(frozen=True)
class MessageReference:
    """Stable identifier of a stored message: account, folder, uid and optional flag."""

    account_uuid: str
    folder_id: int
    uid: str
    flag: str | None = None

    def to_identity_string(self) -> str:
        """Serialize the reference as ``#:<b64 account>:<b64 folder>:<b64 uid>[:<flag>]``."""
        parts = [
            _IDENTITY_VERSION,
            _encode_part(self.account_uuid),
            _encode_part(str(self.folder_id)),
            _encode_part(self.uid),
        ]
        if self.flag is not None:
            parts.append(self.flag)
        return _IDENTITY_SEPARATOR.join(parts)

    @classmethod
    def parse(cls, identity: str | None) -> MessageReference | None:
        """Parse an identity string produced by :meth:`to_identity_string`.

        Returns:
            The reference, or None if the string is not a valid identity.
        """
        if not identity:
            return None

        parts = identity.split(_IDENTITY_SEPARATOR)
        if parts[0] != _IDENTITY_VERSION or len(parts) not in (4, 5):
            return None

        try:
            account_uuid = _decode_part(parts[1])
            folder_id = int(_decode_part(parts[2]))
            uid = _decode_part(parts[3])
        except (binascii.Error, UnicodeError, ValueError):
            return None

        flag = parts[4] if len(parts) == 5 and parts[4] else None
        return cls(account_uuid=account_uuid, folder_id=folder_id, uid=uid, flag=flag)


@dataclass(frozen=True)
class Address:
    """A single email address with an optional display name."""

    address: str
    personal: str | None = None

    @property
    def friendly(self) -> str:
        """Display name if there is one, otherwise the bare address."""
        if self.personal and self.personal.strip():
            return self.personal.strip()
        return self.address

    @classmethod
    def parse(cls, address_list: str | None) -> tuple[Address, ...]:
        """Parse an RFC 2822 address list such as ``"Alice <alice@example.com>, bob@x.org"``."""
        if not address_list:
            return ()
        return tuple(
            cls(address=addr, personal=name or None)
            for name, addr in getaddresses([address_list])
            if addr
        )

    def __str__(self) -> str:
        if self.personal:
            return formataddr((self.personal, self.address))
        return self.address


class RecipientType(Enum):
    """Recipient roles of a message."""

    TO = "to"
    CC = "cc"
    BCC = "bcc"


class PreviewType(Enum):
    """Whether usable preview text exists, and why not if it doesn't."""

    TEXT = "text"
    NONE = "none"
    ERROR = "error"
    ENCRYPTED = "encrypted"


@dataclass(frozen=True)
class Preview:
    """Preview of a message body. Only the TEXT variant carries text."""

    type: PreviewType
    text: str | None = None

    def __post_init__(self) -> None:
        if self.type is PreviewType.TEXT:
            if not isinstance(self.text, str):
                raise ValueError("TEXT preview requires a text string")
        elif self.text is not None:
            raise ValueError(f"{self.type.name} preview cannot carry text")

    @classmethod
    def of_text(cls, text: str) -> Preview:
        return cls(PreviewType.TEXT, text)

    @classmethod
    def none(cls) -> Preview:
        return cls(PreviewType.NONE)

    @classmethod
    def error(cls) -> Preview:
        return cls(PreviewType.ERROR)

    @classmethod
    def encrypted(cls) -> Preview:
        return cls(PreviewType.ENCRYPTED)

    @classmethod
    def from_status(cls, preview_type: PreviewType, text: str | None = None) -> Preview:
        """Build a preview from a status code and a separately nullable text.

        A TEXT status without text collapses to NONE. Text passed alongside
        any other status is dropped.
        """
        if preview_type is PreviewType.TEXT:
            return cls.of_text(text) if text is not None else cls.none()
        return cls(preview_type)


@dataclass(frozen=True)
class MessageSnapshot:
    """Read-only view of a stored message, as needed for notifications."""

    reference: MessageReference
    subject: str | None = None
    preview: Preview = field(default_factory=Preview.none)
    sender: tuple[Address, ...] = field(default_factory=tuple)
    to: tuple[Address, ...] = field(default_factory=tuple)
    cc: tuple[Address, ...] = field(default_factory=tuple)
    bcc: tuple[Address, ...] = field(default_factory=tuple)
    starred: bool = False

    def get_recipients(self, recipient_type: RecipientType) -> tuple[Address, ...]:
        """Recipients for the given role."""
        if recipient_type is RecipientType.TO:
            return self.to
        if recipient_type is RecipientType.CC:
            return self.cc
        return self.bcc


@dataclass(frozen=True)
class NotificationContent:
    """Text shown in a notification for a single message."""

    message_reference: MessageReference
    sender: str
    subject: str
    preview: str
    summary: str
    starred: bool
