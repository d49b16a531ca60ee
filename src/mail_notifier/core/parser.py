"""Message snapshot parser: builds MessageSnapshot values from plain dicts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mail_notifier.core.exceptions import ParseError
from mail_notifier.core.models import Address, MessageReference, MessageSnapshot, Preview, PreviewType

logger = logging.getLogger(__name__)


class SnapshotParser:
    """Parses raw message dicts (e.g. loaded from JSON) into MessageSnapshot objects."""

    def parse(self, raw_message: dict[str, Any]) -> MessageSnapshot:
        """Parse a raw message dict into a MessageSnapshot.

        Args:
            raw_message: Dict with ``reference``, ``subject``, ``preview``,
                ``preview_type``, ``from``, ``to``, ``cc``, ``bcc`` and ``starred`` keys.
                Only ``reference`` is required.

        Returns:
            Parsed MessageSnapshot.

        Raises:
            ParseError: If the reference is missing or the structure is invalid.
        """
        try:
            reference = self._parse_reference(raw_message.get("reference"))
            snapshot = MessageSnapshot(
                reference=reference,
                subject=self._parse_subject(raw_message.get("subject")),
                preview=self._parse_preview(raw_message),
                sender=self._parse_addresses(raw_message.get("from")),
                to=self._parse_addresses(raw_message.get("to")),
                cc=self._parse_addresses(raw_message.get("cc")),
                bcc=self._parse_addresses(raw_message.get("bcc")),
                starred=self._parse_starred(raw_message.get("starred", False)),
            )
        except ParseError:
            raise
        except Exception as e:
            raise ParseError(f"Failed to parse message: {e}") from e

        logger.debug("Parsed message %s", reference.uid)
        return snapshot

    def parse_file(self, path: Path) -> MessageSnapshot:
        """Read a UTF-8 JSON file and parse it.

        Raises:
            ParseError: If the file is not valid JSON or not a JSON object.
        """
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ParseError(f"Failed to read {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ParseError(f"Expected a JSON object in {path}")
        return self.parse(raw)

    @staticmethod
    def _parse_reference(raw: Any) -> MessageReference:
        """Accept either an identity string or a dict of reference fields."""
        if isinstance(raw, str):
            reference = MessageReference.parse(raw)
            if reference is None:
                raise ParseError(f"Invalid message reference: {raw!r}")
            return reference

        if isinstance(raw, dict):
            try:
                return MessageReference(
                    account_uuid=str(raw["account_uuid"]),
                    folder_id=int(raw["folder_id"]),
                    uid=str(raw["uid"]),
                    flag=raw.get("flag"),
                )
            except KeyError as e:
                raise ParseError(f"Message reference is missing {e}") from e

        raise ParseError("Message reference is missing")

    @staticmethod
    def _parse_subject(raw: Any) -> str | None:
        if raw is None or isinstance(raw, str):
            return raw
        raise ParseError(f"Subject must be a string, got {type(raw).__name__}")

    @staticmethod
    def _parse_starred(raw: Any) -> bool:
        if isinstance(raw, bool):
            return raw
        raise ParseError(f"Starred must be true or false, got {raw!r}")

    @staticmethod
    def _parse_preview(raw_message: dict[str, Any]) -> Preview:
        """Combine ``preview_type`` and ``preview`` into a Preview."""
        text = raw_message.get("preview")
        type_name = raw_message.get("preview_type")

        if type_name is None:
            preview_type = PreviewType.TEXT if text is not None else PreviewType.NONE
        else:
            try:
                preview_type = PreviewType[str(type_name).upper()]
            except KeyError:
                raise ParseError(f"Unknown preview type: {type_name!r}") from None

        return Preview.from_status(preview_type, text)

    @staticmethod
    def _parse_addresses(raw: Any) -> tuple[Address, ...]:
        """Parse an address list given as a string, a single dict, or a list of strings or dicts."""
        if not raw:
            return ()
        if isinstance(raw, str):
            return Address.parse(raw)
        if isinstance(raw, dict):
            raw = [raw]
        elif not isinstance(raw, list):
            raise ParseError(f"Expected an address list, got {type(raw).__name__}")

        addresses: list[Address] = []
        for entry in raw:
            if isinstance(entry, str):
                addresses.extend(Address.parse(entry))
            elif isinstance(entry, dict) and entry.get("address"):
                addresses.append(Address(address=entry["address"], personal=entry.get("name")))
            else:
                logger.warning("Skipping unparsable address: %r", entry)
        return tuple(addresses)
