"""Minimal CLI entry point for manual testing of the Mail Notifier."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from mail_notifier.config.settings import MailNotifierSettings
from mail_notifier.core.account import Account
from mail_notifier.core.models import NotificationContent
from mail_notifier.core.parser import SnapshotParser
from mail_notifier.core.resources import DefaultResourceProvider
from mail_notifier.pipeline.creator import NotificationContentCreator

CLI_ACCOUNT_UUID = "cli"


def setup_logging(level: str) -> None:
    """Configure logging with timestamp and module info."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _content_to_dict(content: NotificationContent) -> dict[str, object]:
    return {
        "reference": content.message_reference.to_identity_string(),
        "sender": content.sender,
        "subject": content.subject,
        "preview": content.preview,
        "summary": content.summary,
        "starred": content.starred,
    }


def print_content(path: Path, content: NotificationContent) -> None:
    """Print one notification's fields in a readable block."""
    print(f"== {path}")
    print(f"  sender:  {content.sender}")
    print(f"  subject: {content.subject}")
    print(f"  summary: {content.summary}")
    print(f"  starred: {content.starred}")
    print("  preview:")
    for line in content.preview.splitlines():
        print(f"    {line}")


def _add_show_args(subparser: argparse.ArgumentParser) -> None:
    """Add message paths, --identity and --json flags to a subparser."""
    subparser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="JSON files describing messages",
    )
    subparser.add_argument(
        "--identity",
        "-i",
        action="append",
        default=[],
        help="Address that belongs to the account (repeatable)",
    )
    subparser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print notification content as JSON",
    )


def _validate_paths(args: argparse.Namespace) -> None:
    """Reject message paths that don't exist."""
    for path in args.paths:
        if not path.is_file():
            print(f"Error: {path} is not a file", file=sys.stderr)
            sys.exit(1)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Mail Notifier - Show the notification text for email messages"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    show_parser = subparsers.add_parser("show", help="Render notification content")
    _add_show_args(show_parser)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    _validate_paths(args)

    settings = MailNotifierSettings()
    setup_logging(settings.log_level)

    account = Account.from_addresses(CLI_ACCOUNT_UUID, [*settings.identities, *args.identity])
    creator = NotificationContentCreator(DefaultResourceProvider(settings))
    snapshot_parser = SnapshotParser()

    try:
        messages = [snapshot_parser.parse_file(path) for path in args.paths]
        contents = creator.create_from_messages(account, messages)

        if args.as_json:
            print(json.dumps([_content_to_dict(c) for c in contents], indent=2, ensure_ascii=False))
        else:
            for path, content in zip(args.paths, contents):
                print_content(path, content)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
