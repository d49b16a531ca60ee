"""Tests for the CLI: argument parsing, path validation and output."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

import scripts.cli as cli_module


def _parse_args(argv: list[str]) -> argparse.Namespace:
    """Build a parser with the CLI's show arguments and parse argv."""
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="command")
    show_parser = subparsers.add_parser("show")
    cli_module._add_show_args(show_parser)
    return parser.parse_args(argv)


def _run(argv: list[str]) -> None:
    with patch.object(sys, "argv", ["cli.py", *argv]):
        cli_module.main()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and .env file out of CLI runs."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MAIL_NOTIFIER_IDENTITIES", raising=False)


class TestShowArgs:
    """Test paths, --identity and --json on the 'show' subcommand."""

    def test_defaults(self) -> None:
        args = _parse_args(["show", "message.json"])
        assert args.paths == [Path("message.json")]
        assert args.identity == []
        assert args.as_json is False

    def test_all_flags(self) -> None:
        args = _parse_args(
            ["show", "a.json", "b.json", "-i", "me@example.com", "--identity", "alias@example.org", "--json"]
        )
        assert args.paths == [Path("a.json"), Path("b.json")]
        assert args.identity == ["me@example.com", "alias@example.org"]
        assert args.as_json is True

    def test_path_required(self) -> None:
        with pytest.raises(SystemExit):
            _parse_args(["show"])


class TestValidation:
    """Test that _validate_paths rejects missing files."""

    def test_missing_path_exits(self, tmp_path: Path) -> None:
        args = argparse.Namespace(paths=[tmp_path / "missing.json"])
        with pytest.raises(SystemExit):
            cli_module._validate_paths(args)

    def test_existing_path_passes(self, fixtures_dir: Path) -> None:
        args = argparse.Namespace(paths=[fixtures_dir / "regular_message.json"])
        # Should not raise
        cli_module._validate_paths(args)


class TestMain:
    """End-to-end runs of the 'show' command."""

    def test_no_command_exits(self) -> None:
        with pytest.raises(SystemExit):
            _run([])

    def test_json_output(self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run(["show", str(fixtures_dir / "regular_message.json"), "--json"])

        output = json.loads(capsys.readouterr().out)
        assert output == [
            {
                "reference": "#:MS0yLTM=:MjM=:NDI=",
                "sender": "Alice",
                "subject": "Message subject",
                "preview": "Message subject\nMessage preview text",
                "summary": "Alice Message subject",
                "starred": True,
            }
        ]

    def test_identity_flag_marks_self_sent(
        self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _run(["show", str(fixtures_dir / "self_sent.json"), "-i", "me@example.com", "--json"])

        [content] = json.loads(capsys.readouterr().out)
        assert content["sender"] == "To:Bob"
        assert content["preview"] == "Notes to self\n*Encrypted*"

    def test_text_output(self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run(["show", str(fixtures_dir / "empty_message.json")])

        out = capsys.readouterr().out
        assert "sender:  No sender" in out
        assert "summary: No sender (No subject)" in out

    def test_parse_error_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"subject": "no reference"}', encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            _run(["show", str(path)])

        assert exc_info.value.code == 1
        assert "Message reference is missing" in capsys.readouterr().err
