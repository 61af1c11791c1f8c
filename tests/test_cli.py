"""Smoke tests for the pronouner CLI.

Run with: python -m pytest tests/test_cli.py -v
"""
from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from pronouner.cli import main

REPO_ROOT = Path(__file__).resolve().parent.parent
CAST = str(REPO_ROOT / "data" / "characters.yaml")
DICTIONARY = str(REPO_ROOT / "data" / "dictionary.yaml")
CONVERSATION = str(REPO_ROOT / "data" / "conversation.txt")


def _run_cli(*args: str, timeout: int = 30) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "pronouner", *args],
        capture_output=True,
        text=True,
        timeout=timeout,
        cwd=REPO_ROOT,
    )


def _main(capsys, *args: str) -> tuple[int, str]:
    with pytest.raises(SystemExit) as exc:
        main(list(args))
    return exc.value.code, capsys.readouterr().out


class TestCLIHelp:
    """Verify that all subcommands register and print help without errors."""

    def test_main_help(self):
        result = _run_cli("--help")
        assert result.returncode == 0
        for command in ("compile", "check", "verbs", "cast"):
            assert command in result.stdout

    def test_compile_help(self):
        result = _run_cli("compile", "--help")
        assert result.returncode == 0
        assert "--player-pronouns" in result.stdout
        assert "--json" in result.stdout

    def test_no_command_prints_help(self):
        result = _run_cli()
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()


class TestCompile:

    def test_compile_sample_conversation(self):
        result = _run_cli("compile", CONVERSATION, "--cast", CAST, "--dictionary", DICTIONARY)
        assert result.returncode == 0
        lines = result.stdout.splitlines()
        assert lines[0] == (
            "Do you know Pidge? They are super smart! I love them! Have you seen their sentient robot?"
        )
        assert lines[1] == "King Alfons says Alfons' lion has been lost."

    def test_compile_text_with_player(self, capsys):
        rc, out = _main(
            capsys,
            "compile",
            "--text",
            '{"character_id":"player","kind":"Name","mods":["UpperCase"]} '
            '{"character_id":"player","kind":"VerbConjugate","data":"to be"} here.',
            "--cast",
            CAST,
            "--dictionary",
            DICTIONARY,
            "--player-name",
            "Lance",
            "--player-pronouns",
            "he_him",
        )
        assert rc == 0
        assert out.strip() == "LANCE is here."

    def test_compile_error_exits_nonzero(self, capsys):
        rc, out = _main(
            capsys,
            "compile",
            "--text",
            'Hi {"character_id":"nobody","kind":"Name"}',
            "--cast",
            CAST,
            "--dictionary",
            DICTIONARY,
        )
        assert rc == 1
        assert "ERROR: unknown character identifier: 'nobody'" in out

    def test_compile_error_json(self, capsys):
        rc, out = _main(
            capsys,
            "compile",
            "--json",
            "--text",
            '{"character_id":"pidge","kind":"VerbConjugate","data":"to be or not to be"}',
            "--cast",
            CAST,
            "--dictionary",
            DICTIONARY,
        )
        assert rc == 1
        payload = json.loads(out)
        assert payload["ok"] is False
        assert payload["error"]["error_code"] == "UNKNOWN_VERB_KEY"
        assert payload["error"]["position"] == 0

    def test_compile_json(self, capsys):
        rc, out = _main(
            capsys, "compile", "--json", "--text", "{{plain}}", "--cast", CAST, "--dictionary", DICTIONARY
        )
        assert rc == 0
        assert json.loads(out) == {"ok": True, "text": "{plain}"}

    def test_missing_cast(self, capsys):
        rc, out = _main(capsys, "compile", "--text", "hi", "--cast", "/nonexistent/abc123.yaml")
        assert rc == 1
        assert "not found" in out.lower()

    def test_missing_source_file(self, capsys):
        rc, out = _main(capsys, "compile", "/nonexistent/scene.txt", "--cast", CAST, "--dictionary", DICTIONARY)
        assert rc == 1
        assert "dialog source not found" in out


class TestCheck:

    def test_check_clean(self, capsys):
        rc, out = _main(capsys, "check", CONVERSATION, "--cast", CAST, "--dictionary", DICTIONARY)
        assert rc == 0
        assert out.strip().endswith("OK")

    def test_check_reports_all(self, capsys):
        rc, out = _main(
            capsys,
            "check",
            "--json",
            "--text",
            '{"character_id":"nobody","kind":"Name"} } {"character_id":"pidge","kind":"VerbConjugate","data":"to have"}',
            "--cast",
            CAST,
            "--dictionary",
            DICTIONARY,
        )
        assert rc == 1
        codes = [d["error_code"] for d in json.loads(out)]
        assert codes == ["UNKNOWN_CHARACTER", "UNMATCHED_CLOSING_DELIMITER", "UNDEFINED_CONJUGATION_FORM"]


class TestListings:

    def test_verbs(self, capsys):
        rc, out = _main(capsys, "verbs", "to be", "--dictionary", DICTIONARY)
        assert rc == 0
        assert '"to be" -- to be:' in out
        assert "He/she/it is." in out

    def test_unknown_verb(self, capsys):
        rc, out = _main(capsys, "verbs", "to fly", "--dictionary", DICTIONARY)
        assert rc == 1
        assert "to fly" in out

    def test_cast(self, capsys):
        rc, out = _main(capsys, "cast", "--cast", CAST)
        assert rc == 0
        assert "- hunk: Mr. Hunk" in out
        assert "Kit uses fae/faer/faer pronouns (conjugates as ThirdSingular)." in out
