from __future__ import annotations

from typer.testing import CliRunner

from arraystore.app import app
from arraystore.identifier import is_identifier
from arraystore.version import __version__

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_uuid() -> None:
    result = runner.invoke(app, ["uuid", "-n", "3"])

    assert result.exit_code == 0
    lines = result.stdout.split()
    assert len(lines) == 3
    assert all(len(line) == 36 and is_identifier(line) for line in lines)


def test_uuid_compact() -> None:
    result = runner.invoke(app, ["uuid", "--compact"])

    assert result.exit_code == 0
    identifier = result.stdout.strip()
    assert len(identifier) == 32
    assert is_identifier(identifier)


def test_check_valid() -> None:
    result = runner.invoke(app, ["check", "0f8fad5bd9cb469fa16570867728950e"])

    assert result.exit_code == 0
    assert "0f8fad5b-d9cb-469f-a165-70867728950e" in result.stdout
    assert "70867728950e" in result.stdout


def test_check_wrong_version() -> None:
    result = runner.invoke(app, ["check", "0f8fad5b-d9cb-169f-a165-70867728950e"])

    assert result.exit_code == 1
    assert "not a version 4 identifier" in result.stdout


def test_check_malformed() -> None:
    result = runner.invoke(app, ["check", "nope"])

    assert result.exit_code == 1
    assert "Malformed identifier" in result.stdout


def test_shell() -> None:
    result = runner.invoke(app, ["shell"], input="add a 1\nadd a 2\nget a\nget b\n")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["true", "false", "1", "MISSING"]


def test_shell_failure_exit_code() -> None:
    result = runner.invoke(app, ["shell"], input="set a 1\nbogus\n")

    assert result.exit_code == 1
    assert "true" in result.stdout


def test_shell_keeps_going_after_odd_value() -> None:
    result = runner.invoke(app, ["shell"], input="set a 1\nset b \u00b2\nget a\nget b\n")

    assert result.exception is None
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["true", "true", "1", "\u00b2"]
