"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from connect4.cli.main import app
from connect4.core.config import reset_settings


runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_suggest_on_empty_board():
    result = runner.invoke(app, ["suggest", "--difficulty", "easy"])

    assert result.exit_code == 0
    assert "red should play column 3" in result.output
    assert "Center column preference" in result.output


def test_suggest_block():
    # Red stacks column 0 three times; yellow must block.
    result = runner.invoke(app, ["suggest", "01020", "--difficulty", "medium"])

    assert result.exit_code == 0
    assert "yellow should play column 0" in result.output


def test_suggest_rejects_bad_sequence():
    result = runner.invoke(app, ["suggest", "3333333"])

    assert result.exit_code == 1


def test_suggest_finished_game():
    result = runner.invoke(app, ["suggest", "0101010"])

    assert result.exit_code == 1
    assert "already over" in result.output


def test_selfplay():
    result = runner.invoke(app, ["selfplay", "--red", "easy", "--yellow", "easy"])

    assert result.exit_code == 0
    assert "WINS" in result.output or "DRAW" in result.output


def test_play_quit():
    result = runner.invoke(app, ["play", "--human-first", "--difficulty", "easy"], input="q\n")

    assert result.exit_code == 0
    assert "Game quit." in result.output


def test_log_level_option():
    result = runner.invoke(app, ["--log-level", "debug", "suggest", "-d", "easy"])

    assert result.exit_code == 0


def test_unknown_log_level_rejected():
    result = runner.invoke(app, ["--log-level", "verbose", "suggest", "-d", "easy"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
