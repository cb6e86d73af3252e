import json

import pytest
from typer.testing import CliRunner

from richcardsbot.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # The CLI callback would bind the root handler to the runner's stdout.
    monkeypatch.setattr("richcardsbot.cli.setup_logging", lambda **kwargs: None)


def test_choices_command():
    result = runner.invoke(app, ["choices"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data[0] == {"label": "Video Card", "synonyms": ["7", "video", "hola"]}
    assert data[1]["label"] == "All Cards"


def test_card_command_prints_wire_json():
    result = runner.invoke(app, ["card", "video"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["contentType"] == "application/vnd.microsoft.card.video"
    assert data["content"]["title"] == "Bienvenido al Tribunal"


def test_card_command_rejects_unknown_kind():
    result = runner.invoke(app, ["card", "adaptive"])
    assert result.exit_code != 0


def test_chat_command_default_mode():
    result = runner.invoke(app, ["chat", "--no-interactive"], input="hi\nexit\n")
    assert result.exit_code == 0
    assert "[video] Bienvenido al Tribunal" in result.output


def test_chat_command_interactive_mode():
    result = runner.invoke(app, ["chat", "--interactive"], input="hi\nvideo\n")
    assert result.exit_code == 0
    assert "Please select a card:" in result.output
    assert "[video] Bienvenido al Tribunal" in result.output
