"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from augmentor_chatgpt.augmentor import GENERIC_ERROR_MESSAGE, ChatGptAugmentor
from augmentor_chatgpt.cli import main

FIXTURE = Path(__file__).parent / "fixtures" / "augmentor.yaml"


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_run_prints_each_text(capsys) -> None:
    with patch.object(
        ChatGptAugmentor, "execute", return_value={"default": ["Bonjour", "Salut"]}
    ) as execute:
        assert main(["run", "--config", str(FIXTURE), "Hello"]) == 0

    execute.assert_called_once_with("Hello")
    assert capsys.readouterr().out.splitlines() == ["Bonjour", "Salut"]


def test_run_reports_generic_error(capsys) -> None:
    with patch.object(
        ChatGptAugmentor, "execute", return_value={"_errors": GENERIC_ERROR_MESSAGE}
    ):
        assert main(["run", "--config", str(FIXTURE), "Hello"]) == 1

    assert GENERIC_ERROR_MESSAGE in capsys.readouterr().err


def test_run_passes_user(capsys) -> None:
    seen: list[dict] = []

    def fake_execute(self, input_text):
        seen.append(self.build_options(input_text))
        return {"default": []}

    with patch.object(ChatGptAugmentor, "execute", fake_execute):
        main(["run", "--config", str(FIXTURE), "--user", "7", "Hello"])

    assert seen[0]["user"] == "7"
    assert seen[0]["messages"][-1]["content"] == "Translate to French: Hello"


def test_models_sorted(capsys, tmp_path: Path) -> None:
    key_file = tmp_path / "openai.key"
    key_file.write_text("sk-test")
    with patch.object(
        ChatGptAugmentor, "list_models", return_value={"gpt-4": "gpt-4", "ada": "ada"}
    ):
        assert main(["models", "--config", str(FIXTURE), "--key-file", str(key_file)]) == 0

    assert capsys.readouterr().out.splitlines() == ["ada", "gpt-4"]


def test_models_empty(capsys) -> None:
    with patch.object(ChatGptAugmentor, "list_models", return_value={}):
        assert main(["models", "--config", str(FIXTURE)]) == 1
    assert "No models available" in capsys.readouterr().err


def test_missing_config(capsys, tmp_path: Path) -> None:
    assert main(["run", "--config", str(tmp_path / "nope.yaml"), "Hello"]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_version(capsys) -> None:
    with pytest.raises(SystemExit):
        main(["--version"])
    assert "augmentor-chatgpt" in capsys.readouterr().out
