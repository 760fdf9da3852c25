"""Tests for configuration models and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from augmentor_chatgpt.config import (
    DEFAULT_ENGINE,
    FORM_DEFAULTS,
    AugmentorConfig,
    default_configuration,
    load_config,
)
from augmentor_chatgpt.exceptions import ConfigError
from augmentor_chatgpt.types import SdkVariant

FIXTURE = Path(__file__).parent / "fixtures" / "augmentor.yaml"


class TestAugmentorConfig:
    def test_defaults_are_unset(self) -> None:
        config = AugmentorConfig()
        assert config.model_dump(exclude={"client"}) == default_configuration()

    def test_sdk_defaults_to_raw_client(self) -> None:
        assert AugmentorConfig().sdk_variant is SdkVariant.ORHANERDAY
        assert AugmentorConfig(sdk="").sdk_variant is SdkVariant.ORHANERDAY

    def test_sdk_alias(self) -> None:
        assert AugmentorConfig(sdk="openai").sdk_variant is SdkVariant.OPENAI_PHP

    def test_unknown_sdk_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown SDK"):
            AugmentorConfig(sdk="guzzle")

    def test_sampling_values_kept_raw(self) -> None:
        config = AugmentorConfig(temperature="0.5", max_tokens=None)
        assert config.temperature == "0.5"
        assert config.max_tokens is None

    def test_form_defaults_fill_unset_fields(self) -> None:
        values = AugmentorConfig(temperature=0.3).with_form_defaults()
        assert values["temperature"] == 0.3
        assert values["model"] == DEFAULT_ENGINE
        assert values["max_tokens"] == 100
        assert values["user_tracking"] is True
        assert values["messages"] == [{"role": "user", "content": "{input}"}]
        assert set(values) == set(FORM_DEFAULTS)


class TestFromFormValues:
    def test_flattens_advanced_settings(self) -> None:
        config = AugmentorConfig.from_form_values(
            {
                "sdk": "openai_php",
                "model": "gpt-3.5-turbo-0301",
                "messages": {
                    "description": "help text",
                    0: {"role": "system", "content": "Be brief."},
                    1: {"role": "user", "content": "{input}"},
                    "actions": {"add_message": "Add one more message"},
                },
                "advanced": {
                    "temperature": "0.9",
                    "max_tokens": "256",
                    "top_p": "0",
                    "n": "2",
                    "frequency_penalty": "0.5",
                    "presence_penalty": "0",
                    "user_tracking": 1,
                },
            }
        )

        assert config.sdk is SdkVariant.OPENAI_PHP
        assert config.model == "gpt-3.5-turbo-0301"
        assert config.messages == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "{input}"},
        ]
        assert config.temperature == "0.9"
        assert config.n == "2"
        assert config.user_tracking == 1

    def test_list_messages(self) -> None:
        config = AugmentorConfig.from_form_values(
            {"messages": [{"role": "user", "content": "{input}"}, "junk"]}
        )
        assert config.messages == [{"role": "user", "content": "{input}"}]
        assert config.temperature is None

    def test_invalid_sdk_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            AugmentorConfig.from_form_values({"sdk": "guzzle"})


class TestLoadConfig:
    def test_load_fixture(self) -> None:
        config = load_config(FIXTURE)
        assert config.sdk is SdkVariant.OPENAI_PHP
        assert config.model == "gpt-3.5-turbo"
        assert len(config.messages) == 2
        assert config.n == 2
        assert config.user_tracking is True
        assert config.client.base_url == "https://example.test/v1"
        assert config.client.timeout == 30.0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("model: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.yaml"
        path.write_text("sdk: guzzle\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AugmentorConfig()
