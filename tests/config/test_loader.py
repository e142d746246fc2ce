"""Tests for configuration loading from YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from tokenspec.config.config import TokConfig
from tokenspec.config.loader import load_config, load_spec, load_yaml_file, merge_configs
from tokenspec.tokenization.spec import TokenizationSpec


class TestMergeConfigs:
    """Tests for merge_configs function."""

    def test_merge_flat_dicts(self) -> None:
        """Test merging flat dictionaries."""
        result = merge_configs({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        """Test deep merge of nested dictionaries."""
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        override = {"b": {"d": 4, "e": 5}}
        assert merge_configs(base, override) == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}}

    def test_merge_override_replaces_non_dict(self) -> None:
        """Test that non-dict values are replaced entirely."""
        assert merge_configs({"a": {"b": 1}}, {"a": 2}) == {"a": 2}

    def test_merge_with_none_values(self) -> None:
        """Test None in the override replaces the base value."""
        result = merge_configs({"a": 1, "b": 2}, {"b": None})
        assert result == {"a": 1, "b": None}

    def test_merge_does_not_mutate_base(self) -> None:
        """Test the base dictionary is left untouched."""
        base = {"a": {"b": 1}}
        merge_configs(base, {"a": {"c": 2}})
        assert base == {"a": {"b": 1}}


class TestLoadYamlFile:
    """Tests for load_yaml_file function."""

    def test_load_valid_yaml(self, config_file: Path) -> None:
        """Test loading a valid YAML file."""
        content = load_yaml_file(config_file)

        assert content["tokenizer"]["strategy"] == "boundary_scan"
        assert content["tokenizer"]["strategy_param"] == "'-"

    def test_load_accepts_str_path(self, config_file: Path) -> None:
        """Test a string path is accepted."""
        assert load_yaml_file(str(config_file))["logging"]["level"] == "INFO"

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as an empty dict."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_yaml_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="not found"):
            load_yaml_file(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises YAMLError."""
        path = tmp_path / "bad.yaml"
        path.write_text("tokenizer: [unclosed", encoding="utf-8")

        with pytest.raises(yaml.YAMLError, match="Failed to parse"):
            load_yaml_file(path)

    def test_non_mapping_top_level(self, tmp_path: Path) -> None:
        """Test a YAML list at the top level is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError, match="Expected a mapping"):
            load_yaml_file(path)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_profile_defaults(self) -> None:
        """Test the default profile without a file."""
        config = load_config(use_env=False)

        assert isinstance(config, TokConfig)
        assert config.tokenizer == TokenizationSpec()

    def test_named_profile(self) -> None:
        """Test a named profile is used as the base."""
        config = load_config(profile="dev", use_env=False)

        assert config.profile == "dev"
        assert config.logging.level == "DEBUG"

    def test_file_overrides_profile(self, config_file: Path) -> None:
        """Test file values are merged over the profile."""
        config = load_config(config_path=config_file, profile="dev", use_env=False)

        assert config.profile == "dev"
        assert config.tokenizer.strategy == "boundary_scan"
        assert config.tokenizer.downcase_text is True
        assert config.tokenizer.trim_tokens is False
        assert config.logging.level == "INFO"

    def test_keyword_overrides(self, config_file: Path) -> None:
        """Test nested keyword overrides take precedence over the file."""
        config = load_config(
            config_path=config_file,
            use_env=False,
            tokenizer__strategy="unicode_word",
            logging__level="ERROR",
        )

        assert config.tokenizer.strategy == "unicode_word"
        assert config.tokenizer.downcase_text is True
        assert config.logging.level == "ERROR"

    def test_env_overrides_file(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test environment variables take precedence over the file."""
        monkeypatch.setenv("TOKSPEC_TOKENIZER__DOWNCASE_TEXT", "false")
        monkeypatch.setenv("TOKSPEC_TOKENIZER__STRATEGY_PARAM", ",")

        config = load_config(config_path=config_file)

        assert config.tokenizer.downcase_text is False
        assert config.tokenizer.strategy_param == ","

    def test_keyword_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test keyword overrides take precedence over the environment."""
        monkeypatch.setenv("TOKSPEC_TOKENIZER__STRATEGY", "unicode_word")

        config = load_config(tokenizer__strategy="split_str")

        assert config.tokenizer.strategy == "split_str"

    def test_env_ignored_when_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test use_env=False skips environment variables."""
        monkeypatch.setenv("TOKSPEC_TOKENIZER__STRATEGY", "unicode_word")

        assert load_config(use_env=False).tokenizer.strategy == "whitespace"

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test invalid field values raise ValidationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("tokenizer:\n  strategy: nonsense\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_config(config_path=path, use_env=False)

    def test_unknown_profile(self) -> None:
        """Test an unknown profile raises ValueError."""
        with pytest.raises(ValueError, match="not found"):
            load_config(profile="prod", use_env=False)


class TestLoadSpec:
    """Tests for load_spec function."""

    def test_top_level_spec(self, tmp_path: Path) -> None:
        """Test a file holding only spec fields."""
        path = tmp_path / "spec.yaml"
        path.write_text(
            "strategy: split_str\nstrategy_param: '|'\ntrim_tokens: true\n",
            encoding="utf-8",
        )

        spec = load_spec(path)

        assert spec == TokenizationSpec(
            strategy="split_str", strategy_param="|", trim_tokens=True
        )

    def test_nested_spec(self, config_file: Path) -> None:
        """Test the spec is taken from the tokenizer section of a config."""
        spec = load_spec(config_file)

        assert spec.strategy == "boundary_scan"
        assert spec.strategy_param == "'-"

    def test_json_spec(self, tmp_path: Path) -> None:
        """Test JSON files load as YAML."""
        path = tmp_path / "spec.json"
        path.write_text('{"strategy": "unicode_word", "filter_pattern": "^\\\\d+$"}')

        spec = load_spec(path)

        assert spec.strategy == "unicode_word"
        assert spec.filter_pattern == r"^\d+$"

    def test_invalid_pattern_loads(self, tmp_path: Path) -> None:
        """Test an unparsable filter pattern is not checked on load."""
        path = tmp_path / "spec.yaml"
        path.write_text("filter_pattern: '[a-'\n", encoding="utf-8")

        assert load_spec(path).filter_pattern == "[a-"

    def test_unknown_field(self, tmp_path: Path) -> None:
        """Test unknown spec fields are rejected."""
        path = tmp_path / "spec.yaml"
        path.write_text("tokenizer_type: whitespace\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_spec(path)
