"""Unit tests for configuration loading."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dealdesk.runtime.config.config_data import ConfigData
from dealdesk.runtime.config.config_template import (
    load_templated_config,
    substitute_env_vars,
)
from dealdesk.runtime.context import get_config, load_config, set_config, with_context


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"DB_HOST": "localhost", "DB_PORT": "5432"}):
            text = "postgresql://shop@${DB_HOST}:${DB_PORT}/shop"
            assert substitute_env_vars(text) == "postgresql://shop@localhost:5432/shop"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-sqlite://}") == "sqlite://"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_env_var_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DB_URL: set the database URL"):
                substitute_env_vars("${DB_URL:?set the database URL}")

    def test_text_without_placeholders_unchanged(self):
        assert substitute_env_vars('{"a": "$HOME"}') == '{"a": "$HOME"}'


def _write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadTemplatedConfig:
    """Test cases for load_templated_config."""

    def test_load_json(self, tmp_path: Path):
        path = _write_json(
            tmp_path / "config.json",
            {"ConnectionStrings": {"DefaultConnection": "sqlite:///shop.db"}},
        )

        config = load_templated_config(path)

        assert config.get_connection_string() == "sqlite:///shop.db"
        assert config.connection_string == "sqlite:///shop.db"
        assert config.logging.level == "WARNING"
        assert config.app.environment == "development"

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "ConnectionStrings:\n"
            "  DefaultConnection: postgresql://shop@localhost/shop\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  file: logs/dealdesk.log\n",
            encoding="utf-8",
        )

        config = load_templated_config(path)

        assert config.connection_string == "postgresql://shop@localhost/shop"
        assert config.logging.level == "DEBUG"
        assert config.logging.file == "logs/dealdesk.log"

    def test_env_substitution(self, tmp_path: Path):
        path = _write_json(
            tmp_path / "config.json",
            {"ConnectionStrings": {"DefaultConnection": "${SHOP_DB:-sqlite://}"}},
        )

        with patch.dict(os.environ, {"SHOP_DB": "sqlite:///from-env.db"}):
            assert load_templated_config(path).connection_string == "sqlite:///from-env.db"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_config(tmp_path / "absent.json")

    def test_malformed_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"ConnectionStrings": {', encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing"):
            load_templated_config(path)

    def test_non_mapping_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="top level must be a mapping"):
            load_templated_config(path)

    def test_invalid_values(self, tmp_path: Path):
        path = _write_json(tmp_path / "config.json", {"app": {"environment": "staging"}})

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_config(path)


class TestConnectionStrings:
    def test_missing_default_connection(self):
        with pytest.raises(ValueError, match="ConnectionStrings:DefaultConnection"):
            ConfigData().get_connection_string()

    def test_empty_connection_string(self):
        config = ConfigData(ConnectionStrings={"DefaultConnection": ""})
        with pytest.raises(ValueError):
            _ = config.connection_string

    def test_named_connection(self):
        config = ConfigData(connection_strings={"Reporting": "sqlite:///reports.db"})
        assert config.get_connection_string("Reporting") == "sqlite:///reports.db"


class TestContext:
    def test_with_context_restores_previous_config(self):
        original = get_config()
        override = ConfigData(ConnectionStrings={"DefaultConnection": "sqlite://"})

        with with_context(override):
            assert get_config() is override

        assert get_config() is original

    def test_load_config_sets_current(self, tmp_path: Path):
        original = get_config()
        path = _write_json(
            tmp_path / "config.json",
            {"ConnectionStrings": {"DefaultConnection": "sqlite:///loaded.db"}},
        )
        try:
            config = load_config(path)
            assert get_config() is config
        finally:
            set_config(original)
