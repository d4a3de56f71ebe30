"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import (
    apply_environment_overrides,
    load_config,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            text = "Server running at http://${HOST}:${PORT}/api"
            assert substitute_env_vars(text) == "Server running at http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_env_var_with_custom_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError,
                match="Required environment variable MISSING_VAR: needed for the store",
            ):
                substitute_env_vars("${MISSING_VAR:?needed for the store}")

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("plain: value") == "plain: value"


class TestEnvironmentOverrides:
    def test_prefixed_variables_are_copied(self):
        with patch.dict(
            os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://db/prod"}, clear=True
        ):
            apply_environment_overrides("production")

            assert os.environ["DATABASE_URL"] == "postgresql://db/prod"

    def test_other_environments_are_ignored(self):
        with patch.dict(os.environ, {"TEST_STORE_BACKEND": "memory"}, clear=True):
            apply_environment_overrides("development")

            assert "STORE_BACKEND" not in os.environ


class TestLoadTemplatedYaml:
    def _write(self, tmp_path: Path, content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    def test_load_full_config(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            """
config:
  app:
    environment: test
    port: ${APP_PORT:-4000}
  store:
    backend: ${STORE_BACKEND:-memory}
  database:
    url: sqlite://
""",
        )

        with patch.dict(os.environ, {"APP_ENVIRONMENT": "test"}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.environment == "test"
        assert config.app.port == 4000
        assert config.store.backend == "memory"
        assert config.database.url == "sqlite://"

    def test_env_values_override_defaults(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            "config:\n  store:\n    backend: ${STORE_BACKEND:-memory}\n",
        )

        with patch.dict(os.environ, {"STORE_BACKEND": "database"}, clear=True):
            config = load_templated_yaml(path)

        assert config.store.backend == "database"

    def test_invalid_value_raises(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  store:\n    backend: redis\n")

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="Invalid configuration"):
                load_templated_yaml(path)

    def test_empty_file_raises(self, tmp_path: Path):
        path = self._write(tmp_path, "")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_malformed_yaml_raises(self, tmp_path: Path):
        path = self._write(tmp_path, "config: [unclosed\n")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")

    def test_load_config_falls_back_to_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "absent.yaml")

        assert config == ConfigData()

    def test_repository_config_file_loads(self):
        path = Path(__file__).resolve().parents[3] / "config.yaml"

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path)

        assert config.store.backend == "database"
        assert config.app.cors.origins == ["*"]
        assert config.logging.file is None
