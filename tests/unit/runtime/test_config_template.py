"""Unit tests for config.yaml loading and environment substitution."""

import os
from pathlib import Path

import pytest

from src.book_api.runtime.config.config_data import (
    AuthConfig,
    ConfigData,
    DatabaseConfig,
)
from src.book_api.runtime.config.config_template import (
    apply_environment_overrides,
    load_config,
    load_templated_yaml,
    substitute_env_vars,
)

_ROOT = Path(__file__).resolve().parents[3]


class TestSubstituteEnvVars:
    """Test ${VAR} placeholder substitution."""

    def test_required_variable(self, monkeypatch):
        """Should substitute a set variable."""
        monkeypatch.setenv("BOOK_TEST_VALUE", "hello")

        assert substitute_env_vars("value: ${BOOK_TEST_VALUE}") == "value: hello"

    def test_required_variable_missing(self, monkeypatch):
        """Should raise when a required variable is not set."""
        monkeypatch.delenv("BOOK_TEST_VALUE", raising=False)

        with pytest.raises(ValueError, match="BOOK_TEST_VALUE"):
            substitute_env_vars("${BOOK_TEST_VALUE}")

    def test_default_used_when_missing(self, monkeypatch):
        """Should fall back to the default after ':-'."""
        monkeypatch.delenv("BOOK_TEST_VALUE", raising=False)

        assert substitute_env_vars("${BOOK_TEST_VALUE:-/api}") == "/api"

    def test_default_ignored_when_set(self, monkeypatch):
        """Should prefer the environment over the default."""
        monkeypatch.setenv("BOOK_TEST_VALUE", "/v2")

        assert substitute_env_vars("${BOOK_TEST_VALUE:-/api}") == "/v2"

    def test_custom_error_message(self, monkeypatch):
        """Should include the custom message after ':?'."""
        monkeypatch.delenv("BOOK_TEST_VALUE", raising=False)

        with pytest.raises(ValueError, match="set a function key"):
            substitute_env_vars("${BOOK_TEST_VALUE:?set a function key}")


class TestApplyEnvironmentOverrides:
    """Test promotion of environment-prefixed variables."""

    def test_promotes_prefixed_variable(self, monkeypatch):
        """Should copy STAGING_FOO to FOO for the staging environment."""
        monkeypatch.setenv("STAGING_BOOK_TEST_VALUE", "promoted")
        monkeypatch.delenv("BOOK_TEST_VALUE", raising=False)

        apply_environment_overrides("staging")
        try:
            assert os.environ["BOOK_TEST_VALUE"] == "promoted"
        finally:
            os.environ.pop("BOOK_TEST_VALUE", None)


class TestLoadTemplatedYaml:
    """Test loading config files."""

    def test_loads_project_config(self):
        """Should load the shipped config.yaml with the test environment."""
        config = load_templated_yaml(_ROOT / "config.yaml")

        assert config.app.environment == "test"
        assert config.app.route_prefix == "/api"
        assert config.database.url == "sqlite://"
        assert config.storage.backend == "table"
        assert config.auth.enabled is True
        assert config.auth.function_keys == ["test-function-key"]
        assert len(config.storage.seed_books) == 2

    def test_unset_function_key_is_dropped(self, monkeypatch):
        """Should drop the placeholder left by an unset function key."""
        monkeypatch.delenv("BOOK_API_FUNCTION_KEY", raising=False)

        config = load_templated_yaml(_ROOT / "config.yaml")

        assert config.auth.function_keys == []

    def test_reads_nested_config_key(self, tmp_path):
        """Should read settings under the top-level config key."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  storage:\n"
            "    backend: memory\n"
            "    partition_key: shelf\n"
        )

        config = load_templated_yaml(path)

        assert config.storage.backend == "memory"
        assert config.storage.partition_key == "shelf"
        assert config.database.url == DatabaseConfig().url

    def test_invalid_values_raise(self, tmp_path):
        """Should report validation failures as ValueError."""
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  storage:\n    backend: blob\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_empty_file_raises(self, tmp_path):
        """Should refuse an empty file."""
        path = tmp_path / "config.yaml"
        path.write_text("")

        with pytest.raises(ValueError):
            load_templated_yaml(path)


class TestLoadConfig:
    """Test the top-level config loader."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Should fall back to defaults when the file does not exist."""
        config = load_config(tmp_path / "absent.yaml")

        assert config == ConfigData()

    def test_path_from_environment(self, tmp_path, monkeypatch):
        """Should honour BOOK_API_CONFIG when no path is given."""
        path = tmp_path / "custom.yaml"
        path.write_text("config:\n  app:\n    route_prefix: /v1\n")
        monkeypatch.setenv("BOOK_API_CONFIG", str(path))

        assert load_config().app.route_prefix == "/v1"


class TestConfigModels:
    """Test individual configuration models."""

    def test_auth_drops_blank_keys(self):
        """Should ignore null and blank function keys."""
        auth = AuthConfig(function_keys=[None, "", "  ", "real"])

        assert auth.function_keys == ["real"]

    def test_auth_null_keys(self):
        """Should treat a null key list as empty."""
        assert AuthConfig(function_keys=None).function_keys == []

    def test_in_memory_database_detection(self):
        """Should recognise in-memory SQLite URLs."""
        assert DatabaseConfig(url="sqlite://").is_in_memory is True
        assert DatabaseConfig(url="sqlite:///:memory:").is_in_memory is True
        assert DatabaseConfig(url="sqlite:///./books.db").is_in_memory is False

    def test_connection_string_uses_password_env_var(self, monkeypatch):
        """Should splice the password from the named variable into the URL."""
        monkeypatch.setenv("BOOK_DB_PASSWORD", "s3cret")
        database = DatabaseConfig(
            url="postgresql://books@db:5432/books",
            password_env_var="BOOK_DB_PASSWORD",
        )

        assert database.connection_string == "postgresql://books:s3cret@db:5432/books"
