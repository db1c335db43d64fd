"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Unit tests for configuration management.

Tests configuration loading, environment substitution and validation.
"""

import pytest

from cumulocity.config.settings import (
    ConnectionConfig,
    CumulocityConfig,
    LoggingConfig,
    MultipartConfig,
    _expand_env_vars,
    _validate_config,
    get_default_config,
    load_config,
)
from cumulocity.exceptions import ConfigurationLoadError, InvalidConfigurationError


class TestConfigurationDataclasses:
    """Test configuration dataclass structures."""

    def test_connection_config_defaults(self):
        config = ConnectionConfig()
        assert config.base_url == ""
        assert config.timeout == 30
        assert config.verify_ssl is True

    def test_multipart_config_defaults(self):
        assert MultipartConfig().boundary == ""

    def test_logging_config_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file == ""
        assert config.json_format is True

    def test_default_config_sections(self):
        config = get_default_config()
        assert isinstance(config, CumulocityConfig)
        assert isinstance(config.connection, ConnectionConfig)


class TestLoadConfig:
    """Test loading configuration from YAML files."""

    def test_missing_file_returns_defaults(self, temp_dir):
        config = load_config(str(temp_dir / "missing.yaml"))
        assert config == get_default_config()

    def test_empty_file_returns_defaults(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == get_default_config()

    def test_loads_all_sections(self, make_config_yaml):
        path = make_config_yaml(
            connection={
                "base_url": "https://example.cumulocity.com",
                "tenant": "t100",
                "username": "admin",
                "password": "secret",
                "timeout": 10,
                "verify_ssl": False,
            },
            multipart={"boundary": "fixed-boundary"},
            logging={"level": "DEBUG", "json_format": False},
        )

        config = load_config(str(path))

        assert config.connection.base_url == "https://example.cumulocity.com"
        assert config.connection.tenant == "t100"
        assert config.connection.timeout == 10
        assert config.connection.verify_ssl is False
        assert config.multipart.boundary == "fixed-boundary"
        assert config.logging.level == "DEBUG"
        assert config.logging.json_format is False

    def test_partial_config_merges_with_defaults(self, make_config_yaml):
        config = load_config(str(make_config_yaml(connection={"base_url": "https://h"})))
        assert config.connection.timeout == 30
        assert config.logging.level == "INFO"

    def test_env_vars_are_expanded(self, make_config_yaml, monkeypatch):
        monkeypatch.setenv("C8Y_BASEURL", "https://env.cumulocity.com")
        monkeypatch.setenv("C8Y_TIMEOUT", "15")
        monkeypatch.delenv("C8Y_TENANT", raising=False)
        path = make_config_yaml(
            connection={
                "base_url": "${C8Y_BASEURL}",
                "tenant": "${C8Y_TENANT:t42}",
                "timeout": "${C8Y_TIMEOUT}",
                "verify_ssl": "${C8Y_VERIFY:true}",
            }
        )

        config = load_config(str(path))

        assert config.connection.base_url == "https://env.cumulocity.com"
        assert config.connection.tenant == "t42"
        assert config.connection.timeout == 15
        assert config.connection.verify_ssl is True

    def test_malformed_yaml_raises(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("connection: [unclosed")
        with pytest.raises(InvalidConfigurationError, match="parse YAML"):
            load_config(str(path))

    def test_non_mapping_top_level_raises(self, temp_dir):
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(InvalidConfigurationError, match="mapping"):
            load_config(str(path))

    def test_bad_value_type_raises(self, make_config_yaml):
        path = make_config_yaml(connection={"timeout": "soon"})
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    def test_validation_failure_raises(self, make_config_yaml):
        path = make_config_yaml(connection={"base_url": "ftp://example.com"})
        with pytest.raises(InvalidConfigurationError, match="http"):
            load_config(str(path))

    def test_null_values_take_defaults(self, temp_dir):
        path = temp_dir / "nulls.yaml"
        path.write_text(
            "connection:\n"
            "  base_url: https://example.cumulocity.com\n"
            "  tenant:\n"
            "  timeout:\n"
            "  verify_ssl: ~\n"
            "multipart:\n"
            "logging:\n"
            "  file: null\n"
        )

        config = load_config(str(path))

        assert config.connection.tenant == ""
        assert config.connection.timeout == 30
        assert config.connection.verify_ssl is True
        assert config.multipart.boundary == ""
        assert config.logging.file == ""
        assert config.logging.level == "INFO"

    @pytest.mark.parametrize(
        "section,value",
        [("connection", ["https://example.cumulocity.com"]), ("logging", "verbose"), ("multipart", 70)],
    )
    def test_non_mapping_section_raises(self, make_config_yaml, section, value):
        path = make_config_yaml(**{section: value})
        with pytest.raises(InvalidConfigurationError, match=f"'{section}' section must be a mapping"):
            load_config(str(path))

    def test_unreadable_file_raises_load_error(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.mkdir()

        with pytest.raises(ConfigurationLoadError, match="Failed to read") as exc_info:
            load_config(str(path))

        assert not isinstance(exc_info.value, InvalidConfigurationError)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestExpandEnvVars:
    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("C8Y_USER", "jdoe")
        value = _expand_env_vars({"a": ["${C8Y_USER}", 3], "b": {"c": "x-${C8Y_USER}"}})
        assert value == {"a": ["jdoe", 3], "b": {"c": "x-jdoe"}}

    def test_unset_without_default_is_empty(self, monkeypatch):
        monkeypatch.delenv("C8Y_NOT_SET", raising=False)
        assert _expand_env_vars("${C8Y_NOT_SET}") == ""


class TestValidateConfig:
    def _config(self, **connection):
        return CumulocityConfig(connection=ConnectionConfig(**connection))

    def test_valid_defaults(self):
        _validate_config(get_default_config())

    def test_non_positive_timeout(self):
        with pytest.raises(InvalidConfigurationError, match="timeout must be positive"):
            _validate_config(self._config(timeout=0))

    def test_username_without_password(self):
        with pytest.raises(InvalidConfigurationError, match="together"):
            _validate_config(self._config(username="admin"))

    def test_token_and_credentials(self):
        with pytest.raises(InvalidConfigurationError, match="mutually exclusive"):
            _validate_config(self._config(username="a", password="b", token="t"))

    def test_boundary_too_long(self):
        config = CumulocityConfig(multipart=MultipartConfig(boundary="x" * 71))
        with pytest.raises(InvalidConfigurationError, match="70 characters"):
            _validate_config(config)

    def test_unknown_log_level(self):
        config = CumulocityConfig(logging=LoggingConfig(level="LOUD"))
        with pytest.raises(InvalidConfigurationError, match="logging level"):
            _validate_config(config)

    def test_lowercase_log_level_is_accepted(self):
        _validate_config(CumulocityConfig(logging=LoggingConfig(level="debug")))
