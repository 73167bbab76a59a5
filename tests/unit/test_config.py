# tests/unit/test_config.py
"""
Unit tests for configuration loading and management.
Tests config loading, merging, env var overrides and validation.
"""

import pytest
from pydantic import ValidationError

from kube_endpoint.config import (
    ApiServerSettings,
    ConnectionSettings,
    KubeEndpointConfig,
    load_config,
)
from kube_endpoint.config.loader import _deep_merge, _get_env_overrides


class TestDeepMerge:
    """Tests for deep dictionary merging."""

    def test_simple_merge(self):
        """Simple non-nested merge."""
        result = _deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self):
        """Nested dictionary merge."""
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        result = _deep_merge(base, {"a": {"y": 10, "z": 20}})
        assert result == {"a": {"x": 1, "y": 10, "z": 20}, "b": 3}
        assert base["a"] == {"x": 1, "y": 2}

    def test_override_non_dict_with_dict(self):
        """Override scalar with dict."""
        assert _deep_merge({"a": 1}, {"a": {"nested": "value"}}) == {
            "a": {"nested": "value"}
        }

    def test_empty_override(self):
        """Empty override dict should preserve defaults."""
        base = {"a": 1, "b": {"x": 2}}
        assert _deep_merge(base, {}) == base


class TestEnvOverrides:
    """Tests for environment variable parsing."""

    def test_nested_keys(self):
        overrides = _get_env_overrides(
            {
                "KUBE_ENDPOINT_API_SERVER__PORT": "6443",
                "KUBE_ENDPOINT_CONNECTION__POD": "web-0",
                "UNRELATED": "x",
            }
        )
        assert overrides == {
            "api_server": {"port": "6443"},
            "connection": {"pod": "web-0"},
        }

    def test_values_stay_strings(self):
        """Numeric-looking pod names must not become ints."""
        overrides = _get_env_overrides({"KUBE_ENDPOINT_CONNECTION__POD": "1234"})
        assert overrides["connection"]["pod"] == "1234"

    def test_empty_key_parts_ignored(self):
        assert _get_env_overrides({"KUBE_ENDPOINT_": "x"}) == {}
        assert _get_env_overrides({"KUBE_ENDPOINT_API_SERVER__": "x"}) == {}


class TestLoadConfig:
    """Tests for multi-source configuration loading."""

    def test_package_defaults(self, tmp_path, clean_env):
        config = load_config(tmp_path)
        assert config.endpoint.max_length == 2048
        assert config.endpoint.separate_fixed_flags is False
        assert config.api_server.port == 8080
        assert config.connection.namespace == "default"
        assert config.connection.pod is None
        assert config.logging.level == "info"

    def test_user_config_overrides_defaults(self, tmp_path, clean_env):
        (tmp_path / "config.yaml").write_text(
            "connection:\n  namespace: prod\n  pod: web-0\n"
            "endpoint:\n  max_length: 4096\n"
        )
        config = load_config(tmp_path)
        assert config.connection.namespace == "prod"
        assert config.connection.pod == "web-0"
        assert config.endpoint.max_length == 4096
        assert config.api_server.hostname == "localhost"

    def test_env_overrides_user_config(self, tmp_path, clean_env):
        (tmp_path / "config.yaml").write_text("api_server:\n  port: 9000\n")
        clean_env.setenv("KUBE_ENDPOINT_API_SERVER__PORT", "6443")
        clean_env.setenv("KUBE_ENDPOINT_API_SERVER__USE_SSL", "true")
        config = load_config(tmp_path)
        assert config.api_server.port == 6443
        assert config.api_server.use_ssl is True

    def test_invalid_yaml_ignored(self, tmp_path, clean_env, capsys):
        (tmp_path / "config.yaml").write_text("connection: [unclosed\n")
        config = load_config(tmp_path)
        assert config.connection.namespace == "default"
        assert "Failed to parse" in capsys.readouterr().err

    def test_invalid_value_rejected(self, tmp_path, clean_env):
        clean_env.setenv("KUBE_ENDPOINT_API_SERVER__PORT", "0")
        with pytest.raises(ValidationError):
            load_config(tmp_path)


class TestModels:
    """Tests for model validation."""

    def test_extra_fields_ignored(self):
        config = KubeEndpointConfig.model_validate({"unknown": {"a": 1}})
        assert config.endpoint.max_length == 2048

    def test_max_length_lower_bound(self):
        with pytest.raises(ValidationError):
            KubeEndpointConfig.model_validate({"endpoint": {"max_length": 10}})

    def test_empty_namespace_rejected(self):
        with pytest.raises(ValidationError):
            ConnectionSettings(namespace="")

    def test_port_range(self):
        with pytest.raises(ValidationError):
            ApiServerSettings(port=70000)
