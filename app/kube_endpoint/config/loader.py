"""
Configuration loader with YAML and environment variable support.

Priority (highest to lowest):
1. Environment variables: KUBE_ENDPOINT_API_SERVER__PORT=6443
2. User config: --config-dir path / ~/.kube-endpoint/config.yaml
3. Built-in defaults: kube_endpoint/config/defaults/settings.yaml
"""

import os
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from kube_endpoint.config.models import KubeEndpointConfig


# Default config locations
DEFAULT_CONFIG_DIR = Path.home() / ".kube-endpoint"
PACKAGE_DEFAULTS_DIR = Path(__file__).parent / "defaults"

# Environment variable prefix
ENV_PREFIX = "KUBE_ENDPOINT_"
ENV_DELIMITER = "__"


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from 'override' take precedence over 'base'.
    Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found or unparsable."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
        return {}
    if not isinstance(content, dict):
        return {}
    return content


def _get_env_overrides(environ: Optional[dict[str, str]] = None) -> dict[str, Any]:
    """
    Extract configuration overrides from environment variables.

    Environment variables are expected in the format:
    KUBE_ENDPOINT_SECTION__KEY=value

    KUBE_ENDPOINT_ENDPOINT__MAX_LENGTH=4096 -> {"endpoint": {"max_length": "4096"}}
    KUBE_ENDPOINT_CONNECTION__POD=web-0 -> {"connection": {"pod": "web-0"}}

    Values stay strings; pydantic coerces them to the field types, so a
    numeric pod name is not turned into an int.
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        key_path = key[len(ENV_PREFIX) :].lower().split(ENV_DELIMITER)
        if not all(key_path):
            continue

        current = overrides
        for part in key_path[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[key_path[-1]] = value

    return overrides


def load_config(config_dir: Optional[str | Path] = None) -> KubeEndpointConfig:
    """
    Load configuration from multiple sources.

    Args:
        config_dir: Optional path to configuration directory.
                   If not provided, uses ~/.kube-endpoint/

    Returns:
        KubeEndpointConfig: Validated configuration object

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    config_data = _load_yaml_file(PACKAGE_DEFAULTS_DIR / "settings.yaml")

    user_config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
    user_config = _load_yaml_file(user_config_dir / "config.yaml")
    config_data = _deep_merge(config_data, user_config)

    env_overrides = _get_env_overrides()
    config_data = _deep_merge(config_data, env_overrides)

    return KubeEndpointConfig.model_validate(config_data)
