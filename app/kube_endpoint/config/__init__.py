"""
Configuration system for the endpoint builder.

Exports:
    KubeEndpointConfig: Main configuration container
    load_config: Load configuration from YAML/env
"""

from kube_endpoint.config.models import (
    ApiServerSettings,
    ConnectionSettings,
    EndpointSettings,
    KubeEndpointConfig,
    LoggingSettings,
)
from kube_endpoint.config.loader import load_config

__all__ = [
    "KubeEndpointConfig",
    "EndpointSettings",
    "ApiServerSettings",
    "ConnectionSettings",
    "LoggingSettings",
    "load_config",
]
