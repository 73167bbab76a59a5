"""
Pydantic models for endpoint configuration.

Configuration is loaded from YAML files and environment variables, then
passed explicitly to the builder instead of living in module globals.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Default bound for escaped components, paths and endpoints, terminator included
DEFAULT_MAX_LENGTH = 2048


class EndpointSettings(BaseModel):
    """Endpoint construction limits and formatting options."""

    max_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        ge=64,
        description="Maximum length of an escaped component, path or endpoint, "
        "including the terminator",
    )
    separate_fixed_flags: bool = Field(
        default=False,
        description="Insert '&' between the last dynamic parameter and the "
        "fixed stdin/stdout/tty flags",
    )


class ApiServerSettings(BaseModel):
    """Kubernetes API server address used for WebSocket URLs."""

    hostname: str = Field(
        default="localhost",
        min_length=1,
        description="API server hostname or IP address",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="API server port",
    )
    use_ssl: bool = Field(
        default=False,
        description="Connect with wss:// instead of ws://",
    )


class ConnectionSettings(BaseModel):
    """Identifiers of the pod and container to attach to."""

    namespace: str = Field(
        default="default",
        description="Namespace containing the pod",
    )
    pod: Optional[str] = Field(
        default=None,
        description="Name of the pod",
    )
    container: Optional[str] = Field(
        default=None,
        description="Container within the pod (server default if unset)",
    )
    exec_command: Optional[str] = Field(
        default=None,
        description="Command to run; attaches to the main process if unset",
    )

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Reject an empty namespace, which would collapse a path segment."""
        if not v:
            raise ValueError("namespace must not be empty")
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Logging level",
    )
    file: Optional[str] = Field(
        default=None,
        description="Optional log file path",
    )


class KubeEndpointConfig(BaseModel):
    """Main configuration container."""

    endpoint: EndpointSettings = Field(default_factory=EndpointSettings)
    api_server: ApiServerSettings = Field(default_factory=ApiServerSettings)
    connection: ConnectionSettings = Field(default_factory=ConnectionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Allow extra fields to be ignored (forward compatibility)
    model_config = ConfigDict(extra="ignore")
